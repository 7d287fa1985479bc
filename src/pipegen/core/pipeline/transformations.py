"""
Variantes tipadas de transformação (união etiquetada por `type`).

Cada tipo conhecido possui um payload próprio, com campos explícitos,
construído a partir de um `TransformationSpec`:

    - FilterTransformation      → filter(<column> <operator> <value>)
    - AggregationTransformation → aggregate(<column>, <function>)

Decisões arquiteturais:
    - Campos ausentes em `config` viram `None` e são renderizados como
      string vazia (sem guarda, sem erro)
    - Valores são interpolados verbatim, sem escaping nem coerção
    - `bool` é renderizado como `true`/`false`
    - `float` inteiro é renderizado sem parte decimal (`18.0` → `18`)
    - `missing_fields()` expõe os campos ausentes para registro de warnings

Limites explícitos:
    - Não valida operadores, funções ou nomes de coluna
    - Não executa a transformação
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List, Tuple, Union

from .types import TransformationSpec, TransformationType


def render_value(value: Any) -> str:
    """Renderiza um valor de config para interpolação na expressão."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 18.0 -> "18"
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class _TransformationPayload:
    fields: ClassVar[Tuple[str, ...]] = ()
    type: ClassVar[str] = ""

    @classmethod
    def from_spec(cls, spec: TransformationSpec):
        return cls(**{name: spec.get(name) for name in cls.fields})

    def missing_fields(self) -> List[str]:
        return [name for name in self.fields if getattr(self, name) is None]

    def fragment(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class FilterTransformation(_TransformationPayload):
    column: Any = None
    operator: Any = None
    value: Any = None

    fields: ClassVar[Tuple[str, ...]] = ("column", "operator", "value")
    type: ClassVar[str] = TransformationType.FILTER.value

    def fragment(self) -> str:
        return (
            f"filter({render_value(self.column)} "
            f"{render_value(self.operator)} "
            f"{render_value(self.value)})"
        )


@dataclass(frozen=True)
class AggregationTransformation(_TransformationPayload):
    column: Any = None
    function: Any = None

    fields: ClassVar[Tuple[str, ...]] = ("column", "function")
    type: ClassVar[str] = TransformationType.AGGREGATION.value

    def fragment(self) -> str:
        return f"aggregate({render_value(self.column)}, {render_value(self.function)})"


Transformation = Union[FilterTransformation, AggregationTransformation]
