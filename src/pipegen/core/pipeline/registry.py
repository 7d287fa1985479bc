"""
Registro de tipos de transformação conhecidos pelo tradutor.

Este módulo define o `TransformationRegistry`, que associa cada valor
de `type` a uma variante tipada de payload. O registry delimita o
conjunto fechado de tipos aceitos: qualquer tipo fora dele falha com
`UnknownTransformationType`.

Responsabilidades do módulo:
    - Validar unicidade de tipos registrados
    - Preservar a ordem de registro (usada em mensagens e hints)
    - Converter `TransformationSpec` na variante correspondente

Invariantes:
    - Cada tipo registrado é uma string não vazia e única
    - `known_types()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não renderiza fragmentos
    - Não valida campos de `config`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from pipegen.core.exceptions import UnknownTransformationType

from .transformations import AggregationTransformation, FilterTransformation, Transformation
from .types import TransformationSpec

PayloadParser = Callable[[TransformationSpec], Transformation]


class DuplicateTransformationTypeError(ValueError):
    """
    Exceção levantada quando um mesmo tipo de transformação é registrado
    duas vezes no `TransformationRegistry`.

    Nenhum tipo é sobrescrito silenciosamente.
    """


@dataclass
class TransformationRegistry:
    """
    Registro canônico de tipos de transformação.

    Decisões arquiteturais:
        - A ordem de inserção é preservada separadamente
        - Tipos são comparados por igualdade exata (case-sensitive)
        - Um tipo não registrado é erro de tradução, não de configuração
    """

    _parsers: Dict[str, PayloadParser] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register(self, type_name: str, parser: PayloadParser) -> None:
        if not isinstance(type_name, str) or not type_name.strip():
            raise ValueError("transformation type must be a non-empty string")

        if type_name in self._parsers:
            raise DuplicateTransformationTypeError(f"Duplicate transformation type: {type_name}")

        self._parsers[type_name] = parser
        self._order.append(type_name)

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name in self._parsers

    def known_types(self) -> List[str]:
        return list(self._order)

    def parse(self, spec: TransformationSpec, *, index: Optional[int] = None) -> Transformation:
        """
        Converte a transformação declarada em sua variante tipada.

        Raises:
            UnknownTransformationType: Se `spec.type` não estiver registrado.
        """
        type_name = spec.type
        parser = self._parsers.get(type_name) if isinstance(type_name, str) else None
        if parser is None:
            raise UnknownTransformationType.for_type(
                type_name, index=index, known_types=self.known_types()
            )
        return parser(spec)


def default_registry() -> TransformationRegistry:
    """Registry com os tipos suportados: `filter` e `aggregation`."""
    registry = TransformationRegistry()
    registry.register(FilterTransformation.type, FilterTransformation.from_spec)
    registry.register(AggregationTransformation.type, AggregationTransformation.from_spec)
    return registry
