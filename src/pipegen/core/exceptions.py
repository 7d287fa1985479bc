"""
Pipegen — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Pipegen.

Objetivo:
- Permitir que o tradutor levante exceções semânticas tipadas
- Facilitar o mapeamento determinístico para PipegenErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Exceções devem carregar apenas dados estruturados (serializáveis).
- Exceções não são frozen: o interpretador precisa atribuir `__traceback__`
  ao relançá-las (ex.: dentro de `contextlib.contextmanager`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(eq=False)
class PipegenException(Exception):
    """Base class para exceções internas do Pipegen.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Tradução
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownTransformationType(PipegenException):
    """Tipo de transformação fora do conjunto conhecido pelo tradutor."""

    @classmethod
    def for_type(
        cls,
        transformation_type: Any,
        *,
        index: Optional[int] = None,
        known_types: Optional[List[str]] = None,
    ) -> "UnknownTransformationType":
        known = list(known_types or [])
        return cls(
            message=f"Unknown transformation type: {transformation_type}",
            details={
                "transformation_type": transformation_type,
                "index": index,
                "known_types": known,
            },
            hint=f"Tipos suportados: {', '.join(known)}" if known else None,
        )

    @property
    def transformation_type(self) -> Any:
        return self.details.get("transformation_type")
