"""
Pipegen — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Pipegen.
Erros são considerados artefatos de domínio e fazem parte do contrato
operacional do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipegenErrorPayload:
    """
    Payload canônico de erro do Pipegen.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica se a tradução está bloqueada aguardando
      decisão humana (sem auto-correção, sem fallback silencioso).
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        # o chamador deve garantir que details seja serializável
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Tradução
UNKNOWN_TRANSFORMATION_TYPE = "UNKNOWN_TRANSFORMATION_TYPE"

# Configuração
INVALID_PIPELINE_CONFIG = "INVALID_PIPELINE_CONFIG"

# Fallback
TRANSLATION_ERROR = "TRANSLATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unknown_transformation_type(
    *,
    transformation_type: Any,
    index: Optional[int] = None,
    known_types: Optional[List[str]] = None,
    hint: str = "Use um dos tipos de transformação suportados ou remova a transformação da configuração.",
) -> PipegenErrorPayload:
    return PipegenErrorPayload(
        type=UNKNOWN_TRANSFORMATION_TYPE,
        message=f"Unknown transformation type: {transformation_type}",
        details={
            "transformation_type": transformation_type,
            "index": index,
            "known_types": list(known_types or []),
        },
        hint=hint,
        decision_required=False,
    )


def invalid_pipeline_config(
    *,
    message: str = "Configuração de pipeline inválida",
    source: Optional[str] = None,
    exc_type: Optional[str] = None,
    hint: str = "Revise o arquivo de configuração (campos obrigatórios, formato e tipos) antes de reexecutar.",
) -> PipegenErrorPayload:
    return PipegenErrorPayload(
        type=INVALID_PIPELINE_CONFIG,
        message=message,
        details={
            "source": source,
            "exc_type": exc_type,
        },
        hint=hint,
        decision_required=False,
    )


def error_from_exception(exc: Exception) -> PipegenErrorPayload:
    """Converte exceções em PipegenErrorPayload (serializável, acionável).

    Regras:
    - PipegenException: já vem com message/details/hint/decision_required.
    - ConfigError: INVALID_PIPELINE_CONFIG com a mensagem original.
    - Outras exceções: TRANSLATION_ERROR sem expor stack trace.
    """
    # imports locais: errors não deve depender de config em tempo de import
    from .config.errors import ConfigError
    from .exceptions import PipegenException, UnknownTransformationType

    if isinstance(exc, UnknownTransformationType):
        hint = {"hint": exc.hint} if exc.hint else {}
        return unknown_transformation_type(
            transformation_type=exc.transformation_type,
            index=exc.details.get("index"),
            known_types=exc.details.get("known_types"),
            **hint,
        )

    if isinstance(exc, PipegenException):
        return PipegenErrorPayload(
            type=exc.__class__.__name__,
            message=exc.message or "Erro de tradução",
            details=dict(exc.details or {}),
            hint=exc.hint,
            decision_required=bool(exc.decision_required),
        )

    if isinstance(exc, ConfigError):
        return invalid_pipeline_config(
            message=str(exc) or "Configuração de pipeline inválida",
            exc_type=exc.__class__.__name__,
        )

    return PipegenErrorPayload(
        type=TRANSLATION_ERROR,
        message=str(exc) or "Erro inesperado durante a tradução",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique a configuração do pipeline",
        decision_required=False,
    )
