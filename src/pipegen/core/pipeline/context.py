"""
Contexto de uma tradução de pipeline.

Este módulo define o `TranslationContext`, a estrutura opcional passada
ao tradutor para coletar eventos estruturados e warnings de uma única
tradução.

Princípios fundamentais:
    - Isolamento por tradução (cada chamada recebe seu próprio contexto)
    - O contexto nunca altera a expressão gerada
    - Ausência de estado global compartilhado

Invariantes:
    - Eventos sempre incluem `run_id`, `stage_id`, `level` e `timestamp`
    - Warnings são agrupados por `stage_id`

Limites explícitos:
    - Não traduz nem renderiza
    - Não persiste dados automaticamente
    - Não registra eventos no Manifest
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

PIPELINE_STAGE_ID = "pipeline"


def stage_id_for(index: int) -> str:
    """Identificador estável de uma transformação pela posição."""
    return f"data_transformations[{index}]"


@dataclass
class TranslationContext:
    """
    Contexto compartilhado de uma tradução.

    Consolida:
        - identidade da tradução (run_id, created_at)
        - eventos estruturados (equivalente a log)
        - warnings não fatais por estágio (ex.: campo ausente)
    """
    run_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, stage_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "stage_id": stage_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage_id: str, message: str) -> None:
        if stage_id not in self.warnings:
            self.warnings[stage_id] = []
        self.warnings[stage_id].append(message)

    def all_warnings(self) -> List[str]:
        return [f"{sid}: {msg}" for sid, msgs in self.warnings.items() for msg in msgs]
