# src/pipegen/core/traceability/manifest.py
"""
Manifest v1 — rastreabilidade de traduções no Pipegen.

O Manifest consolida, de forma determinística e auditável:
    - metadados da tradução (run)
    - hash canônico da configuração de entrada
    - resultado da tradução (hash da expressão ou erro estruturado)
    - Event Log ordenado de eventos explícitos

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - Toda mutação ocorre por chamadas explícitas da API
    - O Manifest é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico
    - O Manifest não guarda a expressão em texto, apenas seu hash

Limites explícitos:
    - Não traduz pipelines
    - Não realiza migração de versões de schema
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pipegen.core.config.hashing import compute_text_hash
from pipegen.core.errors import PipegenErrorPayload

MANIFEST_VERSION = "1"


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """
    Normaliza um timestamp para timezone-aware em UTC.

    Timestamps timezone-naive são assumidos como UTC; os demais são
    convertidos para UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


@dataclass
class TranslationManifest:
    """
    Manifest v1 — registro de uma tradução de pipeline.

    Campos principais:
        - run: metadados (run_id, started_at, pipegen_version, manifest_version)
        - inputs: hash semântico da configuração
        - output: status e metadados do resultado
        - events: Event Log ordenado

    Invariantes:
        - `events` é sempre uma lista ordenada
        - `output["status"]` é "pending", "success" ou "failed"
    """
    run: Dict[str, Any]
    inputs: Dict[str, Any]
    output: Dict[str, Any] = field(default_factory=lambda: {"status": "pending"})
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run": dict(self.run),
            "inputs": dict(self.inputs),
            "output": dict(self.output),
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslationManifest":
        """
        Reconstrói um Manifest a partir de sua representação em dicionário.

        Campos ausentes são inicializados com valores vazios; não há
        validação de schema nem migração.
        """
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            output=dict(data.get("output", {}) or {"status": "pending"}),
            events=[dict(e) for e in (data.get("events", []) or [])],
        )


def create_manifest(
    *,
    run_id: str,
    started_at: datetime,
    pipegen_version: str,
    config_hash: str,
) -> TranslationManifest:
    """
    Cria o Manifest inicial de uma tradução.

    ⚠️ Esta função **não emite eventos implicitamente**: o Event Log
    inicia vazio.

    Args:
        run_id (str): Identificador único da tradução.
        started_at (datetime): Timestamp de início.
        pipegen_version (str): Versão do Pipegen utilizada.
        config_hash (str): Hash canônico da configuração de entrada.

    Returns:
        TranslationManifest: Manifest inicializado.
    """
    return TranslationManifest(
        run={
            "run_id": run_id,
            "started_at": _iso(started_at),
            "pipegen_version": pipegen_version,
            "manifest_version": MANIFEST_VERSION,
        },
        inputs={"config_hash": config_hash},
        output={"status": "pending"},
        events=[],
    )


def add_event(
    manifest: TranslationManifest,
    *,
    event_type: str,
    ts: datetime,
    stage_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Adiciona um evento explícito ao Event Log do Manifest.

    A ordem do Event Log reflete a ordem de chamada; eventos não são
    reordenados nem deduplicados.
    """
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if stage_id is not None:
        ev["stage_id"] = stage_id
    if payload is not None:
        ev["payload"] = payload
    manifest.events.append(ev)


_CONTEXT_EVENT_KEYS = ("run_id", "stage_id", "level", "message", "timestamp")


def add_context_events(manifest: TranslationManifest, events: Iterable[Mapping[str, Any]]) -> None:
    """
    Copia os eventos estruturados de um `TranslationContext` para o Event Log.

    Mapeamento:
        - `message`   → `event_type`
        - `stage_id`  → `stage_id`
        - `timestamp` → `timestamp` (normalizado para UTC)
        - `level` e campos extras → `payload`
    """
    for ev in events:
        payload = {"level": ev.get("level")}
        payload.update({k: v for k, v in ev.items() if k not in _CONTEXT_EVENT_KEYS})
        add_event(
            manifest,
            event_type=ev["message"],
            ts=datetime.fromisoformat(ev["timestamp"]),
            stage_id=ev.get("stage_id"),
            payload=payload,
        )


def record_translation(
    manifest: TranslationManifest,
    *,
    pipeline_name: str,
    expression: str,
    stage_count: int,
    ts: datetime,
    warnings: Optional[List[str]] = None,
) -> None:
    """Registra o sucesso da tradução (hash da expressão) em `output`."""
    manifest.output = {
        "status": "success",
        "pipeline_name": pipeline_name,
        "expression_sha256": compute_text_hash(expression),
        "stage_count": stage_count,
        "warnings": list(warnings or []),
        "finished_at": _iso(ts),
    }


def record_failure(
    manifest: TranslationManifest,
    *,
    error: PipegenErrorPayload,
    ts: datetime,
) -> None:
    """Registra a falha da tradução com o erro estruturado (sem stack trace)."""
    manifest.output = {
        "status": "failed",
        "error": error.to_dict(),
        "finished_at": _iso(ts),
    }


def save_manifest(manifest: TranslationManifest, path: Path) -> None:
    """
    Persiste o Manifest em JSON determinístico (chaves ordenadas, UTF-8).

    Diretórios pais são criados quando necessário.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(manifest.to_dict(), ensure_ascii=False, indent=2, sort_keys=True, default=str),
        encoding="utf-8",
    )


def load_manifest(path: Path) -> TranslationManifest:
    """
    Carrega um Manifest persistido a partir de um arquivo JSON.

    Raises:
        OSError: Em caso de falha de leitura do arquivo.
        json.JSONDecodeError: Em caso de JSON inválido.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return TranslationManifest.from_dict(data)
