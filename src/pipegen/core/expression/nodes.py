"""
Árvore de expressão de pipeline.

A tradução produz primeiro uma estrutura (origem → estágios → destino)
e só depois a renderiza em texto. Isso mantém a montagem do pipeline
separada da gramática textual de saída.

Invariantes:
    - `stages` preserva a ordem de `data_transformations`
    - `StageNode.index` é a posição original da transformação
    - Nós são imutáveis
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from pipegen.core.pipeline.transformations import Transformation


@dataclass(frozen=True)
class SourceNode:
    name: str


@dataclass(frozen=True)
class SinkNode:
    name: str


@dataclass(frozen=True)
class StageNode:
    """Uma transformação já convertida em variante tipada."""
    index: int
    type: str
    payload: Transformation

    @property
    def fragment(self) -> str:
        return self.payload.fragment()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "type": self.type,
            "fragment": self.fragment,
            "missing_fields": self.payload.missing_fields(),
        }


@dataclass(frozen=True)
class PipelineExpression:
    name: str
    source: SourceNode
    stages: Tuple[StageNode, ...]
    sink: SinkNode

    def fragments(self) -> List[str]:
        return [stage.fragment for stage in self.stages]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "source": self.source.name,
            "stages": [stage.to_dict() for stage in self.stages],
            "sink": self.sink.name,
        }
