"""
Tipos canônicos do pipeline do Pipegen.

Este módulo define as estruturas e enums fundamentais que descrevem
um pipeline nomeado antes da tradução.

Componentes principais:
    - TransformationType → enum do conjunto fechado de tipos conhecidos
    - TransformationSpec → transformação declarada (tipo + config livre)
    - PipelineConfig     → pipeline nomeado (origem, transformações, destino)

Princípios fundamentais:
    - Estruturas são imutáveis após construídas
    - A ordem das transformações é semântica e preservada
    - Nenhuma lógica de tradução vive neste módulo

Invariantes:
    - `data_transformations` é sempre uma tupla (vazia por padrão)
    - `TransformationSpec.config` é sempre um mapeamento somente-leitura

Limites explícitos:
    - Não valida se `type` pertence ao conjunto conhecido
    - Não valida o conteúdo de `config`
    - Não valida se nomes são strings não vazias
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Sequence, Tuple

from pipegen.core.config.errors import InvalidTransformationEntryError, MissingPipelineFieldError


class TransformationType(str, Enum):
    """
    Tipos de transformação conhecidos pelo tradutor.

    Os valores são strings para casar diretamente com o campo `type`
    declarado em arquivos YAML/JSON.

    Tipos definidos:
        - FILTER: filtro por coluna, operador e valor
        - AGGREGATION: agregação de uma coluna por função
    """
    FILTER = "filter"
    AGGREGATION = "aggregation"


def _freeze_mapping(value: Any) -> Mapping[str, Any]:
    if isinstance(value, MappingProxyType):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    # config ausente ou não-mapeamento: campos lidos como vazios
    return MappingProxyType({})


@dataclass(frozen=True)
class TransformationSpec:
    """
    Transformação declarada em um pipeline.

    Campos:
        - type: tipo declarado (ex.: "filter", "aggregation")
        - config: mapeamento livre cujo formato depende de `type`

    Decisões arquiteturais:
        - `config` ausente, `None` ou não-mapeamento vira mapeamento vazio
        - `config` é armazenado como `MappingProxyType` (somente leitura)
        - Campos ausentes em `config` não são erro estrutural
    """
    type: str
    config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", _freeze_mapping(self.config))

    def get(self, key: str) -> Any:
        """Lê um campo de `config`; ausente → None."""
        return self.config.get(key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, index: int = 0) -> "TransformationSpec":
        if not isinstance(data, Mapping):
            raise InvalidTransformationEntryError(index=index, received=type(data).__name__)
        return cls(type=data.get("type"), config=data.get("config"))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "config": dict(self.config)}


@dataclass(frozen=True)
class PipelineConfig:
    """
    Configuração imutável de um pipeline nomeado.

    Campos:
        - pipeline_name: nome do pipeline (lado esquerdo da expressão)
        - data_source: origem dos dados
        - data_sink: destino dos dados
        - data_transformations: transformações em ordem (opcional)

    Invariantes:
        - Uma instância nunca é alterada após criada
        - `data_transformations` é sempre uma tupla de `TransformationSpec`
    """
    pipeline_name: str
    data_source: str
    data_sink: str
    data_transformations: Tuple[TransformationSpec, ...] = ()

    def __post_init__(self) -> None:
        raw: Sequence[Any] = self.data_transformations or ()
        specs = tuple(
            t if isinstance(t, TransformationSpec) else TransformationSpec.from_dict(t, index=i)
            for i, t in enumerate(raw)
        )
        object.__setattr__(self, "data_transformations", specs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PipelineConfig":
        """
        Constrói um `PipelineConfig` a partir do formato de dicionário.

        Raises:
            MissingPipelineFieldError: Se faltar um campo obrigatório de topo.
            InvalidTransformationEntryError: Se uma transformação não for um mapeamento.
        """
        for required in ("pipeline_name", "data_source", "data_sink"):
            if required not in data:
                raise MissingPipelineFieldError(required)

        return cls(
            pipeline_name=data["pipeline_name"],
            data_source=data["data_source"],
            data_sink=data["data_sink"],
            data_transformations=tuple(data.get("data_transformations") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pipeline_name": self.pipeline_name,
            "data_source": self.data_source,
            "data_transformations": [t.to_dict() for t in self.data_transformations],
            "data_sink": self.data_sink,
        }
