# src/pipegen/core/config/__init__.py

"""
Camada de configuração do Pipegen.

Este pacote contém os utilitários responsáveis por carregar, mesclar e
identificar configurações de pipeline a partir de arquivos.

A configuração no Pipegen é:
    - declarativa
    - determinística
    - explicitamente versionável

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Conversão do dicionário resolvido em `PipelineConfig`
    - Geração de hash canônico para rastreabilidade

Invariantes:
    - A configuração resolvida é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não valida semântica de transformações
    - Não traduz pipelines
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidTransformationEntryError,
    MissingPipelineFieldError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config, load_pipeline_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidTransformationEntryError",
    "MissingPipelineFieldError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_pipeline_config",
]
