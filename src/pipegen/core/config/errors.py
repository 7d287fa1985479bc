# src/pipegen/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Pipegen.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a resolução e a conversão de configuração de pipeline.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de tradução

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do tradutor, do Manifest ou de UI
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Pipegen.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas de leitura de arquivos e falhas de tradução.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não se tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Listas ou valores escalares no root são inválidos e não são
    normalizados nem encapsulados.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"data_source": "my_database"}
        - override: {"data_source": {"name": "other"}}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class MissingPipelineFieldError(ConfigError):
    """
    Exceção levantada quando um campo obrigatório de topo
    (`pipeline_name`, `data_source`, `data_sink`) está ausente
    no dicionário convertido em `PipelineConfig`.

    Limites explícitos:
        - Não valida o conteúdo das transformações
        - Não valida se os valores são strings não vazias
    """

    def __init__(self, field_name: str):
        super().__init__(f"Campo obrigatório ausente na configuração do pipeline: {field_name}")
        self.field_name = field_name


class InvalidTransformationEntryError(ConfigError):
    """
    Exceção levantada quando uma entrada de `data_transformations`
    não é um mapeamento (`{type, config}`).

    O tipo declarado dentro da entrada não é validado aqui; tipos
    desconhecidos falham apenas na tradução.
    """

    def __init__(self, *, index: int, received: str):
        super().__init__(
            f"data_transformations[{index}] deve ser um mapeamento, recebido: {received}"
        )
        self.index = index
