"""
Fixtures compartilhados para testes do Pipegen.

Este módulo define fixtures reutilizáveis que fornecem:
- a configuração de exemplo (filtro + agregação) em dicionário e YAML
- um override local em YAML
- um `TranslationContext` determinístico

Decisões arquiteturais:
    - Configurações são fornecidas como dicionários ou strings, sem I/O
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos e isolados por teste
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Configuração de pipeline
# =====================================================

@pytest.fixture
def example_config_dict() -> dict:
    """
    Configuração de referência: `my_database` → filtro → agregação → `my_data_warehouse`.

    Returns:
        dict: Configuração no formato de dicionário (mesmo formato dos arquivos).
    """
    return {
        "pipeline_name": "my_pipeline",
        "data_source": "my_database",
        "data_transformations": [
            {"type": "filter", "config": {"column": "age", "operator": ">", "value": 18}},
            {"type": "aggregation", "config": {"column": "sales", "function": "SUM"}},
        ],
        "data_sink": "my_data_warehouse",
    }


@pytest.fixture
def example_pipeline_config(example_config_dict):
    from pipegen.core.pipeline.types import PipelineConfig
    return PipelineConfig.from_dict(example_config_dict)


@pytest.fixture
def example_expression_text() -> str:
    return (
        "my_pipeline = ( my_database | filter(age > 18) | "
        "aggregate(sales, SUM) | my_data_warehouse )"
    )


@pytest.fixture
def pipeline_defaults_yaml() -> str:
    """
    YAML equivalente a `example_config_dict`, usado como arquivo de defaults.

    Returns:
        str: Conteúdo YAML da configuração base.
    """
    return """\
pipeline_name: my_pipeline
data_source: my_database
data_transformations:
  - type: filter
    config:
      column: age
      operator: ">"
      value: 18
  - type: aggregation
    config:
      column: sales
      function: SUM
data_sink: my_data_warehouse
"""


@pytest.fixture
def pipeline_local_yaml() -> str:
    """
    Override local: troca o destino e substitui a lista de transformações.

    Listas são sobrescritas por inteiro no deep-merge, então o resultado
    tem apenas a agregação declarada aqui.
    """
    return """\
data_sink: staging_warehouse
data_transformations:
  - type: aggregation
    config:
      column: revenue
      function: AVG
"""


# =====================================================
# Contexto de tradução
# =====================================================

@pytest.fixture
def translation_ctx():
    from pipegen.core.pipeline.context import TranslationContext
    return TranslationContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )
