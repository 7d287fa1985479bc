"""
Exemplo canônico do Pipegen.

Configuração de referência (filtro + agregação) e driver que imprime a
expressão traduzida:

    my_pipeline = ( my_database | filter(age > 18) | aggregate(sales, SUM) | my_data_warehouse )
"""

from __future__ import annotations

from typing import Any, Dict

from pipegen.core.pipeline.types import PipelineConfig
from pipegen.core.translator import PipelineGenerator

EXAMPLE_CONFIG: Dict[str, Any] = {
    "pipeline_name": "my_pipeline",
    "data_source": "my_database",
    "data_transformations": [
        {
            "type": "filter",
            "config": {"column": "age", "operator": ">", "value": 18},
        },
        {
            "type": "aggregation",
            "config": {"column": "sales", "function": "SUM"},
        },
    ],
    "data_sink": "my_data_warehouse",
}


def example_config() -> PipelineConfig:
    return PipelineConfig.from_dict(EXAMPLE_CONFIG)


def main() -> str:
    generator = PipelineGenerator(example_config())
    pipeline_code = generator.generate_pipeline()
    print(pipeline_code)
    return pipeline_code
