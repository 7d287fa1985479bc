"""
Tradutor do Pipegen.

Componentes principais:
    - builder    → config → árvore de expressão
    - translator → `PipelineTranslator`, `translate_pipeline`, `PipelineGenerator`

Separação explícita entre montagem (estrutura) e renderização (texto).
"""

from .builder import build_expression
from .translator import PipelineGenerator, PipelineTranslator, translate_pipeline

__all__ = [
    "PipelineGenerator",
    "PipelineTranslator",
    "build_expression",
    "translate_pipeline",
]
