# src/pipegen/__init__.py
"""
Pipegen — gerador declarativo de expressões de pipeline de dados.

Este pacote raiz define o namespace público do Pipegen, uma biblioteca
que recebe a configuração de um pipeline nomeado (origem, transformações
opcionais e destino) e produz sua representação textual.

Princípios centrais:
    - A tradução é uma função pura da configuração
    - A mesma configuração sempre produz a mesma expressão
    - Tipos de transformação formam um conjunto fechado e explícito
    - Falhas estruturais (tipo desconhecido) são explícitas e tipadas

Arquitetura em alto nível:
    - core.config       → carregamento, merge e hashing de configuração
    - core.pipeline     → modelo de dados, registry de transformações e contexto
    - core.expression   → árvore de expressão e renderização textual
    - core.translator   → tradução config → expressão → texto
    - core.traceability → Manifest de tradução para auditoria

Limites explícitos:
    - Não executa o pipeline gerado
    - Não valida semântica de colunas, operadores ou funções
    - A saída é uma string não interpretada
"""
# src/pipegen/__init__.py
from .core.exceptions import UnknownTransformationType
from .core.pipeline.types import PipelineConfig, TransformationSpec, TransformationType
from .core.translator import PipelineGenerator, PipelineTranslator, translate_pipeline

__version__ = "0.1.0"

__all__ = [
    "PipelineConfig",
    "PipelineGenerator",
    "PipelineTranslator",
    "TransformationSpec",
    "TransformationType",
    "UnknownTransformationType",
    "translate_pipeline",
    "__version__",
]
