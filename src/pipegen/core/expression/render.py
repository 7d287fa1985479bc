"""
Renderização textual da árvore de expressão.

Template fixo (v1):

    <name> = ( <source> | <stage_1> | ... | <stage_n> | <sink> )

Os estágios são unidos por `PIPE_SEPARATOR` e o resultado ocupa um único
segmento do template; sem estágios, o segmento fica vazio:

    <name> = ( <source> |  | <sink> )

Nome, origem e destino passam por `render_value` (nulo → vazio).

Limites explícitos:
    - Não faz escaping de nomes ou valores
    - Não valida a gramática resultante
"""

from __future__ import annotations

from pipegen.core.pipeline.transformations import render_value

from .nodes import PipelineExpression

PIPE_SEPARATOR = " | "


def join_stages(expression: PipelineExpression) -> str:
    return PIPE_SEPARATOR.join(expression.fragments())


def render_expression(expression: PipelineExpression) -> str:
    """Renderiza a expressão no template textual de saída."""
    return (
        f"{render_value(expression.name)} = ( "
        f"{render_value(expression.source.name)}{PIPE_SEPARATOR}"
        f"{join_stages(expression)}{PIPE_SEPARATOR}"
        f"{render_value(expression.sink.name)} )"
    )
