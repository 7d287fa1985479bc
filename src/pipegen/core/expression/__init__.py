"""
Expressão de pipeline: estrutura (nodes) e renderização (render).
"""

from .nodes import PipelineExpression, SinkNode, SourceNode, StageNode
from .render import PIPE_SEPARATOR, join_stages, render_expression

__all__ = [
    "PIPE_SEPARATOR",
    "PipelineExpression",
    "SinkNode",
    "SourceNode",
    "StageNode",
    "join_stages",
    "render_expression",
]
