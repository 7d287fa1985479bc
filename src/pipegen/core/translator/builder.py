"""
Montagem da árvore de expressão a partir de um `PipelineConfig`.

Para cada transformação, em ordem:
    1. o registry converte o `TransformationSpec` na variante tipada
       (tipo desconhecido → `UnknownTransformationType`, sem saída parcial)
    2. campos ausentes viram warnings no `TranslationContext`, se houver
    3. um `StageNode` é anexado mantendo a posição original

Limites explícitos:
    - Não renderiza texto (ver `core.expression.render`)
    - Não valida nomes de origem, destino ou pipeline
"""

from __future__ import annotations

from typing import List, Optional

from pipegen.core.expression.nodes import PipelineExpression, SinkNode, SourceNode, StageNode
from pipegen.core.pipeline.context import TranslationContext, stage_id_for
from pipegen.core.pipeline.registry import TransformationRegistry
from pipegen.core.pipeline.types import PipelineConfig


def build_expression(
    config: PipelineConfig,
    *,
    registry: TransformationRegistry,
    ctx: Optional[TranslationContext] = None,
) -> PipelineExpression:
    """
    Converte a configuração em uma `PipelineExpression`.

    Todas as transformações são convertidas antes de a expressão ser
    devolvida; a primeira transformação de tipo desconhecido interrompe
    a montagem.

    Args:
        config (PipelineConfig): Pipeline a traduzir.
        registry (TransformationRegistry): Conjunto fechado de tipos conhecidos.
        ctx (Optional[TranslationContext]): Coletor opcional de eventos e warnings.

    Returns:
        PipelineExpression: Árvore pronta para renderização.

    Raises:
        UnknownTransformationType: Se algum `type` não estiver no registry.
    """
    stages: List[StageNode] = []

    for index, spec in enumerate(config.data_transformations):
        payload = registry.parse(spec, index=index)
        stage = StageNode(index=index, type=payload.type, payload=payload)

        if ctx is not None:
            sid = stage_id_for(index)
            for missing in payload.missing_fields():
                ctx.add_warning(
                    stage_id=sid,
                    message=f"campo '{missing}' ausente em config de '{payload.type}'",
                )
            ctx.log(
                stage_id=sid,
                level="DEBUG",
                message="stage_rendered",
                type=payload.type,
                fragment=stage.fragment,
            )

        stages.append(stage)

    return PipelineExpression(
        name=config.pipeline_name,
        source=SourceNode(config.data_source),
        stages=tuple(stages),
        sink=SinkNode(config.data_sink),
    )
