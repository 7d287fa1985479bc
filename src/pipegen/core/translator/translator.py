"""
Tradutor de pipeline do Pipegen.

Este módulo expõe a operação central do pacote:

    translate(config) -> str

que converte um `PipelineConfig` (ou seu formato em dicionário) na
expressão textual do pipeline.

Fluxo:
    config → build_expression (registry) → render_expression → str

Princípios fundamentais:
    - Função pura: sem estado oculto, sem efeitos colaterais
    - Determinismo: a mesma config sempre produz a mesma string
    - Falha imediata e tipada para tipo de transformação desconhecido

Invariantes:
    - Nenhuma saída parcial é produzida em caso de erro
    - O `TranslationContext` opcional nunca altera a saída

Limites explícitos:
    - Não executa o pipeline gerado
    - Não valida campos de transformação (ausência → segmento vazio)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pipegen.core.exceptions import UnknownTransformationType
from pipegen.core.expression.nodes import PipelineExpression
from pipegen.core.expression.render import render_expression
from pipegen.core.pipeline.context import PIPELINE_STAGE_ID, TranslationContext
from pipegen.core.pipeline.registry import TransformationRegistry, default_registry
from pipegen.core.pipeline.types import PipelineConfig

from .builder import build_expression

ConfigLike = Union[PipelineConfig, Mapping[str, Any]]


def _coerce_config(config: ConfigLike) -> PipelineConfig:
    if isinstance(config, PipelineConfig):
        return config
    if isinstance(config, Mapping):
        return PipelineConfig.from_dict(config)
    raise TypeError(
        f"config deve ser PipelineConfig ou mapeamento, recebido: {type(config).__name__}"
    )


class PipelineTranslator:
    """Tradutor canônico (registry de tipos + renderização)."""

    def __init__(self, *, registry: Optional[TransformationRegistry] = None):
        self.registry: TransformationRegistry = registry or default_registry()

    def build(self, config: ConfigLike, *, ctx: Optional[TranslationContext] = None) -> PipelineExpression:
        return build_expression(_coerce_config(config), registry=self.registry, ctx=ctx)

    def translate(self, config: ConfigLike, *, ctx: Optional[TranslationContext] = None) -> str:
        """
        Traduz a configuração na expressão textual do pipeline.

        Args:
            config (ConfigLike): `PipelineConfig` ou dicionário equivalente.
            ctx (Optional[TranslationContext]): Coletor opcional de eventos.

        Returns:
            str: `"<name> = ( <source> | <transformações> | <sink> )"`.

        Raises:
            UnknownTransformationType: Se algum tipo não for conhecido.
            MissingPipelineFieldError: Se um dicionário não tiver campos obrigatórios.
        """
        pipeline = _coerce_config(config)

        if ctx is not None:
            ctx.log(
                stage_id=PIPELINE_STAGE_ID,
                level="INFO",
                message="translation_started",
                pipeline_name=pipeline.pipeline_name,
                transformations=len(pipeline.data_transformations),
            )

        try:
            expression = build_expression(pipeline, registry=self.registry, ctx=ctx)
        except UnknownTransformationType as exc:
            if ctx is not None:
                ctx.log(
                    stage_id=PIPELINE_STAGE_ID,
                    level="ERROR",
                    message="translation_failed",
                    error=exc.message,
                    transformation_type=exc.transformation_type,
                )
            raise

        text = render_expression(expression)

        if ctx is not None:
            ctx.log(
                stage_id=PIPELINE_STAGE_ID,
                level="INFO",
                message="translation_finished",
                stages=len(expression.stages),
            )
        return text


def translate_pipeline(config: ConfigLike, *, ctx: Optional[TranslationContext] = None) -> str:
    """Atalho funcional: `PipelineTranslator().translate(config)`."""
    return PipelineTranslator().translate(config, ctx=ctx)


class PipelineGenerator:
    """Gerador ligado a uma única configuração.

    Equivale a `translate_pipeline(config)`; a configuração é convertida
    uma vez na construção.
    """

    def __init__(self, config: ConfigLike, *, translator: Optional[PipelineTranslator] = None):
        self.config: PipelineConfig = _coerce_config(config)
        self.translator: PipelineTranslator = translator or PipelineTranslator()

    def generate_pipeline(self) -> str:
        return self.translator.translate(self.config)
