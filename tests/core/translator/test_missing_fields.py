# tests/core/translator/test_missing_fields.py
"""
Testes de degradação silenciosa para campos ausentes em `config`.

Campo ausente não é erro: o fragmento recebe um segmento vazio no
lugar do valor e, quando há contexto, um warning é registrado.
"""

from pipegen.core.pipeline.context import stage_id_for
from pipegen.core.translator import PipelineTranslator, translate_pipeline


def _single(transformation):
    return {
        "pipeline_name": "p",
        "data_source": "s",
        "data_sink": "k",
        "data_transformations": [transformation],
    }


def test_filter_missing_value_does_not_raise():
    out = translate_pipeline(_single({"type": "filter", "config": {"column": "age", "operator": ">"}}))
    assert out == "p = ( s | filter(age > ) | k )"


def test_filter_without_config_renders_empty_segments():
    out = translate_pipeline(_single({"type": "filter"}))
    assert out == "p = ( s | filter(  ) | k )"


def test_aggregation_missing_function():
    out = translate_pipeline(_single({"type": "aggregation", "config": {"column": "sales"}}))
    assert out == "p = ( s | aggregate(sales, ) | k )"


def test_non_mapping_config_is_treated_as_empty():
    out = translate_pipeline(_single({"type": "aggregation", "config": "SUM"}))
    assert out == "p = ( s | aggregate(, ) | k )"


def test_null_value_renders_as_empty():
    out = translate_pipeline(
        _single({"type": "filter", "config": {"column": "x", "operator": "=", "value": None}})
    )
    assert out == "p = ( s | filter(x = ) | k )"


def test_zero_value_is_not_treated_as_missing(translation_ctx):
    out = PipelineTranslator().translate(
        _single({"type": "filter", "config": {"column": "x", "operator": ">", "value": 0}}),
        ctx=translation_ctx,
    )
    assert out == "p = ( s | filter(x > 0) | k )"
    assert translation_ctx.warnings == {}


def test_missing_fields_are_recorded_as_warnings(translation_ctx):
    PipelineTranslator().translate(
        _single({"type": "filter", "config": {"column": "age"}}),
        ctx=translation_ctx,
    )
    sid = stage_id_for(0)
    assert len(translation_ctx.warnings[sid]) == 2
    assert "operator" in translation_ctx.warnings[sid][0]
    assert "value" in translation_ctx.warnings[sid][1]


def test_context_does_not_change_output(translation_ctx):
    config = _single({"type": "aggregation", "config": {"column": "sales"}})
    assert PipelineTranslator().translate(config, ctx=translation_ctx) == translate_pipeline(config)
