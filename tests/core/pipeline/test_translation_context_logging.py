# tests/core/pipeline/test_translation_context_logging.py
"""
Testes de eventos estruturados e warnings do TranslationContext.

Os testes asseguram que:
- eventos incluem `run_id`, `stage_id`, `level`, `message` e `timestamp`
- campos extras são anexados ao evento
- warnings são agrupados por estágio
- uma tradução completa emite eventos na ordem de execução
"""

from pipegen.core.pipeline.context import PIPELINE_STAGE_ID, stage_id_for
from pipegen.core.translator import PipelineTranslator


def test_log_event_shape(translation_ctx):
    translation_ctx.log(stage_id="s1", level="INFO", message="hello", foo=1)
    assert len(translation_ctx.events) == 1
    ev = translation_ctx.events[0]
    assert ev["run_id"] == "run-test-001"
    assert ev["stage_id"] == "s1"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_warnings_grouped_by_stage(translation_ctx):
    translation_ctx.add_warning(stage_id="a", message="w1")
    translation_ctx.add_warning(stage_id="a", message="w2")
    translation_ctx.add_warning(stage_id="b", message="w3")
    assert translation_ctx.warnings == {"a": ["w1", "w2"], "b": ["w3"]}
    assert translation_ctx.all_warnings() == ["a: w1", "a: w2", "b: w3"]


def test_translation_event_sequence(translation_ctx, example_pipeline_config):
    PipelineTranslator().translate(example_pipeline_config, ctx=translation_ctx)

    assert [(e["stage_id"], e["message"]) for e in translation_ctx.events] == [
        (PIPELINE_STAGE_ID, "translation_started"),
        (stage_id_for(0), "stage_rendered"),
        (stage_id_for(1), "stage_rendered"),
        (PIPELINE_STAGE_ID, "translation_finished"),
    ]
    assert translation_ctx.events[1]["fragment"] == "filter(age > 18)"
    assert translation_ctx.events[2]["type"] == "aggregation"
    assert translation_ctx.warnings == {}
