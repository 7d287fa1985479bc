"""
Testes da CLI do Pipegen (`pipegen example`, `pipegen translate`).

Os testes asseguram que:
- a saída padrão contém apenas a expressão traduzida
- erros de configuração e tipos desconhecidos saem com código 1
- o Manifest reproduz o Event Log do contexto de tradução
"""

import json

from click.testing import CliRunner

from pipegen.cli import cli

EXPECTED = (
    "my_pipeline = ( my_database | filter(age > 18) | aggregate(sales, SUM) | my_data_warehouse )"
)


class TestExampleCommand:
    def test_prints_example_translation(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["example"])
        assert result.exit_code == 0
        assert result.output.strip() == EXPECTED


class TestTranslateCommand:
    def test_translate_yaml_file(self, tmp_path, pipeline_defaults_yaml):
        path = tmp_path / "pipeline.yaml"
        path.write_text(pipeline_defaults_yaml, encoding="utf-8")

        result = CliRunner().invoke(cli, ["translate", str(path)])
        assert result.exit_code == 0
        assert EXPECTED in result.output.splitlines()

    def test_translate_with_local_override(self, tmp_path, pipeline_defaults_yaml, pipeline_local_yaml):
        defaults = tmp_path / "pipeline.yaml"
        local = tmp_path / "pipeline.local.yaml"
        defaults.write_text(pipeline_defaults_yaml, encoding="utf-8")
        local.write_text(pipeline_local_yaml, encoding="utf-8")

        result = CliRunner().invoke(cli, ["translate", str(defaults), "--local", str(local)])
        assert result.exit_code == 0
        assert "my_pipeline = ( my_database | aggregate(revenue, AVG) | staging_warehouse )" in (
            result.output.splitlines()
        )

    def test_unknown_type_exits_with_error(self, tmp_path):
        path = tmp_path / "pipeline.json"
        path.write_text(
            json.dumps(
                {
                    "pipeline_name": "p",
                    "data_source": "s",
                    "data_sink": "k",
                    "data_transformations": [{"type": "unsupported"}],
                }
            ),
            encoding="utf-8",
        )
        manifest_path = tmp_path / "manifest.json"

        result = CliRunner().invoke(cli, ["translate", str(path), "--manifest", str(manifest_path)])
        assert result.exit_code == 1
        assert "Unknown transformation type: unsupported" in result.output

        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        assert manifest["output"]["status"] == "failed"
        assert manifest["output"]["error"]["type"] == "UNKNOWN_TRANSFORMATION_TYPE"
        assert [e["event_type"] for e in manifest["events"]] == [
            "translation_started",
            "translation_failed",
        ]
        assert manifest["events"][-1]["payload"]["transformation_type"] == "unsupported"

    def test_missing_file_exits_with_error(self, tmp_path):
        result = CliRunner().invoke(cli, ["translate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_required_field_exits_with_error(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text("pipeline_name: p\ndata_sink: k\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["translate", str(path)])
        assert result.exit_code == 1
        assert "data_source" in result.output

    def test_manifest_written_on_success(self, tmp_path, pipeline_defaults_yaml):
        path = tmp_path / "pipeline.yaml"
        path.write_text(pipeline_defaults_yaml, encoding="utf-8")
        manifest_path = tmp_path / "runs" / "manifest.json"

        result = CliRunner().invoke(cli, ["translate", str(path), "--manifest", str(manifest_path)])
        assert result.exit_code == 0

        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        assert manifest["output"]["status"] == "success"
        assert manifest["output"]["pipeline_name"] == "my_pipeline"
        assert manifest["output"]["stage_count"] == 2
        assert [e["event_type"] for e in manifest["events"]] == [
            "translation_started",
            "stage_rendered",
            "stage_rendered",
            "translation_finished",
        ]
        rendered = [e for e in manifest["events"] if e["event_type"] == "stage_rendered"]
        assert [e["stage_id"] for e in rendered] == ["data_transformations[0]", "data_transformations[1]"]
        assert rendered[0]["payload"]["fragment"] == "filter(age > 18)"
        assert rendered[1]["payload"]["level"] == "DEBUG"

    def test_missing_fields_warn_unless_quiet(self, tmp_path):
        path = tmp_path / "pipeline.yaml"
        path.write_text(
            "pipeline_name: p\n"
            "data_source: s\n"
            "data_sink: k\n"
            "data_transformations:\n"
            "  - type: filter\n"
            "    config:\n"
            "      column: age\n"
            "      operator: '>'\n",
            encoding="utf-8",
        )

        result = CliRunner().invoke(cli, ["translate", str(path)])
        assert result.exit_code == 0
        assert "p = ( s | filter(age > ) | k )" in result.output.splitlines()
        assert "Warning:" in result.output

        quiet = CliRunner().invoke(cli, ["translate", str(path), "--quiet"])
        assert quiet.exit_code == 0
        assert "Warning:" not in quiet.output
