"""
CLI do Pipegen: traduz arquivos de configuração de pipeline em expressões.

Comandos:
    - example   → imprime a tradução do pipeline de exemplo
    - translate → carrega YAML/JSON (defaults + override local) e imprime
      a expressão; opcionalmente grava o Manifest da tradução

Erros de configuração e tipos de transformação desconhecidos são
reportados em stderr com código de saída 1.
"""

from __future__ import annotations

import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import click

from pipegen import __version__
from pipegen.core.config import ConfigError, compute_config_hash, load_config
from pipegen.core.errors import error_from_exception
from pipegen.core.exceptions import UnknownTransformationType
from pipegen.core.pipeline.context import TranslationContext
from pipegen.core.pipeline.types import PipelineConfig
from pipegen.core.traceability import (
    add_context_events,
    create_manifest,
    record_failure,
    record_translation,
    save_manifest,
)
from pipegen.core.translator import PipelineTranslator
from pipegen.example import example_config


def _fail(exc: Exception) -> None:
    error = error_from_exception(exc)
    click.echo(f"Error: {error.message}", err=True)
    if error.hint:
        click.echo(f"Hint: {error.hint}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="pipegen")
def cli():
    """Pipegen - traduz pipelines declarativos em expressões de pipeline."""


@cli.command()
def example():
    """Imprime a tradução do pipeline de exemplo."""
    click.echo(PipelineTranslator().translate(example_config()))


@cli.command()
@click.argument("config_path", type=click.Path(dir_okay=False))
@click.option(
    "--local",
    "local_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Override mesclado sobre CONFIG_PATH (ignorado se ausente).",
)
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Grava o Manifest JSON da tradução neste caminho.",
)
@click.option("--quiet", is_flag=True, help="Não imprime warnings de campos ausentes.")
def translate(config_path: str, local_path: Optional[str], manifest_path: Optional[str], quiet: bool):
    """Traduz um arquivo de configuração de pipeline (YAML/JSON)."""
    try:
        resolved = load_config(defaults_path=config_path, local_path=local_path)
        pipeline = PipelineConfig.from_dict(resolved)
    except ConfigError as e:
        _fail(e)
        return

    started_at = datetime.now(timezone.utc)
    ctx = TranslationContext(run_id=uuid.uuid4().hex, created_at=started_at)
    manifest = create_manifest(
        run_id=ctx.run_id,
        started_at=started_at,
        pipegen_version=__version__,
        config_hash=compute_config_hash(pipeline.to_dict()),
    )

    try:
        text = PipelineTranslator().translate(pipeline, ctx=ctx)
    except UnknownTransformationType as e:
        if manifest_path:
            add_context_events(manifest, ctx.events)
            record_failure(manifest, error=error_from_exception(e), ts=datetime.now(timezone.utc))
            save_manifest(manifest, Path(manifest_path))
        _fail(e)
        return

    warnings = ctx.all_warnings()
    if manifest_path:
        add_context_events(manifest, ctx.events)
        record_translation(
            manifest,
            pipeline_name=pipeline.pipeline_name,
            expression=text,
            stage_count=len(pipeline.data_transformations),
            ts=datetime.now(timezone.utc),
            warnings=warnings,
        )
        save_manifest(manifest, Path(manifest_path))

    if not quiet:
        for message in warnings:
            click.echo(f"Warning: {message}", err=True)

    click.echo(text)


def main():
    """Ponto de entrada da CLI."""
    cli()


if __name__ == "__main__":
    main()
