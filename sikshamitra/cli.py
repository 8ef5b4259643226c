"""śikṣāmitra CLI - Main entry point."""

import json
import logging
import sys
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]

from sikshamitra import engine
from sikshamitra.export.annotations import export_annotations
from sikshamitra.normalize.transliteration import DEVANAGARI, IAST, transliterate
from sikshamitra.prosody.stats import text_stats
from sikshamitra.qc.unicode_sanity import check_text_unicode
from sikshamitra.utils.io import read_json, read_text
from sikshamitra.utils.log import setup_logging_from_settings
from sikshamitra.utils.schema import SCHEMA_DIR, validate_annotation


DEFAULT_SETTINGS = resources.files("sikshamitra") / "data" / "settings.yaml"


def load_settings(settings_path: Path | Traversable = DEFAULT_SETTINGS) -> dict[str, Any]:
    """Load settings.yaml (the bundled defaults unless a path is given)."""
    if not settings_path.is_file():
        click.echo(f"Error: settings.yaml not found at {settings_path}", err=True)
        sys.exit(1)

    with settings_path.open("r", encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


def _schema_dir(settings: dict[str, Any]) -> Path | Traversable:
    configured = settings.get("paths", {}).get("schemas")
    return Path(configured) if configured else SCHEMA_DIR


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: bundled settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Sanskrit script conversion and prosodic annotation CLI."""
    settings = load_settings(config_path) if config_path else load_settings()
    logger = setup_logging_from_settings(settings.get("logging", {}), verbose=verbose)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


def _fail(logger: logging.Logger, action: str, error: Exception) -> None:
    logger.error(f"{action} failed: {error}", exc_info=True)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@cli.command()
@click.argument("source", default="-")
@click.pass_context
def normalize(ctx: click.Context, source: str) -> None:
    """Canonicalize tone marks and nasalization in SOURCE (file or -)."""
    logger = ctx.obj["logger"]
    try:
        click.echo(engine.normalize(read_text(source)), nl=False)
    except Exception as e:
        _fail(logger, "Normalization", e)


@cli.command()
@click.argument("source", default="-")
@click.option(
    "--to",
    "to_scheme",
    type=click.Choice([IAST, DEVANAGARI]),
    required=True,
    help="Target script",
)
@click.pass_context
def convert(ctx: click.Context, source: str, to_scheme: str) -> None:
    """Transliterate SOURCE between Devanagari and IAST."""
    logger = ctx.obj["logger"]
    try:
        from_scheme = DEVANAGARI if to_scheme == IAST else IAST
        text = read_text(source)
        logger.debug(f"Converting {len(text)} characters from {from_scheme} to {to_scheme}")
        click.echo(transliterate(text, from_scheme, to_scheme), nl=False)
    except Exception as e:
        _fail(logger, "Conversion", e)


@cli.command()
@click.argument("source", default="-")
@click.pass_context
def holdings(ctx: click.Context, source: str) -> None:
    """List holdings for SOURCE as JSON (offsets into the normalized text)."""
    logger = ctx.obj["logger"]
    try:
        text = engine.normalize(read_text(source))
        _echo_json([holding.to_dict() for holding in engine.find_all_holdings(text)])
    except Exception as e:
        _fail(logger, "Holding analysis", e)


@cli.command()
@click.argument("source", default="-")
@click.pass_context
def pauses(ctx: click.Context, source: str) -> None:
    """List pauses for SOURCE as JSON (offsets into the normalized text)."""
    logger = ctx.obj["logger"]
    try:
        text = engine.normalize(read_text(source))
        _echo_json([pause.to_dict() for pause in engine.find_all_pauses(text)])
    except Exception as e:
        _fail(logger, "Pause analysis", e)


@cli.command()
@click.argument("source", default="-")
@click.pass_context
def stats(ctx: click.Context, source: str) -> None:
    """Show character, word and paragraph counts for SOURCE."""
    logger = ctx.obj["logger"]
    try:
        _echo_json(text_stats(read_text(source)).to_dict())
    except Exception as e:
        _fail(logger, "Statistics", e)


@cli.command()
@click.argument("source", default="-")
@click.pass_context
def check(ctx: click.Context, source: str) -> None:
    """Report characters in SOURCE that conversion would pass through untouched."""
    logger = ctx.obj["logger"]
    try:
        result = check_text_unicode(read_text(source), logger)
    except Exception as e:
        _fail(logger, "Unicode check", e)
        return

    if result.clean:
        click.echo("No unrecognized characters")
        return

    for char, count in result.unrecognized.most_common():
        click.echo(f"  U+{ord(char):04X} {char!r}: {count}")
    for example in result.examples:
        click.echo(f"  line {example['line']}: {example['text']}")
    sys.exit(1)


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    "output_dir",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for <name>.annotations.json files",
)
@click.option("--workers", type=int, help="Worker threads (default: batch.max_workers)")
@click.pass_context
def annotate(ctx: click.Context, files: tuple[Path, ...], output_dir: Path, workers: int | None) -> None:
    """Annotate FILES and write one JSON document per file."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        max_workers = workers or settings.get("batch", {}).get("max_workers", 4)
        schema_dir = _schema_dir(settings)

        result = export_annotations(
            list(files),
            output_dir,
            logger,
            schema_dir=schema_dir,
            max_workers=max_workers,
        )
    except Exception as e:
        _fail(logger, "Annotation", e)
        return

    for error in result.errors:
        click.echo(f"  ERROR: {error}", err=True)

    click.echo(f"Wrote {len(result.written)} annotation documents to {output_dir}")
    if not result.valid:
        sys.exit(1)


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, document: Path) -> None:
    """Validate an annotation JSON document against the schema."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        schema_dir = _schema_dir(settings)
        errors = validate_annotation(read_json(document), schema_dir)
    except Exception as e:
        _fail(logger, "Validation", e)
        return

    if errors:
        click.echo(f"Validation failed for {document}:", err=True)
        for error in errors:
            click.echo(f"  ERROR: {error}", err=True)
        sys.exit(1)

    click.echo("All validations passed")


if __name__ == "__main__":
    cli()
