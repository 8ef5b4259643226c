"""Annotation export: normalized text plus holdings and pauses as JSON."""

import logging
from dataclasses import dataclass, field
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from tqdm import tqdm

from sikshamitra.engine import annotate
from sikshamitra.models import AnnotatedText
from sikshamitra.utils.io import read_text, write_json
from sikshamitra.utils.log import log_with_context
from sikshamitra.utils.parallel import map_parallel_ordered
from sikshamitra.utils.schema import SCHEMA_DIR, validate_annotation


@dataclass
class ExportResult:
    """Result of an annotation export run."""

    written: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "written": [str(path) for path in self.written],
            "errors": self.errors,
        }


def annotate_file(path: Path) -> AnnotatedText:
    """
    Annotate one UTF-8 text file.

    Args:
        path: Input file

    Returns:
        Annotated text labelled with the file name
    """
    return annotate(read_text(path), source=Path(path).name)


def output_path_for(path: Path, output_dir: Path) -> Path:
    """Output file for an input file: <stem>.annotations.json in output_dir."""
    return Path(output_dir) / f"{Path(path).stem}.annotations.json"


def export_annotations(
    paths: list[Path],
    output_dir: Path,
    logger: logging.Logger,
    schema_dir: Path | Traversable = SCHEMA_DIR,
    max_workers: int = 4,
    show_progress: bool = True,
) -> ExportResult:
    """
    Annotate files and write one JSON document per file.

    Documents that fail schema validation are reported and not written.

    Args:
        paths: Input text files
        output_dir: Directory for the JSON documents
        logger: Logger instance
        schema_dir: Directory holding annotation.schema.json
        max_workers: Worker threads
        show_progress: Show a tqdm progress bar

    Returns:
        Export result
    """
    result = ExportResult()
    annotated = map_parallel_ordered(annotate_file, paths, max_workers=max_workers)

    for path, document in tqdm(
        zip(paths, annotated),
        total=len(paths),
        desc="Annotating",
        unit="file",
        disable=not show_progress,
    ):
        data = document.to_dict()
        errors = validate_annotation(data, schema_dir)
        if errors:
            result.errors.extend(f"{path}: {error}" for error in errors)
            log_with_context(
                logger,
                "warning",
                f"Schema validation failed for {path}: {len(errors)} errors",
                source=str(path),
                errors=errors,
            )
            continue

        destination = output_path_for(path, output_dir)
        write_json(destination, data)
        result.written.append(destination)
        log_with_context(
            logger,
            "info",
            f"Wrote {destination}",
            source=str(path),
            holdings=len(document.holdings),
            pauses=len(document.pauses),
        )

    log_with_context(
        logger,
        "info",
        f"Exported {len(result.written)}/{len(paths)} annotation documents",
        result=result,
    )
    return result
