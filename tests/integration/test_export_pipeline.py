"""Integration tests for batch annotation export.

These tests exercise the complete workflow:
  1. Read text files
  2. Normalize and annotate
  3. Validate against the schema
  4. Write one JSON document per file
"""

import json
import logging
import shutil
from collections.abc import Generator
from pathlib import Path

import pytest

from sikshamitra.export.annotations import annotate_file, export_annotations, output_path_for
from sikshamitra.utils.schema import validate_annotation


@pytest.fixture
def test_workspace(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary workspace with input texts and schemas."""
    workspace = tmp_path / "sikshamitra_test"
    (workspace / "texts").mkdir(parents=True)
    (workspace / "schemas").mkdir()

    schema_src = Path(__file__).parent.parent.parent / "sikshamitra" / "data" / "schemas"
    for schema_file in schema_src.glob("*.json"):
        shutil.copy(schema_file, workspace / "schemas")

    yield workspace


@pytest.fixture
def texts(test_workspace: Path) -> list[Path]:
    samples = {
        "invocation.txt": "oṁ namaḥ śivāya",
        "upanishad.txt": "tat tvam asi",
        "legacy.txt": "ya(g)m saṃ ōm",
        "sandhi.txt": "rāmā iti\nnara iti",
    }
    paths = []
    for name, text in samples.items():
        path = test_workspace / "texts" / name
        path.write_text(text, encoding="utf-8")
        paths.append(path)
    return paths


class TestExportPipeline:
    """Test the batch annotation pipeline."""

    def test_export_writes_one_document_per_file(
        self, test_workspace: Path, texts: list[Path], test_logger: logging.Logger
    ) -> None:
        output_dir = test_workspace / "annotations"

        result = export_annotations(
            texts,
            output_dir,
            test_logger,
            schema_dir=test_workspace / "schemas",
            max_workers=2,
            show_progress=False,
        )

        assert result.valid
        assert result.written == [output_path_for(path, output_dir) for path in texts]
        for path in result.written:
            data = json.loads(path.read_text(encoding="utf-8"))
            assert validate_annotation(data, test_workspace / "schemas") == []

    def test_exported_text_is_normalized(
        self, test_workspace: Path, texts: list[Path], test_logger: logging.Logger
    ) -> None:
        output_dir = test_workspace / "annotations"

        export_annotations(
            texts,
            output_dir,
            test_logger,
            schema_dir=test_workspace / "schemas",
            max_workers=1,
            show_progress=False,
        )

        data = json.loads((output_dir / "legacy.annotations.json").read_text(encoding="utf-8"))
        assert data["text"] == "yaṁ saṁ om"
        assert data["source"] == "legacy.txt"

    def test_export_spans(self, texts: list[Path]) -> None:
        document = annotate_file(texts[3])

        assert [pause.to_dict() for pause in document.pauses] == [
            {"position": 5, "kind": "long"},
            {"position": 14, "kind": "short"},
        ]
        assert document.holdings == []

    def test_invalid_documents_are_not_written(
        self, test_workspace: Path, texts: list[Path], test_logger: logging.Logger
    ) -> None:
        # A schema that rejects every holding
        schema_path = test_workspace / "schemas" / "annotation.schema.json"
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        schema["properties"]["holdings"]["maxItems"] = 0
        schema_path.write_text(json.dumps(schema), encoding="utf-8")
        output_dir = test_workspace / "annotations"

        result = export_annotations(
            texts,
            output_dir,
            test_logger,
            schema_dir=test_workspace / "schemas",
            max_workers=1,
            show_progress=False,
        )

        assert not result.valid
        assert not (output_dir / "upanishad.annotations.json").exists()
        assert (output_dir / "sandhi.annotations.json").exists()

    def test_export_logs_context(
        self,
        test_workspace: Path,
        texts: list[Path],
        test_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO):
            export_annotations(
                texts[:1],
                test_workspace / "annotations",
                test_logger,
                schema_dir=test_workspace / "schemas",
                max_workers=1,
                show_progress=False,
            )

        contexts = [record.extra_fields for record in caplog.records if hasattr(record, "extra_fields")]
        assert {"source": str(texts[0]), "holdings": 2, "pauses": 1} in contexts
        assert contexts[-1]["result"]["errors"] == []
