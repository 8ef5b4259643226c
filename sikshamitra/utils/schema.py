"""JSON Schema validation utilities."""

import json
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft7Validator


# Bundled with the package so installed copies validate without a checkout
SCHEMA_DIR: Traversable = resources.files("sikshamitra") / "data" / "schemas"


def load_schema(schema_path: Path | Traversable) -> dict[str, Any]:
    """
    Load JSON schema from file.

    Args:
        schema_path: Path to schema file (filesystem or package resource)

    Returns:
        Parsed schema dict
    """
    with schema_path.open("r", encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def validate_against_schema(
    data: dict[str, Any],
    schema: dict[str, Any],
) -> list[str]:
    """
    Validate data against JSON schema.

    Args:
        data: Data to validate
        schema: JSON schema

    Returns:
        List of validation error messages (empty if valid)
    """
    validator = Draft7Validator(schema)
    errors = []

    for error in sorted(validator.iter_errors(data), key=str):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")

    return errors


def validate_annotation(
    data: dict[str, Any],
    schema_dir: Path | Traversable = SCHEMA_DIR,
) -> list[str]:
    """Validate an annotation document against schema."""
    schema = load_schema(schema_dir / "annotation.schema.json")
    return validate_against_schema(data, schema)
