"""File helpers: text input and atomic JSON output."""

import json
import shutil
import sys
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any


STDIN_PATH = "-"


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the destination directory keeps the move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def read_text(path: str | Path) -> str:
    """
    Read a UTF-8 text file, or stdin for "-".

    Args:
        path: File path or "-"

    Returns:
        File contents
    """
    if str(path) == STDIN_PATH:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """
    Write JSON file atomically.

    Args:
        path: Destination path
        data: Data to serialize
        indent: JSON indentation
    """

    def _write(tmp_path: Path) -> None:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)

    atomic_write(path, _write)


def read_json(path: Path) -> Any:
    """
    Read JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
