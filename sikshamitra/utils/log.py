"""Logging setup for the command-line host.

The engine itself never logs; the CLI, the batch exporter and the Unicode
check do, through the handlers configured here.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class JSONFormatter(logging.Formatter):
    """One JSON object per line; context passed as ``extra_fields`` is merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(
    level: str = "INFO",
    format_type: str = "pretty",
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Console output goes to stderr so that command output on stdout stays
    machine-readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Console format ("json" or "pretty")
        log_file: Optional log file path (always JSON lines)

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper()))

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JSONFormatter() if format_type == "json" else PrettyFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_settings(settings: dict[str, Any], verbose: bool = False) -> logging.Logger:
    """
    Configure logging from the ``logging`` section of settings.yaml.

    A relative ``file`` is taken relative to the working directory; a null
    ``file`` logs to the console only.

    Args:
        settings: Mapping with optional ``level``, ``format`` and ``file`` keys
        verbose: Force DEBUG level

    Returns:
        Configured root logger
    """
    log_file = settings.get("file")
    return setup_logging(
        level="DEBUG" if verbose else settings.get("level", "INFO"),
        format_type=settings.get("format", "pretty"),
        log_file=Path(log_file) if log_file else None,
    )


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context for the JSON formatter.

    Values with a ``to_dict`` method (annotation models, export results) are
    logged in their JSON form.

    Args:
        logger: Logger instance
        level: Log level name
        message: Log message
        **context: Additional context fields
    """
    fields = {
        key: value.to_dict() if hasattr(value, "to_dict") else value
        for key, value in context.items()
    }
    getattr(logger, level.lower())(message, extra={"extra_fields": fields})
