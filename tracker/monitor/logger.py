"""Logging configuration for the tracker."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record.

    Structured fields passed as ``extra={"extra_data": {...}}`` (parcel
    number, status, client) are merged into the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra_data", {}))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    log_dir: Path,
    level: str = "INFO",
    json_format: bool = False,
) -> None:
    """
    Configure root logging.

    Console gets INFO and above, ``app.log`` everything at the configured
    level, ``errors.log`` only errors.

    Args:
        log_dir: Directory for log files, created if missing
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Write JSON lines instead of text
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = (
        JsonFormatter()
        if json_format
        else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))
    root_logger.handlers.clear()

    _attach(root_logger, logging.StreamHandler(sys.stdout), logging.INFO, formatter)
    _attach(root_logger, logging.FileHandler(log_dir / "app.log"), logging.DEBUG, formatter)
    _attach(root_logger, logging.FileHandler(log_dir / "errors.log"), logging.ERROR, formatter)

    # aiosqlite logs every statement at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
