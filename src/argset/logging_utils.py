"""Logging utilities for argset."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

_LOGGER_NAME = "argset"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(_LOGGER_NAME)


def _to_log_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_to_log_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _to_log_safe(item) for key, item in value.items()}
    return str(value)


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event as one compact JSON object."""
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Set up logging configuration.

    verbose sends DEBUG records to stderr; log_file adds a file handler.
    With neither, logging is disabled.
    """
    handlers: list[logging.Handler] = []
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path), encoding="utf-8"))

    if not handlers:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    formatter = logging.Formatter(_LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
