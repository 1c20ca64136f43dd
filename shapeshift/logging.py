"""Logging helpers and structured JSON formatter for the ShapeShift client."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

LOGGER_NAME = "shapeshift"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


class JSONLogFormatter(logging.Formatter):
    """Format LogRecord instances into structured JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info

        extras = _extract_extras(record.__dict__)
        if extras:
            payload.update(extras)

        return json.dumps(_json_safe(payload), separators=(",", ":"))


def setup_logging(
    level: int | str = "INFO",
    *,
    json_enabled: bool = False,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach a stream handler to the ``shapeshift`` logger.

    The library never calls this itself; applications opt in. Calling it again
    replaces the handler installed by the previous call.
    """

    resolved = _resolve_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(resolved)
    if json_enabled:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string))

    logger = logging.getLogger(LOGGER_NAME)
    _replace_handlers(logger, [handler])
    logger.setLevel(resolved)
    return logger


def request_log_extra(
    *,
    event: str,
    operation: str,
    method: str,
    path: str,
    status: str,
    duration_ms: float | None = None,
    status_code: int | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Build the ``extra`` mapping attached to request lifecycle log records."""

    payload: dict[str, Any] = {
        "event": event,
        "operation": operation,
        "method": method,
        "path": path,
        "status": status,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 3) if duration_ms is not None else None,
    }
    if error:
        payload["error"] = error
    return {key: value for key, value in payload.items() if value is not None}


def _extract_extras(record_dict: dict[str, Any]) -> dict[str, Any]:
    extras: dict[str, Any] = {}
    for key, value in record_dict.items():
        if key in RESERVED_ATTRS or key.startswith("_"):
            continue
        extras[key] = _json_safe(value)
    return extras


def _json_safe(value: Any) -> Any:
    if isinstance(value, str | int | float | bool) or value is None:
        return value
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, list | tuple | set):
        return [_json_safe(item) for item in value]
    return str(value)


def _resolve_level(level_name: Any) -> int:
    if isinstance(level_name, int):
        return level_name
    if not level_name:
        return logging.INFO
    candidate = str(level_name).upper()
    return getattr(logging, candidate, logging.INFO)


def _replace_handlers(logger: logging.Logger, handlers: Iterable[logging.Handler]) -> None:
    for existing in logger.handlers[:]:
        if isinstance(existing, logging.NullHandler):
            continue
        logger.removeHandler(existing)
    for handler in handlers:
        logger.addHandler(handler)
