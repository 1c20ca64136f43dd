from __future__ import annotations

import json
import logging
from contextlib import contextmanager

from shapeshift.logging import (
    LOGGER_NAME,
    JSONLogFormatter,
    request_log_extra,
    setup_logging,
)


@contextmanager
def isolate_logging():
    logger = logging.getLogger(LOGGER_NAME)
    previous_handlers = logger.handlers[:]
    previous_level = logger.level
    try:
        yield logger
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        for handler in previous_handlers:
            logger.addHandler(handler)
        logger.setLevel(previous_level)


def test_json_log_formatter_renders_basic_fields():
    formatter = JSONLogFormatter()
    record = logging.LogRecord(
        name="shapeshift.client",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg="ShapeShift %s failed",
        args=("getRate",),
        exc_info=None,
    )
    record.operation = "getRate"
    record.status_code = 500

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "ShapeShift getRate failed"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "shapeshift.client"
    assert "timestamp" in payload
    assert payload["operation"] == "getRate"
    assert payload["status_code"] == 500


def test_json_log_formatter_stringifies_unknown_values():
    formatter = JSONLogFormatter()
    record = logging.LogRecord("shapeshift", logging.INFO, __file__, 1, "msg", None, None)
    record.tags = ("a", "b")
    record.obj = object()

    payload = json.loads(formatter.format(record))

    assert payload["tags"] == ["a", "b"]
    assert isinstance(payload["obj"], str)


def test_setup_logging_enables_json_formatter_when_configured():
    with isolate_logging():
        logger = setup_logging("DEBUG", json_enabled=True)

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(stream_handlers) == 1
        assert isinstance(stream_handlers[0].formatter, JSONLogFormatter)


def test_setup_logging_uses_plain_formatter_by_default():
    with isolate_logging():
        logger = setup_logging("warning", format_string="%(levelname)s:%(message)s")

        assert logger.level == logging.WARNING
        handler = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)][0]
        assert not isinstance(handler.formatter, JSONLogFormatter)
        assert handler.formatter._style._fmt == "%(levelname)s:%(message)s"


def test_setup_logging_replaces_previous_handler():
    with isolate_logging():
        setup_logging("INFO")
        logger = setup_logging("INFO")

        stream_handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(stream_handlers) == 1


def test_request_log_extra_drops_empty_values():
    extra = request_log_extra(
        event="request.completed",
        operation="getCoinInfo",
        method="GET",
        path="/getcoins",
        status="ok",
        duration_ms=12.34567,
    )

    assert extra == {
        "event": "request.completed",
        "operation": "getCoinInfo",
        "method": "GET",
        "path": "/getcoins",
        "status": "ok",
        "duration_ms": 12.346,
    }
