"""Unit tests for core/logging.py"""

import json
import logging
import sys

import pytest

from inkwell.core.logging import (
    ColoredFormatter,
    JSONFormatter,
    LoggingMiddleware,
    get_log_level,
    get_logger,
)


class _Collector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("inkwell.test", level, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_get_logger_namespaces_under_inkwell():
    assert get_logger("services.notes").name == "inkwell.services.notes"


def test_get_log_level_falls_back_to_info():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO


def test_json_formatter_groups_extras():
    out = json.loads(JSONFormatter().format(_record(request_id="abc", status_code=201)))
    assert out["message"] == "hello"
    assert out["level"] == "INFO"
    assert out["extra"] == {"request_id": "abc", "status_code": 201}


def test_json_formatter_without_extras_has_no_extra_key():
    out = json.loads(JSONFormatter().format(_record()))
    assert "extra" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record(level=logging.ERROR)
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert out["exception"]["type"] == "ValueError"
    assert "boom" in out["exception"]["traceback"]


def test_colored_formatter_leaves_record_untouched():
    record = _record()
    formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "\033[" in formatted
    assert record.levelname == "INFO"


@pytest.mark.asyncio
async def test_logging_middleware_logs_request_and_response():
    async def app(scope, receive, send):
        await send({"type": "http.response.start", "status": 204, "headers": []})
        await send({"type": "http.response.body", "body": b""})

    sent = []

    async def send(message):
        sent.append(message)

    scope = {"type": "http", "method": "GET", "path": "/api/notes", "headers": [(b"user-agent", b"pytest")]}
    middleware = LoggingMiddleware(app)
    collector = _Collector()
    middleware.logger.addHandler(collector)
    try:
        await middleware(scope, None, send)
    finally:
        middleware.logger.removeHandler(collector)

    assert [m["type"] for m in sent] == ["http.response.start", "http.response.body"]
    messages = [r.getMessage() for r in collector.records]
    assert "HTTP Request" in messages
    assert "HTTP Response" in messages
    response = next(r for r in collector.records if r.getMessage() == "HTTP Response")
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_logging_middleware_reraises_failures():
    async def app(scope, receive, send):
        raise RuntimeError("handler exploded")

    async def send(message):
        pass

    middleware = LoggingMiddleware(app)
    with pytest.raises(RuntimeError):
        await middleware({"type": "http", "method": "POST", "path": "/x"}, None, send)
