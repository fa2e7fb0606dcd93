"""Tests for logging configuration."""

import json
import logging

from docvault.core.logging import JsonFormatter, setup_logging


def make_record(msg="Document uploaded", exc_info=None, **extra):
    record = logging.LogRecord(
        name="docvault.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_formats_basic_fields(self):
        payload = json.loads(JsonFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "docvault.test"
        assert payload["message"] == "Document uploaded"
        assert "http" not in payload

    def test_includes_http_context_when_present(self):
        record = make_record(http_method="POST", path="/documents/upload", status_code=201)

        payload = json.loads(JsonFormatter().format(record))

        assert payload["http"] == {"method": "POST", "path": "/documents/upload", "status": 201}

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys
            record = make_record(exc_info=sys.exc_info())

        payload = json.loads(JsonFormatter().format(record))

        assert payload["error"]["type"] == "RuntimeError"
        assert payload["error"]["message"] == "boom"
        assert "Traceback" in payload["error"]["stack"]

    def test_keeps_non_ascii(self):
        output = JsonFormatter().format(make_record(msg="Заметка создана"))

        assert "Заметка создана" in output


def test_setup_logging_sets_root_level():
    setup_logging(level="warning", fmt="json")
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    setup_logging(level="INFO", fmt="plain")
    assert logging.getLogger().level == logging.INFO
