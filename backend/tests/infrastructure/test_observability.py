"""Structured Logging — JSONFormatter output and setup_logging handler management."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.WARNING, __file__, 1, "slug %s taken", ("x",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "app.test"
    assert out["message"] == "slug x taken"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(slug="react-summit-2024", attempt=2, password="hunter2"),
    ))
    assert out["slug"] == "react-summit-2024"
    assert out["attempt"] == 2
    assert "password" not in out


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    installed = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == installed
    assert logging.root.level == logging.INFO
