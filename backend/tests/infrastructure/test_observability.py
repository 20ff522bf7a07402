"""Structured Logging — JSON formatter output and idempotent setup."""

import json
import logging

from todo_app.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "todo_app.services.task_service", logging.INFO, __file__, 1,
        "Task created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JSONFormatter().format(_record(user_id=3, task_id=2)))
    assert payload["message"] == "Task created"
    assert payload["level"] == "INFO"
    assert payload["user_id"] == 3
    assert payload["task_id"] == 2


def test_json_formatter_drops_unknown_extras():
    payload = json.loads(JSONFormatter().format(_record(password="secret")))
    assert "password" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "todo-app"]
    assert len(named) == 1
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.INFO
    logging.root.removeHandler(named[0])
