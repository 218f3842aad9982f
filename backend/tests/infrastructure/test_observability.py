"""Structured logging: JSON formatter output shape."""

import json
import logging

from bloglist.infrastructure.observability import (
    JSONFormatter, TextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "bloglist.services.blog_service", logging.INFO, __file__, 1,
        "Blog created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_log_has_base_fields():
    """Every JSON line has timestamp, level, logger and message."""
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "bloglist.services.blog_service"
    assert out["message"] == "Blog created"
    assert "timestamp" in out


def test_known_extras_are_surfaced():
    """Whitelisted extras appear in the output."""
    out = json.loads(JSONFormatter().format(_record(blog_id="b1", user_id="u1")))
    assert out["blog_id"] == "b1"
    assert out["user_id"] == "u1"


def test_unknown_extras_are_dropped():
    """Extras outside the whitelist never reach the log."""
    out = json.loads(JSONFormatter().format(_record(password="sekret")))
    assert "password" not in out


def test_text_format_appends_extras():
    """Text format keeps extras as key=value at the end."""
    line = TextFormatter().format(_record(blog_id="b1"))
    assert "Blog created" in line
    assert line.endswith("blog_id=b1")


def test_setup_logging_does_not_stack_handlers():
    """Repeated setup replaces the handler instead of adding one."""
    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    assert len(root.handlers) == before + 1
    assert root.level == logging.INFO
    for handler in [h for h in root.handlers if h.get_name() == "bloglist"]:
        root.removeHandler(handler)
