"""Unit tests for structured logging helpers."""

import json
import logging

import structlog

from webman.core.config import Settings
from webman.core.logging import (
    LoggingContext,
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
    rename_message_field,
)


def test_new_correlation_id_format():
    cid = new_correlation_id()
    assert cid.startswith("cid_")
    assert len(cid) == len("cid_") + 12


def test_add_correlation_id_keeps_existing():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_fixed"})
    assert event["correlation_id"] == "cid_fixed"

    event = add_correlation_id(None, "info", {})
    assert event["correlation_id"].startswith("cid_")


def test_rename_message_field():
    event = rename_message_field(None, "info", {"event": "hello"})
    assert event == {"message": "hello"}


def test_logging_context_binds_and_unbinds():
    clear_context()
    with LoggingContext(collection_id="abc123"):
        assert structlog.contextvars.get_contextvars()["collection_id"] == "abc123"
    assert "collection_id" not in structlog.contextvars.get_contextvars()


def test_json_logging_includes_bound_correlation_id(capsys, monkeypatch):
    """Production-style JSON output carries the bound correlation ID."""
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    configure_logging(Settings(environment="production", log_format="json"))
    try:
        bind_correlation_id("cid_test")
        get_logger("webman.test").info("Collection created", collection_id="c1")
    finally:
        clear_context()
        structlog.reset_defaults()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "Collection created"
    assert payload["correlation_id"] == "cid_test"
    assert payload["collection_id"] == "c1"
    assert payload["level"] == "info"
