"""Tests for :mod:`oeis_lookup.logging_setup`."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from oeis_lookup import logging_setup
from oeis_lookup.logging_setup import (
    _redact_secrets_processor,
    configure_library_defaults,
    configure_logging,
    get_logger,
)
from oeis_lookup.parsing.record import parse_record


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    configured = logging_setup._LOGGING_CONFIGURED
    structlog_config = structlog.get_config()
    yield
    structlog.configure(**structlog_config)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging_setup._LOGGING_CONFIGURED = configured


def test_redacts_sensitive_headers() -> None:
    event = {"event": "request", "headers": {"Authorization": "Bearer x", "Accept": "text/plain"}}

    result = _redact_secrets_processor(None, "info", event)

    assert result["headers"] == {"Authorization": "[REDACTED]", "Accept": "text/plain"}


def test_events_without_headers_are_untouched() -> None:
    event = {"event": "request", "url": "https://oeis.org/search"}

    assert _redact_secrets_processor(None, "info", dict(event)) == event


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty", force=True)


def test_second_call_is_a_no_op_without_force() -> None:
    configure_logging("ERROR", force=True)
    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.ERROR


def test_json_lines_are_written_to_the_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "oeis.log"
    configure_logging("INFO", "json", log_file, force=True)

    get_logger("oeis_lookup.tests", run="abc").info("fetched", headers={"Cookie": "secret"})
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "fetched"
    assert record["run"] == "abc"
    assert record["level"] == "info"
    assert record["logger"] == "oeis_lookup.tests"
    assert record["headers"] == {"Cookie": "[REDACTED]"}


def test_debug_events_are_filtered_at_warning(tmp_path: Path) -> None:
    log_file = tmp_path / "oeis.log"
    configure_logging("WARNING", "json", log_file, force=True)

    get_logger("oeis_lookup.tests").debug("hidden")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hidden" not in log_file.read_text(encoding="utf-8")


def test_library_defaults_drop_debug_events(
    capsys: pytest.CaptureFixture[str], fibonacci_text: str
) -> None:
    structlog.reset_defaults()
    configure_library_defaults()

    assert parse_record(fibonacci_text) is not None
    get_logger("oeis_lookup.tests").warning("still_visible")

    out = capsys.readouterr().out
    assert "record_parsed" not in out
    assert "still_visible" in out


def test_library_defaults_leave_existing_configuration_alone() -> None:
    configure_logging("DEBUG", force=True)
    wrapper_class = structlog.get_config()["wrapper_class"]

    configure_library_defaults()

    assert structlog.get_config()["wrapper_class"] is wrapper_class
