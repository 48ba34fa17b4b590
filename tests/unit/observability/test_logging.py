"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest

from flagstore.observability.logging import JsonLoggerFactory, get_logger


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        from structlog.testing import capture_logs

        with capture_logs() as logs:
            get_logger("flagstore.test").info("hello", flag_key="a")
        assert logs == [{"event": "hello", "flag_key": "a", "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        from structlog.testing import capture_logs

        with capture_logs() as logs:
            get_logger("flagstore.test", component="store").info("bound")
        assert logs[0]["component"] == "store"


class TestJsonLoggerFactory:
    def test_sets_level_and_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("flagstore.json").info("flag_store.override_set", flag_key="a")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "flag_store.override_set"
        assert payload["flag_key"] == "a"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, json_output=False)
        get_logger("flagstore.console").info("plain_event")
        assert "plain_event" in capsys.readouterr().err
