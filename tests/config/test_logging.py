"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from flexivis_url.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Put the package logger back the way the test found it."""
    pkg = logging.getLogger("flexivis_url")
    handlers, propagate, level = pkg.handlers[:], pkg.propagate, pkg.level
    yield
    pkg.handlers[:] = handlers
    pkg.propagate = propagate
    pkg.setLevel(level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("flexivis_url").level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("flexivis_url").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("flexivis_url.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "flexivis_url.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("flexivis_url.services.link").debug("Loaded layout document x.toml")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Loaded layout document x.toml"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "flexivis_url.services.link"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("flexivis_url.services.link").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger("flexivis_url").handlers) == 1

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        configure_logging(verbose=True, log_json=True)
        assert root.handlers == handlers
        assert root.level == level
        assert logging.getLogger("flexivis_url").propagate is False
