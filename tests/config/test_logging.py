"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from cpcommon.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    cp = logging.getLogger("cpcommon")
    cp_level = cp.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    cp.setLevel(cp_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("cpcommon").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("cpcommon").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("cpcommon.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "cpcommon.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("cpcommon.enums.resolution").debug("factory name (sequential)")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "factory name (sequential)"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "cpcommon.enums.resolution"

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("pluggy").debug("hook noise")
        assert capfd.readouterr().err == ""
