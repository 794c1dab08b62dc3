"""Tests for the CLI's structlog configuration.

We only check our wrapper; structlog's own behaviour is not retested.
"""

import logging

import structlog

from dockgen.logging import configure_logging


class TestConfigureLogging:
    def test_configure_does_not_raise(self) -> None:
        configure_logging()

    def test_configure_verbose_does_not_raise(self) -> None:
        configure_logging(verbose=True)

    def test_configure_multiple_times_is_safe(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=False, level="warning")
        configure_logging()

    def test_structlog_logger_usable_after_configure(self) -> None:
        configure_logging()
        structlog.get_logger("dockgen.test").info("rendered", runtime="net")

    def test_stdlib_records_still_reach_capture(self, caplog) -> None:
        configure_logging()
        with caplog.at_level(logging.INFO):
            logging.getLogger("dockgen.test.stdlib").info("Detected %s project", ".NET")
        assert "Detected .NET project" in caplog.messages
