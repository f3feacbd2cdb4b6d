"""
Tests for the logging setup.

configure_logging runs once per application, so it must leave
existing root handlers in place and never stack context filters.
"""

import logging

import pytest

from ticket_catalog.shared.context import begin_request, end_request
from ticket_catalog.shared.logging import RequestContextFilter, configure_logging


@pytest.fixture
def bare_root_logger():
    """Run a test with no root handlers, restoring the originals afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _context_filters(handler: logging.Handler) -> list:
    return [f for f in handler.filters if isinstance(f, RequestContextFilter)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_stdout_handler_when_none_exist(self, bare_root_logger) -> None:
        configure_logging("DEBUG")
        assert len(bare_root_logger.handlers) == 1
        assert bare_root_logger.level == logging.DEBUG

    def test_repeated_calls_do_not_stack(self, bare_root_logger) -> None:
        """A second application in the same process reuses the setup."""
        configure_logging()
        configure_logging()
        (handler,) = bare_root_logger.handlers
        assert len(_context_filters(handler)) == 1

    def test_existing_handlers_are_kept(self, bare_root_logger) -> None:
        existing = logging.StreamHandler()
        bare_root_logger.addHandler(existing)
        configure_logging("WARNING")
        assert bare_root_logger.handlers == [existing]
        assert len(_context_filters(existing)) == 1
        assert bare_root_logger.level == logging.WARNING


class TestRequestContextFilter:
    """Tests for the trace/user stamping filter."""

    def test_outside_request(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        RequestContextFilter().filter(record)
        assert record.trace_id == "-"
        assert record.user_id == "anonymous"

    def test_inside_request(self) -> None:
        context, token = begin_request("trace-42")
        try:
            record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
            RequestContextFilter().filter(record)
        finally:
            end_request(token)
        assert record.trace_id == context.trace_id == "trace-42"
