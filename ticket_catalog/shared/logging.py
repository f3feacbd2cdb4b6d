"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Every record carries the trace and user id of the request it was
emitted under, so log lines can be joined with problem details bodies.
Never logs sensitive data (request bodies, API keys, raw payloads).
"""

import logging
import sys

from ticket_catalog.shared.context import get_trace_id, get_user_id

LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "trace=%(trace_id)s user=%(user_id)s | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestContextFilter(logging.Filter):
    """Stamps ``trace_id`` and ``user_id`` onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id() or "-"
        record.user_id = get_user_id()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Safe to call once per application: handlers already installed on the
    root logger (by a host process or a test runner) are kept, and each
    handler receives the context filter only once.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    root = logging.getLogger()
    log_level = getattr(logging, level.upper(), logging.INFO)
    if root.handlers:
        root.setLevel(log_level)
    else:
        logging.basicConfig(
            level=log_level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            stream=sys.stdout,
        )
    for handler in root.handlers:
        if not any(isinstance(f, RequestContextFilter) for f in handler.filters):
            handler.addFilter(RequestContextFilter())

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
