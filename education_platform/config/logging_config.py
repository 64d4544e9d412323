"""
Logging setup for the education platform.

Records from ``education_platform.*`` loggers are emitted at the configured
level, everything else at WARNING. Each record carries the correlation id of
the request being handled; use ``correlation_scope`` around a unit of work.
"""

import io
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator, Optional, TextIO

from education_platform.config.settings import Config

PACKAGE_LOGGER = "education_platform"
NO_CORRELATION_ID = "NO Correlation ID"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamps the current correlation id on every record."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that tolerates records created outside the filtered handlers."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


class _PlatformHandler:
    """Marker mixed into handlers installed by setup_logging."""


class _StreamHandler(_PlatformHandler, logging.StreamHandler):
    pass


class _FileHandler(_PlatformHandler, RotatingFileHandler):
    pass


def _remove_installed_handlers(root: logging.Logger) -> None:
    for handler in root.handlers[:]:
        if isinstance(handler, _PlatformHandler):
            root.removeHandler(handler)
            handler.close()


def _install(root: logging.Logger, handler: logging.Handler, log_format: str) -> None:
    handler.setFormatter(SafeFormatter(log_format))
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    config: type[Config] = Config,
) -> logging.Logger:
    """Install console (and optional rotating file) handlers on the root logger.

    ``level`` and ``log_file`` fall back to ``config``. Calling it again
    replaces the handlers from the previous call instead of stacking them.
    """
    level = level or config.LOG_LEVEL
    log_file = log_file or config.LOG_FILE or None

    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    _remove_installed_handlers(root)

    if stream is None:
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    _install(root, _StreamHandler(stream), config.LOG_FORMAT)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _install(
            root,
            _FileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
            config.LOG_FORMAT,
        )

    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger(__name__).info(f"Logging is set up: level={level}, log_file={log_file}")
    return root
