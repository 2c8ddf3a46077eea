"""loguru setup for the service.

Every record carries ``extra["correlation_id"]``. Request middleware and the
notification worker thread set it through :func:`correlation_scope` or
:func:`set_correlation_id`, and the module-level ``logger`` proxy binds the
current value on each call.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

NO_CORRELATION = "-"

_LINE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

# Third-party loggers that are too chatty at DEBUG.
_QUIET = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "flask_cors": logging.WARNING,
}

_correlation: ContextVar[str] = ContextVar("rentcar_correlation_id", default=NO_CORRELATION)

_logger.configure(extra={"correlation_id": NO_CORRELATION})


def default_log_file() -> Path:
    override = os.getenv("LOG_FILE")
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[2] / "instance" / "rentcar.log"


class _StdlibBridge(logging.Handler):
    """Route stdlib ``logging`` records (Flask, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_correlation.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation.set(value or NO_CORRELATION)


def get_correlation_id() -> str:
    return _correlation.get()


def clear_correlation_id() -> None:
    _correlation.set(NO_CORRELATION)


@contextmanager
def correlation_scope(value: str | None) -> Iterator[str]:
    token = _correlation.set(value or NO_CORRELATION)
    try:
        yield _correlation.get()
    finally:
        _correlation.reset(token)


def setup_logging(
    level: str | None = None,
    *,
    debug_mode: bool = False,
    log_file: Path | str | None = None,
) -> Path:
    """(Re)install the stderr and file sinks and return the log file path."""
    resolved = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    target = Path(log_file) if log_file else default_log_file()
    target.parent.mkdir(parents=True, exist_ok=True)

    common = {
        "level": resolved,
        "format": _LINE,
        "backtrace": False,
        "diagnose": False,
        "filter": sanitize_record,
    }
    _logger.remove()
    _logger.add(sys.stderr, colorize=True, **common)
    _logger.add(str(target), colorize=False, enqueue=True, encoding="utf-8", **common)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)
    return target


logger = ContextualLogger()

__all__ = [
    "NO_CORRELATION",
    "clear_correlation_id",
    "correlation_scope",
    "default_log_file",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
