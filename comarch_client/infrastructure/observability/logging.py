"""Logging utilities for comarch-client.

This module provides logging configuration and helpers for contextual logging
throughout the package. Library code only obtains loggers; applications (the
CLI, or a host service) decide whether to call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator


# ---------------------------------------------------------------------------
# Context variables for structured logging
# ---------------------------------------------------------------------------

_log_context: ContextVar[dict[str, Any]] = ContextVar(
    "log_context", default={})


class ContextualFormatter(logging.Formatter):
    """Formatter that appends context fields to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = _log_context.get()
        if ctx:
            ctx_str = " ".join(f"{k}={v}" for k, v in ctx.items())
            record.msg = f"{record.msg} [{ctx_str}]"
        return super().format(record)


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Temporarily add context fields to all log messages.

    Usage::

        with log_context(grant_type="authbycard"):
            logger.debug("Signing in")  # message includes context

    Never pass card numbers, phone numbers, passwords or tokens as fields.
    """
    current = _log_context.get()
    merged = {**current, **fields}
    token = _log_context.set(merged)
    try:
        yield
    finally:
        _log_context.reset(token)


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

_configured = False


def configure_logging(
    level: int = logging.INFO,
    third_party_level: int = logging.WARNING,
) -> None:
    """Configure application-wide logging.

    Call this once at startup (CLI main or the host application).

    Args:
        level: Log level for application loggers (default INFO).
        third_party_level: Log level for third-party libraries (default WARNING).
    """
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ContextualFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root.addHandler(handler)

    # urllib3 logs full request lines, query strings included
    for name in ("urllib3", "requests"):
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given name.

    A :class:`logging.NullHandler` is attached to the package logger so that
    importing the library never prints anything on its own.

    Args:
        name: Name of the logger (typically __name__).

    Returns:
        A logging.Logger instance.
    """
    package_logger = logging.getLogger("comarch_client")
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)

