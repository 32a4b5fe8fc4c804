"""Structured logging setup using structlog.

Importing this module installs a library default that routes structlog events
through stdlib logging, so an application that never calls ``setup_logging``
gets nothing on stdout and only sees warnings through its own logging config.
The CLI calls ``setup_logging`` to render events itself.
"""

from __future__ import annotations

import logging
import sys

import structlog

_SHARED_PROCESSORS: list = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def use_library_defaults() -> None:
    """Hand events to stdlib logging; levels and handlers are the caller's."""
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.processors.KeyValueRenderer(key_order=["event"])],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog for command-line use.

    Logs go to stderr so that command output on stdout stays parseable JSON.
    Loggers are not cached, so a later reconfiguration still applies to
    module-level loggers.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors = list(_SHARED_PROCESSORS)
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str = "daily") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


if not structlog.is_configured():
    use_library_defaults()
