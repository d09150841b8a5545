"""Structured logging for the API and the maintenance scripts.

structlog renders through the stdlib ``logging`` tree, so SQLAlchemy and
uvicorn records share the same format. Every event carries the service name
and environment, and WrappedError values are rendered as their full chain.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from braindiff.shared.result import WrappedError

_configured = False


class ServiceContext:
    """Processor adding fixed service fields to every event."""

    def __init__(self, fields: Mapping[str, str]) -> None:
        self._fields = dict(fields)

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in self._fields.items():
            event_dict.setdefault(key, value)
        return event_dict


def render_error_chains(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Replace WrappedError values with their rendered chain.

    ``error=wrapped`` becomes ``error="outer: inner: root"`` plus
    ``error_root_cause`` holding the repr of the innermost error.
    """
    for key, value in list(event_dict.items()):
        if isinstance(value, WrappedError):
            event_dict[key] = str(value)
            event_dict[f"{key}_root_cause"] = repr(WrappedError.root_cause(value))
    return event_dict


def quiet_loggers(names: Iterable[str], level: int = logging.WARNING) -> None:
    """Raise the threshold of chatty third-party loggers."""
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    *,
    quiet: Iterable[str] = (),
    context: Mapping[str, str] | None = None,
) -> None:
    """Configure structlog and the root logger once per process.

    Args:
        level: Root log level name
        log_format: "json" or "console"
        log_file: Also write events to this file
        quiet: Logger names limited to WARNING
        context: Fields added to every event, e.g. app and environment
    """
    global _configured
    if _configured:
        return

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        ServiceContext(context or {}),
        render_error_chains,
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    quiet_loggers(quiet)
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger, configuring from settings on first use."""
    if not _configured:
        from braindiff.shared.config import settings

        configure_logging(
            level=settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
            quiet=settings.log_quiet_loggers,
            context={"app": settings.app_name, "environment": settings.environment},
        )

    return structlog.get_logger(name)
