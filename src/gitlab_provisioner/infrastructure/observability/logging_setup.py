"""Structlog configuration with a single stdlib handler.

structlog loggers and plain ``logging.getLogger(__name__)`` loggers (used by
the core package) end up in the same handler, pass through the same
redaction step, and are rendered either as nested JSON or as console lines.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from gitlab_provisioner.infrastructure.observability.logging.schema_processor import (
    provisioner_schema_processor,
)
from gitlab_provisioner.infrastructure.observability.redaction_service import redact_event

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")

_CONFIGURED = False


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """One-shot setup; later calls are ignored.

    ``level`` defaults to LOG_LEVEL, ``log_format`` (json|console) to LOG_FORMAT,
    falling back to json outside local environments.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    shared_processors = _shared_processors()
    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *render_chain(log_format),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel((level or os.environ.get("LOG_LEVEL", "INFO")).upper())
    # Request lines come from CorrelationMiddleware.
    logging.getLogger("uvicorn.access").propagate = False


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        redact_event,
    ]


def render_chain(log_format: str | None = None) -> list[Any]:
    """Final processors: nested schema + JSON, or flat console output."""
    if resolve_log_format(log_format) == "json":
        return [provisioner_schema_processor, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def resolve_log_format(log_format: str | None = None) -> str:
    chosen = (log_format or os.environ.get("LOG_FORMAT", "")).lower()
    if chosen in ("json", "console"):
        return chosen
    env = os.environ.get("APP_ENV", "local").lower()
    return "json" if env in _JSON_ENVIRONMENTS else "console"
