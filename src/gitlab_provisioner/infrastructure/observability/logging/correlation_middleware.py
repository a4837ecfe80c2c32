"""ASGI middleware binding request context into structlog contextvars.

Every request gets a correlation ID (taken from X-Correlation-ID when sent).
Resource calls additionally carry the resource type and operation from the
``/api/v1/resources/{resource_type}/{operation}`` path, so the completion line
and every log emitted while serving the request can be filtered by them.
"""

from __future__ import annotations

import re
import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bound_contextvars

logger = structlog.get_logger()

CORRELATION_HEADER = b"x-correlation-id"

_RESOURCE_PATH = re.compile(r"^/api/v1/resources/(?P<resource_type>[^/]+)/(?P<operation>[^/]+)/?$")


def request_context(scope: dict[str, Any]) -> dict[str, str]:
    """Context fields for one HTTP request scope."""
    path = str(scope.get("path", "/"))
    context = {
        "correlation_id": _header(scope, CORRELATION_HEADER) or uuid4().hex,
        "context_endpoint": path,
        "context_method": str(scope.get("method", "UNKNOWN")),
    }
    match = _RESOURCE_PATH.match(path)
    if match:
        context["context_resource_type"] = match["resource_type"]
        context["context_operation"] = match["operation"]
    return context


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        context = request_context(scope)
        status = 500
        start = time.perf_counter()

        async def send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, context["correlation_id"].encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        with bound_contextvars(**context):
            try:
                await self.app(scope, receive, send_with_correlation)
            finally:
                logger.info(
                    "Request processed",
                    processing_status="SUCCESS" if status < 400 else "ERROR",
                    processing_duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    http_status=status,
                )


def _header(scope: dict[str, Any], name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1")
    return None
