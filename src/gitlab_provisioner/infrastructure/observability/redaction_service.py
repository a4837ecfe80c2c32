"""Secret scrubbing for log events and error payloads.

GitLab credentials show up as PRIVATE-TOKEN headers, ``private_token=`` query
params and ``glpat-`` personal tokens; all of them are masked before anything
is rendered.
"""

import re
from collections.abc import MutableMapping
from typing import Any

REDACTED = "[REDACTED]"

# (prefix)(secret) pairs; the prefix is kept.
SECRET_PATTERNS = [
    re.compile(r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(Authorization:\s*)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(private_token=)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(\b)(glpat-[a-zA-Z0-9\-_]{8,})"),
]

# Substrings of field names whose values are never logged.
SENSITIVE_KEYS = (
    "authorization",
    "private-token",
    "private_token",
    "token",
    "password",
    "secret",
    "api_key",
    "client_key",
)


def is_sensitive_key(key: Any) -> bool:
    lowered = str(key).lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(rf"\1{REDACTED}", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``obj`` with sensitive keys masked and secret-looking strings scrubbed."""
    return {key: REDACTED if is_sensitive_key(key) else redact_value(value) for key, value in obj.items()}


def redact_event(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor: scrubs every field of the event in place."""
    for key in list(event_dict):
        if key.startswith("_"):
            continue
        value = event_dict[key]
        event_dict[key] = REDACTED if is_sensitive_key(key) else redact_value(value)
    return event_dict
