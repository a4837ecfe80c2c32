from .logging_setup import configure_logging
from .redaction_service import redact_dict, redact_event, redact_text

__all__ = [
    "configure_logging",
    "redact_dict",
    "redact_event",
    "redact_text",
]
