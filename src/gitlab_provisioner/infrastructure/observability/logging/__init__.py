from gitlab_provisioner.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from gitlab_provisioner.infrastructure.observability.logging.schema_processor import (
    provisioner_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "provisioner_schema_processor",
]
