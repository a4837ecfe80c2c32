import time
from typing import Any

import structlog
from fastapi import APIRouter, Depends

from gitlab_provisioner.core.application.resources import ResourceOperation, ResourceRegistry
from gitlab_provisioner.infrastructure.entrypoints.api.dtos import (
    ErrorResponseDTO,
    ResourceRequestDTO,
    ResourceResponseDTO,
)
from gitlab_provisioner.infrastructure.entrypoints.api.security import validate_api_key
from gitlab_provisioner.infrastructure.observability.metrics_service import (
    RECONCILE_DURATION_SECONDS,
    RECONCILIATIONS_TOTAL,
)
from gitlab_provisioner.infrastructure.observability.redaction_service import redact_dict
from gitlab_provisioner.infrastructure.observability.tracing_setup import get_tracer
from gitlab_provisioner.infrastructure.resolution.container import get_registry

logger = structlog.get_logger()
router = APIRouter()

_UNKNOWN_TYPE_LABEL = "unknown"


def request_log_fields(body: ResourceRequestDTO) -> dict[str, Any]:
    """Request payload as log fields, with credentials masked."""
    return redact_dict({"resource_id": body.id, "config": body.config, "state": body.state})


@router.post(
    "/resources/{resource_type}/{operation}",
    response_model=ResourceResponseDTO,
    dependencies=[Depends(validate_api_key)],
    responses={
        400: {"model": ErrorResponseDTO},
        404: {"model": ErrorResponseDTO},
        502: {"model": ErrorResponseDTO},
    },
)
def run_resource_operation(
    resource_type: str,
    operation: ResourceOperation,
    body: ResourceRequestDTO,
    registry: ResourceRegistry = Depends(get_registry),
) -> ResourceResponseDTO:
    """Runs one lifecycle operation and returns the state the orchestrator should record."""
    logger.debug("Resource request received", **request_log_fields(body))
    type_label = resource_type if resource_type in registry.resource_types() else _UNKNOWN_TYPE_LABEL
    start = time.perf_counter()
    outcome = "error"
    try:
        with get_tracer().start_as_current_span(f"resource.{operation.value}") as span:
            span.set_attribute("resource.type", resource_type)
            result = registry.dispatch(
                resource_type,
                operation,
                resource_id=body.id,
                config=body.config,
                state=body.state,
            )
        outcome = "success" if result.exists() else "gone"
    finally:
        duration = time.perf_counter() - start
        RECONCILIATIONS_TOTAL.labels(resource_type=type_label, operation=operation.value, outcome=outcome).inc()
        RECONCILE_DURATION_SECONDS.labels(resource_type=type_label, operation=operation.value).observe(duration)

    logger.info(
        "Resource operation completed",
        processing_status="SUCCESS",
        processing_duration_ms=round(duration * 1000, 2),
        resource_id=result.id,
    )
    return ResourceResponseDTO(id=result.id, attributes=result.attributes)
