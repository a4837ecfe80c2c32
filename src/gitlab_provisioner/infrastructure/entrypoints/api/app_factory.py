import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gitlab_provisioner.core.exceptions import (
    ConfigurationError,
    DomainError,
    DuplicateFilePathError,
    InvalidContentError,
    InvalidFilePathError,
    MalformedIdentityError,
    MissingRequiredFieldError,
    ProviderError,
    UnknownResourceError,
)
from gitlab_provisioner.infrastructure.configuration.app_config import AppConfig
from gitlab_provisioner.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from gitlab_provisioner.infrastructure.entrypoints.api.resources_router import (
    router as resources_router,
)
from gitlab_provisioner.infrastructure.observability.logging import CorrelationMiddleware
from gitlab_provisioner.infrastructure.observability.logging_setup import configure_logging
from gitlab_provisioner.infrastructure.observability.redaction_service import redact_text
from gitlab_provisioner.infrastructure.observability.tracing_setup import configure_tracing

logger = structlog.get_logger()

# Most specific class wins: handlers are resolved along the exception MRO.
_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    UnknownResourceError: status.HTTP_404_NOT_FOUND,
    MalformedIdentityError: status.HTTP_400_BAD_REQUEST,
    MissingRequiredFieldError: status.HTTP_400_BAD_REQUEST,
    DuplicateFilePathError: status.HTTP_400_BAD_REQUEST,
    InvalidContentError: status.HTTP_400_BAD_REQUEST,
    InvalidFilePathError: status.HTTP_400_BAD_REQUEST,
    ProviderError: status.HTTP_502_BAD_GATEWAY,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DomainError: status.HTTP_400_BAD_REQUEST,
}


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": redact_text(str(exc))},
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or AppConfig()
    configure_logging()
    configure_tracing()
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info("App Name", app_name=config.app_name)
    logger.info("GitLab URL", gitlab_url=config.gitlab.base_url)
    logger.info("API key enforced", api_key_enforced=config.api_key is not None)
    logger.info("------------------------")

    app = FastAPI(title=config.app_name)
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error("Validation error", request_url=str(request.url), errors=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    for error_cls, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(error_cls, _make_domain_handler(status_code))

    app.include_router(health_router)
    app.include_router(resources_router, prefix="/api/v1")

    return app


def _make_domain_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.warning(
            "Request failed",
            error_type=type(exc).__name__,
            error_details=str(exc),
            context_endpoint=request.url.path,
        )
        return _error_response(status_code, exc)

    return handler
