from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.contextvars import get_contextvars

from gitlab_provisioner.infrastructure.observability.logging import CorrelationMiddleware
from gitlab_provisioner.infrastructure.observability.logging.correlation_middleware import request_context


def _scope(path, headers=()):
    return {"type": "http", "path": path, "method": "POST", "headers": list(headers)}


def test_resource_path_binds_type_and_operation():
    context = request_context(_scope("/api/v1/resources/gitlab_branch/create"))

    assert context["context_resource_type"] == "gitlab_branch"
    assert context["context_operation"] == "create"
    assert context["context_endpoint"] == "/api/v1/resources/gitlab_branch/create"
    assert context["context_method"] == "POST"


def test_other_paths_carry_no_resource_fields():
    context = request_context(_scope("/health"))

    assert "context_resource_type" not in context
    assert "context_operation" not in context


def test_incoming_correlation_id_is_reused():
    context = request_context(_scope("/health", headers=[(b"X-Correlation-ID", b"abc-123")]))

    assert context["correlation_id"] == "abc-123"


def _client():
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)

    @app.post("/api/v1/resources/{resource_type}/{operation}")
    async def resource(resource_type: str, operation: str):
        return dict(get_contextvars())

    return TestClient(app)


def test_handlers_see_request_context_and_response_echoes_correlation_id():
    response = _client().post(
        "/api/v1/resources/gitlab_repository_files/update",
        headers={"X-Correlation-ID": "corr-1"},
    )

    assert response.status_code == 200
    assert response.headers["x-correlation-id"] == "corr-1"
    bound = response.json()
    assert bound["correlation_id"] == "corr-1"
    assert bound["context_resource_type"] == "gitlab_repository_files"
    assert bound["context_operation"] == "update"


def test_context_is_not_leaked_between_requests():
    client = _client()
    client.post("/api/v1/resources/gitlab_branch/create", headers={"X-Correlation-ID": "first"})

    second = client.post("/api/v1/resources/gitlab_branch/delete").json()

    assert second["correlation_id"] != "first"
    assert second["context_operation"] == "delete"
