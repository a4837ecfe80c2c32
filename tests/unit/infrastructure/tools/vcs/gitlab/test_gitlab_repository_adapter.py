import base64
import json

import httpx
import pytest
import respx
from httpx import Response
from prometheus_client import REGISTRY

from gitlab_provisioner.core.domain.files import CommitAction, FileWriteRequest, ReconciliationRequest
from gitlab_provisioner.core.exceptions import ProviderError, RemoteCommitError
from gitlab_provisioner.infrastructure.common.retry import RetryPolicy
from gitlab_provisioner.infrastructure.resolution.container import build_gitlab_adapter

BASE = "https://gitlab.example.com/api/v4/projects/42"


@pytest.fixture
def adapter(app_config):
    return build_gitlab_adapter(app_config)


def _file_json(path, content: bytes, ref="main"):
    return {
        "file_path": path,
        "ref": ref,
        "encoding": "base64",
        "content": base64.b64encode(content).decode(),
        "content_sha256": "sha",
        "last_commit_id": "c1",
    }


def _calls(operation, outcome):
    return REGISTRY.get_sample_value(
        "provisioner_gitlab_calls_total", {"operation": operation, "outcome": outcome}
    ) or 0.0


@respx.mock
def test_get_file_decodes_content_and_sends_token(adapter):
    route = respx.get(f"{BASE}/repository/files/a.txt").mock(
        return_value=Response(200, json=_file_json("a.txt", b"hello"))
    )

    remote = adapter.get_file("42", "a.txt", ref="main")

    assert remote.content == b"hello"
    request = route.calls.last.request
    assert request.headers["PRIVATE-TOKEN"] == "mock_gl_token"
    assert request.url.params["ref"] == "main"


@respx.mock
def test_get_file_not_found_is_none(adapter):
    respx.get(f"{BASE}/repository/files/missing.txt").mock(return_value=Response(404, json={"message": "404 File Not Found"}))

    assert adapter.get_file("42", "missing.txt", ref="main") is None


@respx.mock
def test_get_file_encodes_project_path(adapter):
    route = respx.get("https://gitlab.example.com/api/v4/projects/group%2Fapp/repository/files/docs%2Fa.md").mock(
        return_value=Response(200, json=_file_json("docs/a.md", b"x"))
    )

    adapter.get_file("group/app", "docs/a.md", ref="main")

    assert route.called


@respx.mock
def test_server_error_on_read_is_retryable_provider_error(adapter):
    respx.get(f"{BASE}/repository/files/a.txt").mock(return_value=Response(503, text="unavailable"))
    before = _calls("get_file", "error")

    with pytest.raises(ProviderError) as exc_info:
        adapter.get_file("42", "a.txt", ref="main")

    assert exc_info.value.retryable is True
    assert exc_info.value.status_code == 503
    assert _calls("get_file", "error") == before + 1


@respx.mock
def test_read_retry_policy_retries_transient_failures(adapter):
    adapter.read_retry = RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0)
    route = respx.get(f"{BASE}/repository/files/a.txt").mock(
        side_effect=[Response(502), Response(200, json=_file_json("a.txt", b"ok"))]
    )

    assert adapter.get_file("42", "a.txt", ref="main").content == b"ok"
    assert route.call_count == 2


@respx.mock
def test_connection_failure_is_retryable(adapter):
    respx.get(f"{BASE}/repository/files/a.txt").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(ProviderError) as exc_info:
        adapter.get_file("42", "a.txt", ref="main")

    assert exc_info.value.retryable is True
    assert exc_info.value.status_code is None


@respx.mock
def test_create_commit_posts_all_actions_at_once(adapter):
    route = respx.post(f"{BASE}/repository/commits").mock(
        return_value=Response(201, json={"id": "abc123", "short_id": "abc", "title": "sync"})
    )
    request = ReconciliationRequest(
        project="42",
        branch="main",
        commit_message="sync",
        actions=(CommitAction.create("a.txt", b"A"), CommitAction.delete("b.txt"), CommitAction.update("c.txt", b"C")),
    )

    result = adapter.create_commit(request)

    assert result.id == "abc123"
    body = json.loads(route.calls.last.request.content)
    assert [action["action"] for action in body["actions"]] == ["create", "delete", "update"]
    assert "content" not in body["actions"][1]


@respx.mock
def test_rejected_commit_raises_remote_commit_error(adapter):
    respx.post(f"{BASE}/repository/commits").mock(
        return_value=Response(400, json={"message": "A file with this name already exists"})
    )
    request = ReconciliationRequest(
        project="42", branch="main", commit_message="sync", actions=(CommitAction.create("a.txt", b"A"),)
    )

    with pytest.raises(RemoteCommitError) as exc_info:
        adapter.create_commit(request)

    assert exc_info.value.status_code == 400
    assert exc_info.value.retryable is False
    assert "A file with this name already exists" in exc_info.value.message
    assert exc_info.value.is_create_conflict()


def test_invalid_path_never_reaches_the_network(adapter):
    request = ReconciliationRequest(
        project="42", branch="main", commit_message="sync", actions=(CommitAction.create("../x", b"A"),)
    )

    with respx.mock(assert_all_called=False) as mock:
        route = mock.post(f"{BASE}/repository/commits")
        with pytest.raises(RemoteCommitError) as exc_info:
            adapter.create_commit(request)

    assert not route.called
    assert exc_info.value.error_code == "INVALID_REQUEST"


@respx.mock
def test_delete_file_sends_last_commit_id(adapter):
    route = respx.delete(f"{BASE}/repository/files/a.txt").mock(return_value=Response(204))

    adapter.delete_file(
        FileWriteRequest(project="42", branch="main", file_path="a.txt", commit_message="m", last_commit_id="c1")
    )

    params = route.calls.last.request.url.params
    assert params["last_commit_id"] == "c1"
    assert params["branch"] == "main"


@respx.mock
def test_branch_lifecycle(adapter):
    respx.get(f"{BASE}/repository/branches/feature%2Fx").mock(return_value=Response(404))
    create = respx.post(f"{BASE}/repository/branches").mock(
        return_value=Response(201, json={"name": "feature/x", "web_url": "u", "can_push": True})
    )
    respx.delete(f"{BASE}/repository/branches/feature%2Fx").mock(return_value=Response(204))

    assert adapter.get_branch("42", "feature/x") is None
    info = adapter.create_branch("42", "feature/x", "main")
    adapter.delete_branch("42", "feature/x")

    assert info.name == "feature/x"
    assert json.loads(create.calls.last.request.content) == {"branch": "feature/x", "ref": "main"}
