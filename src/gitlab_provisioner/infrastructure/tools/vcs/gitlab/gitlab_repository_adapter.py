"""GitLab REST implementation of the file store and branch ports.

Translates httpx failures into ProviderError / RemoteCommitError, records
call metrics and wraps each call in an OTel span.
"""

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import httpx
import structlog

from gitlab_provisioner.core.application.ports import BranchPort, FileStorePort
from gitlab_provisioner.core.domain.branches import BranchInfo
from gitlab_provisioner.core.domain.files import (
    CommitActionKind,
    CommitResult,
    FileWriteRequest,
    ReconciliationRequest,
    RemoteFile,
)
from gitlab_provisioner.core.exceptions import ProviderError, RemoteCommitError
from gitlab_provisioner.infrastructure.common.retry import RetryPolicy
from gitlab_provisioner.infrastructure.observability.metrics_service import (
    COMMIT_ACTIONS_TOTAL,
    GITLAB_CALLS_TOTAL,
)
from gitlab_provisioner.infrastructure.observability.redaction_service import redact_text
from gitlab_provisioner.infrastructure.observability.tracing_setup import get_tracer
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.mappers import GitLabResponseMapper
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.services import (
    GitLabBranchService,
    GitLabCommitService,
    GitLabFileService,
)

logger = structlog.get_logger()

_T = TypeVar("_T")

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class GitLabRepositoryAdapter(FileStorePort, BranchPort):
    _PROVIDER: str = "GitLab"

    def __init__(
        self,
        file_service: GitLabFileService,
        commit_service: GitLabCommitService,
        branch_service: GitLabBranchService,
        mapper: GitLabResponseMapper | None = None,
        read_retry: RetryPolicy | None = None,
    ):
        self.file_service = file_service
        self.commit_service = commit_service
        self.branch_service = branch_service
        self.mapper = mapper or GitLabResponseMapper()
        self.read_retry = read_retry or RetryPolicy()

    # ── Files ──

    def get_file(self, project: str, file_path: str, ref: str) -> RemoteFile | None:
        raw = self.read_retry.run(
            lambda: self._call("get_file", lambda: self.file_service.get_file(project, file_path, ref))
        )
        if raw is None:
            return None
        return self._map("get_file", self.mapper.map_file, raw)

    def create_commit(self, request: ReconciliationRequest) -> CommitResult:
        raw = self._call(
            "create_commit",
            lambda: self.commit_service.create_commit(request),
            error_cls=RemoteCommitError,
        )
        for kind in CommitActionKind:
            count = request.count(kind)
            if count:
                COMMIT_ACTIONS_TOTAL.labels(action=kind.value).inc(count)
        return self.mapper.map_commit(raw)

    def create_file(self, request: FileWriteRequest) -> RemoteFile | None:
        self._call("create_file", lambda: self.file_service.create_file(request))
        return self.get_file(request.project, request.file_path, request.branch)

    def update_file(self, request: FileWriteRequest) -> None:
        self._call("update_file", lambda: self.file_service.update_file(request))

    def delete_file(self, request: FileWriteRequest) -> None:
        self._call("delete_file", lambda: self.file_service.delete_file(request))

    # ── Branches ──

    def get_branch(self, project: str, branch_name: str) -> BranchInfo | None:
        raw = self.read_retry.run(
            lambda: self._call("get_branch", lambda: self.branch_service.get_branch(project, branch_name))
        )
        if raw is None:
            return None
        return self.mapper.map_branch(raw)

    def create_branch(self, project: str, branch_name: str, ref: str) -> BranchInfo:
        raw = self._call("create_branch", lambda: self.branch_service.create_branch(project, branch_name, ref))
        return self.mapper.map_branch(raw)

    def delete_branch(self, project: str, branch_name: str) -> None:
        self._call("delete_branch", lambda: self.branch_service.delete_branch(project, branch_name))

    # ── Call internals ──

    def _call(
        self,
        operation: str,
        fn: Callable[[], _T],
        error_cls: type[ProviderError] = ProviderError,
    ) -> _T:
        """Invoke a GitLab call with tracing, metrics, and error translation."""
        tracer = get_tracer()
        with tracer.start_as_current_span(f"gitlab.{operation}") as span:
            span.set_attribute("gitlab.operation", operation)
            try:
                result = fn()
            except httpx.HTTPStatusError as exc:
                self._raise_status_error(operation, span, exc, error_cls)
            except httpx.TransportError as exc:
                self._raise_transport_error(operation, span, exc, error_cls)
            except ValueError as exc:
                self._raise_invalid_request(operation, span, exc, error_cls)
            GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="success").inc()
            return result

    def _map(self, operation: str, mapper_fn: Callable[[Any], _T], raw: Any) -> _T:
        try:
            return mapper_fn(raw)
        except ValueError as exc:
            GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="error").inc()
            raise ProviderError(provider=self._PROVIDER, message=str(exc)) from exc

    def _raise_status_error(
        self,
        operation: str,
        span: Any,
        exc: httpx.HTTPStatusError,
        error_cls: type[ProviderError],
    ) -> NoReturn:
        status = exc.response.status_code
        detail = redact_text(self._extract_message(exc.response))
        retryable = status in _RETRYABLE_STATUS
        self._record_failure(operation, span, "HTTPStatusError", f"{status} {detail}", retryable)
        raise error_cls(
            provider=self._PROVIDER,
            message=f"{operation} failed: {detail}",
            retryable=retryable,
            status_code=status,
            error_code=f"HTTP_{status}",
        ) from exc

    def _raise_transport_error(
        self,
        operation: str,
        span: Any,
        exc: httpx.TransportError,
        error_cls: type[ProviderError],
    ) -> NoReturn:
        detail = redact_text(str(exc)) or type(exc).__name__
        self._record_failure(operation, span, type(exc).__name__, detail, True)
        raise error_cls(
            provider=self._PROVIDER,
            message=f"Connection failure during {operation}: {detail}",
            retryable=True,
        ) from exc

    def _raise_invalid_request(
        self,
        operation: str,
        span: Any,
        exc: ValueError,
        error_cls: type[ProviderError],
    ) -> NoReturn:
        self._record_failure(operation, span, "ValueError", str(exc), False)
        raise error_cls(
            provider=self._PROVIDER,
            message=f"Invalid {operation} request: {exc}",
            retryable=False,
            error_code="INVALID_REQUEST",
        ) from exc

    def _record_failure(self, operation: str, span: Any, error_type: str, details: str, retryable: bool) -> None:
        span.set_attribute("error", True)
        GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="error").inc()
        logger.error(
            "GitLab call failed",
            operation=operation,
            processing_status="ERROR",
            error_type=error_type,
            error_details=details,
            error_retryable=retryable,
            source_system=self._PROVIDER,
            tags=["gitlab-error"],
        )

    @staticmethod
    def _extract_message(response: httpx.Response) -> str:
        """GitLab errors come as {"message": ...} or {"error": ...}; fall back to the body text."""
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            message = body.get("message") or body.get("error")
            if message is not None:
                return message if isinstance(message, str) else str(message)
        return response.text or response.reason_phrase
