import base64
from typing import Any

from gitlab_provisioner.core.domain.files import (
    CommitAction,
    CommitActionKind,
    FileWriteRequest,
    ReconciliationRequest,
)


class GitLabCommitPayloadBuilder:
    def build_commit_payload(self, request: ReconciliationRequest) -> dict[str, Any]:
        """
        Builds the JSON payload for the GitLab Commits API.
        Content is sent base64 encoded so binary files survive the round trip.
        """
        payload: dict[str, Any] = {
            "branch": request.branch,
            "commit_message": request.commit_message,
            "actions": [self._build_action(action) for action in request.actions],
        }
        self._add_optional(payload, request.start_branch, request.author_name, request.author_email)
        return payload

    def build_file_payload(self, request: FileWriteRequest, include_content: bool = True) -> dict[str, Any]:
        """Payload for the single-file create/update/delete endpoints."""
        self._validate_path(request.file_path)
        payload: dict[str, Any] = {
            "branch": request.branch,
            "commit_message": request.commit_message,
        }
        if include_content:
            payload["encoding"] = "base64"
            payload["content"] = request.content or ""
        if request.last_commit_id:
            payload["last_commit_id"] = request.last_commit_id
        self._add_optional(payload, request.start_branch, request.author_name, request.author_email)
        return payload

    def _build_action(self, action: CommitAction) -> dict[str, str]:
        self._validate_path(action.path)
        entry = {
            "action": action.kind.value,
            "file_path": action.path,
        }
        if action.kind is not CommitActionKind.DELETE:
            entry["encoding"] = "base64"
            entry["content"] = base64.b64encode(action.content or b"").decode("ascii")
        return entry

    @staticmethod
    def _add_optional(
        payload: dict[str, Any], start_branch: str | None, author_name: str | None, author_email: str | None
    ) -> None:
        if start_branch:
            payload["start_branch"] = start_branch
        if author_name:
            payload["author_name"] = author_name
        if author_email:
            payload["author_email"] = author_email

    def _validate_path(self, path: str):
        if not path:
            raise ValueError("File path cannot be empty")
        # Check for directory traversal
        if ".." in path.split("/"):
            raise ValueError(f"Path contains invalid segment '..': {path}")
        # GitLab API expects file_path relative to repository root.
        if path.startswith("/"):
            raise ValueError(f"Path must be relative (no leading slash): {path}")
        if "\\" in path:
            raise ValueError(f"Path must use POSIX separators (/): {path}")
