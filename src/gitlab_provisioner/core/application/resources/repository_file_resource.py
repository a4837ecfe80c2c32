"""``gitlab_repository_file``: one file through the repository files API."""

import base64
import binascii
import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from gitlab_provisioner.core.application.ports import FileStorePort
from gitlab_provisioner.core.application.reconciliation.commit_submitter import (
    DELETE_MESSAGE_PREFIX,
)
from gitlab_provisioner.core.application.resources.base_resource import BaseResource
from gitlab_provisioner.core.application.resources.resource_state import ResourceState
from gitlab_provisioner.core.domain.files import FileWriteRequest, RemoteFile
from gitlab_provisioner.core.domain.identity import RepositoryFileId
from gitlab_provisioner.core.exceptions import (
    InvalidContentError,
    MissingRequiredFieldError,
    ProviderError,
)

logger = logging.getLogger(__name__)

_CARRIED_FIELDS = ("start_branch", "author_name", "author_email", "commit_message")


class RepositoryFileResource(BaseResource):
    resource_type: ClassVar[str] = "gitlab_repository_file"

    def __init__(self, store: FileStorePort) -> None:
        self._store = store

    def create(self, config: Mapping[str, Any]) -> ResourceState:
        file_id = RepositoryFileId(
            project=self._required(config, "project"),
            branch=self._required(config, "branch"),
            file_path=self._required(config, "file_path"),
        )
        self._store.create_file(self._write_request(file_id, config))
        return self.read(ResourceState(id=file_id.to_string(), attributes=dict(config)))

    def read(self, state: ResourceState) -> ResourceState:
        file_id = RepositoryFileId.from_string(state.id or "")
        remote = self._store.get_file(file_id.project, file_id.file_path, ref=file_id.branch)
        if remote is None:
            logger.warning("File %s not found, removing from state", file_id.file_path)
            return ResourceState.gone()
        return self._to_state(file_id, remote, state.attributes)

    def update(self, config: Mapping[str, Any], state: ResourceState) -> ResourceState:
        file_id = RepositoryFileId.from_string(state.id or "")
        existing = self._require_existing(file_id)
        request = self._write_request(file_id, config, last_commit_id=existing.last_commit_id)
        self._store.update_file(request)
        return self.read(ResourceState(id=state.id, attributes=dict(config)))

    def delete(self, state: ResourceState) -> None:
        file_id = RepositoryFileId.from_string(state.id or "")
        existing = self._require_existing(file_id)
        message = self._required(state.attributes, "commit_message")
        self._store.delete_file(
            FileWriteRequest(
                project=file_id.project,
                branch=file_id.branch,
                file_path=file_id.file_path,
                commit_message=f"{DELETE_MESSAGE_PREFIX}{message}",
                author_name=state.attributes.get("author_name") or None,
                author_email=state.attributes.get("author_email") or None,
                last_commit_id=existing.last_commit_id,
            )
        )

    def import_state(self, resource_id: str) -> ResourceState:
        file_id = RepositoryFileId.from_string(resource_id)
        return ResourceState(
            id=file_id.to_string(),
            attributes={"project": file_id.project, "branch": file_id.branch, "file_path": file_id.file_path},
        )

    # ── Helpers ──

    def _require_existing(self, file_id: RepositoryFileId) -> RemoteFile:
        existing = self._store.get_file(file_id.project, file_id.file_path, ref=file_id.branch)
        if existing is None:
            raise ProviderError(
                provider="GitLab",
                message=f"File '{file_id.file_path}' not found on '{file_id.branch}'",
                status_code=404,
            )
        return existing

    def _write_request(
        self, file_id: RepositoryFileId, config: Mapping[str, Any], last_commit_id: str | None = None
    ) -> FileWriteRequest:
        content = self._required(config, "content")
        validate_base64_content(content)
        return FileWriteRequest(
            project=file_id.project,
            branch=file_id.branch,
            file_path=file_id.file_path,
            commit_message=self._required(config, "commit_message"),
            content=content,
            start_branch=config.get("start_branch") or None,
            author_name=config.get("author_name") or None,
            author_email=config.get("author_email") or None,
            last_commit_id=last_commit_id,
        )

    @staticmethod
    def _to_state(file_id: RepositoryFileId, remote: RemoteFile, previous: Mapping[str, Any]) -> ResourceState:
        attributes: dict[str, Any] = {key: previous[key] for key in _CARRIED_FIELDS if previous.get(key) is not None}
        attributes.update(
            {
                "project": file_id.project,
                "branch": remote.ref or file_id.branch,
                "file_path": remote.file_path,
                "encoding": remote.encoding,
                "content": base64.b64encode(remote.content).decode("ascii"),
            }
        )
        resource_id = RepositoryFileId(file_id.project, file_id.branch, remote.file_path)
        return ResourceState(id=resource_id.to_string(), attributes=attributes)

    def _required(self, config: Mapping[str, Any], key: str) -> str:
        value = config.get(key)
        if value is None or value == "":
            raise MissingRequiredFieldError(key, self.resource_type)
        return str(value)


def validate_base64_content(content: str) -> None:
    try:
        base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidContentError(
            f"given repository file content '{content}' is not base64 encoded, but must be"
        ) from exc
