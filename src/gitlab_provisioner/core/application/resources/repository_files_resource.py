"""``gitlab_repository_files``: a set of files on one branch, managed as a unit."""

from collections.abc import Mapping
from typing import Any, ClassVar

from gitlab_provisioner.core.application.ports import FileStorePort
from gitlab_provisioner.core.application.reconciliation import (
    DriftReport,
    RepositoryFilesReconciler,
    declared_file_paths,
    extract_desired_state,
)
from gitlab_provisioner.core.application.resources.base_resource import BaseResource
from gitlab_provisioner.core.application.resources.resource_state import ResourceState
from gitlab_provisioner.core.domain.identity import RepositoryFilesId

_SCALAR_FIELDS = ("start_branch", "author_name", "author_email", "commit_message")


class RepositoryFilesResource(BaseResource):
    resource_type: ClassVar[str] = "gitlab_repository_files"

    def __init__(self, store: FileStorePort, conflict_fallback: bool = True) -> None:
        self._reconciler = RepositoryFilesReconciler(store, conflict_fallback=conflict_fallback)

    def create(self, config: Mapping[str, Any]) -> ResourceState:
        desired = extract_desired_state(config)
        outcome = self._reconciler.reconcile(desired)
        return self._to_state(outcome.resource_id, config, outcome.drift)

    def read(self, state: ResourceState) -> ResourceState:
        resource_id = self._parse_id(state)
        paths = declared_file_paths(state.attributes) or resource_id.file_paths
        resource_id = resource_id.with_paths(paths)
        drift = self._reconciler.read(resource_id)
        return self._to_state(resource_id, state.attributes, drift)

    def update(self, config: Mapping[str, Any], state: ResourceState) -> ResourceState:
        desired = extract_desired_state(config)
        previous = set(declared_file_paths(state.attributes))
        if state.id:
            previous.update(self._parse_id(state).file_paths)
        outcome = self._reconciler.reconcile(desired, previous_paths=previous)
        return self._to_state(outcome.resource_id, config, outcome.drift)

    def delete(self, state: ResourceState) -> None:
        resource_id = self._parse_id(state)
        record = {**state.attributes, "project": resource_id.project, "branch": resource_id.branch}
        desired = extract_desired_state(record)
        paths = set(desired.files.paths()) | set(resource_id.file_paths)
        self._reconciler.destroy(desired, paths)

    def import_state(self, resource_id: str) -> ResourceState:
        parsed = RepositoryFilesId.from_string(resource_id)
        return ResourceState(
            id=parsed.to_string(),
            attributes={
                "project": parsed.project,
                "branch": parsed.branch,
                "file": [{"file_path": path} for path in parsed.file_paths],
            },
        )

    # ── Helpers ──

    @staticmethod
    def _parse_id(state: ResourceState) -> RepositoryFilesId:
        return RepositoryFilesId.from_string(state.id or "")

    @staticmethod
    def _to_state(
        resource_id: RepositoryFilesId, source: Mapping[str, Any], drift: DriftReport
    ) -> ResourceState:
        attributes: dict[str, Any] = {
            "project": resource_id.project,
            "branch": resource_id.branch,
        }
        for key in _SCALAR_FIELDS:
            if source.get(key) is not None:
                attributes[key] = source[key]
        attributes["file"] = [
            {"file_path": entry.path, "content": entry.text()}
            for entry in sorted(drift.observed, key=lambda entry: entry.path)
        ]
        return ResourceState(id=resource_id.to_string(), attributes=attributes)
