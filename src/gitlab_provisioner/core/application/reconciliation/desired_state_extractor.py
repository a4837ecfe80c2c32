"""Turns an orchestrator record into a typed desired state. Pure, no I/O."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from gitlab_provisioner.core.domain.files import DesiredFileSet, FileEntry
from gitlab_provisioner.core.domain.identity.composite_id import PATH_LIST_DELIMITER
from gitlab_provisioner.core.exceptions import InvalidFilePathError, MissingRequiredFieldError

RESOURCE_TYPE = "gitlab_repository_files"


@dataclass(frozen=True, kw_only=True)
class DesiredRepositoryFiles:
    project: str
    branch: str
    commit_message: str
    files: DesiredFileSet
    start_branch: str | None = None
    author_name: str | None = None
    author_email: str | None = None


def extract_desired_state(record: Mapping[str, Any]) -> DesiredRepositoryFiles:
    project = _required_str(record, "project")
    branch = _required_str(record, "branch")
    commit_message = _required_str(record, "commit_message")
    if record.get("file") is None:
        raise MissingRequiredFieldError("file", RESOURCE_TYPE)

    return DesiredRepositoryFiles(
        project=project,
        branch=branch,
        commit_message=commit_message,
        files=DesiredFileSet(_to_entry(block) for block in record["file"]),
        start_branch=_optional_str(record, "start_branch"),
        author_name=_optional_str(record, "author_name"),
        author_email=_optional_str(record, "author_email"),
    )


def declared_file_paths(record: Mapping[str, Any]) -> list[str]:
    """Paths of the file blocks in a record, content not required."""
    paths = []
    for block in record.get("file") or []:
        path = block.get("file_path")
        if path:
            paths.append(str(path))
    return paths


def _to_entry(block: Mapping[str, Any]) -> FileEntry:
    path = block.get("file_path")
    if not path:
        raise MissingRequiredFieldError("file.file_path", RESOURCE_TYPE)
    if PATH_LIST_DELIMITER in str(path):
        raise InvalidFilePathError(str(path), f"must not contain '{PATH_LIST_DELIMITER}'")
    content = block.get("content") or ""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return FileEntry(path=str(path), content=content)


def _required_str(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None or not str(value).strip():
        raise MissingRequiredFieldError(key, RESOURCE_TYPE)
    return str(value)


def _optional_str(record: Mapping[str, Any], key: str) -> str | None:
    value = record.get(key)
    if value is None or value == "":
        return None
    return str(value)
