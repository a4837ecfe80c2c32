from gitlab_provisioner.core.domain.files.file_set import DesiredFileSet, FileSet, ObservedFileSet
from gitlab_provisioner.core.domain.files.file_write_request import FileWriteRequest
from gitlab_provisioner.core.domain.files.reconciliation_request import ReconciliationRequest
from gitlab_provisioner.core.domain.files.value_objects import (
    CommitAction,
    CommitActionKind,
    CommitResult,
    FileEntry,
    RemoteFile,
)

__all__ = [
    "CommitAction",
    "CommitActionKind",
    "CommitResult",
    "DesiredFileSet",
    "FileEntry",
    "FileSet",
    "FileWriteRequest",
    "ObservedFileSet",
    "ReconciliationRequest",
    "RemoteFile",
]
