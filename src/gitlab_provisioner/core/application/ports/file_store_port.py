from abc import ABC, abstractmethod

from gitlab_provisioner.core.domain.files import (
    CommitResult,
    FileWriteRequest,
    ReconciliationRequest,
    RemoteFile,
)


class FileStorePort(ABC):
    """Path -> content store scoped to a project branch."""

    # ── Reads ──

    @abstractmethod
    def get_file(self, project: str, file_path: str, ref: str) -> RemoteFile | None:
        """Returns the decoded file, or None when the path does not exist on ref."""

    # ── Atomic multi-file commit ──

    @abstractmethod
    def create_commit(self, request: ReconciliationRequest) -> CommitResult:
        """Applies every action of the request as one revision.

        Raises RemoteCommitError when the remote rejects the commit; in that case
        none of the actions were applied.
        """

    # ── Single-file operations ──

    @abstractmethod
    def create_file(self, request: FileWriteRequest) -> RemoteFile | None:
        pass

    @abstractmethod
    def update_file(self, request: FileWriteRequest) -> None:
        pass

    @abstractmethod
    def delete_file(self, request: FileWriteRequest) -> None:
        pass
