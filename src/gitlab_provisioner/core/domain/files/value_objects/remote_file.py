from dataclasses import dataclass

from gitlab_provisioner.core.domain.files.value_objects.file_entry import FileEntry


@dataclass(frozen=True, kw_only=True)
class RemoteFile:
    """A file as returned by the remote store, content already decoded."""

    file_path: str
    content: bytes
    ref: str
    content_sha256: str | None = None
    last_commit_id: str | None = None
    encoding: str = "base64"

    def to_entry(self) -> FileEntry:
        return FileEntry(path=self.file_path, content=self.content)
