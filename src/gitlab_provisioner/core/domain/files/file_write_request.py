from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class FileWriteRequest:
    """Single-file create/update/delete through the repository files API.

    ``content`` is already base64 encoded; it is ignored for deletes.
    """

    project: str
    branch: str
    file_path: str
    commit_message: str
    content: str | None = None
    start_branch: str | None = None
    author_name: str | None = None
    author_email: str | None = None
    last_commit_id: str | None = None
