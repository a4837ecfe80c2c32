import base64
import binascii
from typing import Any

from gitlab_provisioner.core.domain.branches import BranchInfo
from gitlab_provisioner.core.domain.files import CommitResult, RemoteFile


class GitLabResponseMapper:
    def map_file(self, raw_data: dict[str, Any]) -> RemoteFile:
        """
        Maps a raw GitLab repository file response to a RemoteFile with decoded content.
        """
        encoding = raw_data.get("encoding") or "base64"
        raw_content = raw_data.get("content") or ""
        if encoding == "base64":
            try:
                content = base64.b64decode(raw_content)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"GitLab returned invalid base64 for {raw_data.get('file_path')}") from exc
        else:
            content = raw_content.encode("utf-8")

        return RemoteFile(
            file_path=raw_data.get("file_path", ""),
            content=content,
            ref=raw_data.get("ref", ""),
            content_sha256=raw_data.get("content_sha256"),
            last_commit_id=raw_data.get("last_commit_id"),
            encoding=encoding,
        )

    def map_commit(self, raw_data: dict[str, Any]) -> CommitResult:
        return CommitResult(
            id=raw_data.get("id", ""),
            short_id=raw_data.get("short_id", ""),
            title=raw_data.get("title", ""),
            web_url=raw_data.get("web_url", ""),
        )

    def map_branch(self, raw_data: dict[str, Any]) -> BranchInfo:
        return BranchInfo(
            name=raw_data.get("name", ""),
            web_url=raw_data.get("web_url", ""),
            default=bool(raw_data.get("default", False)),
            can_push=bool(raw_data.get("can_push", False)),
            protected=bool(raw_data.get("protected", False)),
        )
