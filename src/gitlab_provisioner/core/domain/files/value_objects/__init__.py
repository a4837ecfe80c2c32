from gitlab_provisioner.core.domain.files.value_objects.commit_action import (
    CommitAction,
    CommitActionKind,
)
from gitlab_provisioner.core.domain.files.value_objects.commit_result import CommitResult
from gitlab_provisioner.core.domain.files.value_objects.file_entry import FileEntry
from gitlab_provisioner.core.domain.files.value_objects.remote_file import RemoteFile

__all__ = ["CommitAction", "CommitActionKind", "CommitResult", "FileEntry", "RemoteFile"]
