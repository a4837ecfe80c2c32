import pytest

from gitlab_provisioner.core.application.ports import BranchPort, FileStorePort
from gitlab_provisioner.core.domain.branches import BranchInfo
from gitlab_provisioner.core.domain.files import (
    CommitActionKind,
    CommitResult,
    FileWriteRequest,
    ReconciliationRequest,
    RemoteFile,
)
from gitlab_provisioner.core.exceptions import RemoteCommitError
from gitlab_provisioner.infrastructure.configuration import AppConfig, GitLabSettings

GITLAB_URL = "https://gitlab.example.com"


class FakeFileStore(FileStorePort):
    """In-memory branch store that applies commits atomically, like GitLab does."""

    def __init__(self, files: dict[str, bytes] | None = None, branch: str = "main"):
        self.files: dict[tuple[str, str], bytes] = {(branch, path): content for path, content in (files or {}).items()}
        self.commits: list[ReconciliationRequest] = []
        self.get_calls: list[str] = []
        self.commit_errors: list[RemoteCommitError] = []
        self.before_commit = None
        self.single_file_calls: list[tuple[str, FileWriteRequest]] = []

    def get_file(self, project, file_path, ref):
        self.get_calls.append(file_path)
        content = self.files.get((ref, file_path))
        if content is None:
            return None
        return RemoteFile(file_path=file_path, content=content, ref=ref, last_commit_id=f"sha-{len(self.commits)}")

    def create_commit(self, request):
        if self.before_commit is not None:
            hook, self.before_commit = self.before_commit, None
            hook(self)
        if self.commit_errors:
            raise self.commit_errors.pop(0)
        for action in request.actions:
            exists = (request.branch, action.path) in self.files
            if action.kind is CommitActionKind.CREATE and exists:
                raise RemoteCommitError(
                    provider="GitLab", message="A file with this name already exists", status_code=400
                )
            if action.kind is not CommitActionKind.CREATE and not exists:
                raise RemoteCommitError(
                    provider="GitLab", message="A file with this name doesn't exist", status_code=400
                )
        for action in request.actions:
            key = (request.branch, action.path)
            if action.kind is CommitActionKind.DELETE:
                del self.files[key]
            else:
                self.files[key] = action.content
        self.commits.append(request)
        return CommitResult(id=f"sha-{len(self.commits)}")

    def create_file(self, request):
        self.single_file_calls.append(("create", request))
        return None

    def update_file(self, request):
        self.single_file_calls.append(("update", request))

    def delete_file(self, request):
        self.single_file_calls.append(("delete", request))


class FakeBranches(BranchPort):
    def __init__(self, existing: dict[str, BranchInfo] | None = None):
        self.branches: dict[str, BranchInfo] = dict(existing or {})
        self.created: list[tuple[str, str, str]] = []
        self.deleted: list[tuple[str, str]] = []

    def get_branch(self, project, branch_name):
        return self.branches.get(branch_name)

    def create_branch(self, project, branch_name, ref):
        self.created.append((project, branch_name, ref))
        info = BranchInfo(name=branch_name, web_url=f"{GITLAB_URL}/{project}/-/tree/{branch_name}", can_push=True)
        self.branches[branch_name] = info
        return info

    def delete_branch(self, project, branch_name):
        self.deleted.append((project, branch_name))
        self.branches.pop(branch_name, None)


@pytest.fixture
def file_store():
    return FakeFileStore()


@pytest.fixture
def make_store():
    return FakeFileStore


@pytest.fixture
def gitlab_settings():
    return GitLabSettings(
        base_url=GITLAB_URL,
        token="mock_gl_token",
        timeout_seconds=5,
    )


@pytest.fixture
def app_config(gitlab_settings):
    return AppConfig(app_name="TestProvisioner", gitlab=gitlab_settings)


@pytest.fixture
def files_record():
    return {
        "project": "group/app",
        "branch": "main",
        "commit_message": "manage files",
        "file": [
            {"file_path": "a.txt", "content": "A"},
            {"file_path": "b.txt", "content": "B"},
        ],
    }


@pytest.fixture
def make_branches():
    return FakeBranches
