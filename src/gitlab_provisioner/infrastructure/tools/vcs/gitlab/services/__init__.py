from .gitlab_branch_service import GitLabBranchService
from .gitlab_commit_service import GitLabCommitService
from .gitlab_file_service import GitLabFileService

__all__ = ["GitLabBranchService", "GitLabCommitService", "GitLabFileService"]
