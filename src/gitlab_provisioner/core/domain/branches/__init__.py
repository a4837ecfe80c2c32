from gitlab_provisioner.core.domain.branches.branch_info import BranchInfo

__all__ = ["BranchInfo"]
