from abc import ABC, abstractmethod

from gitlab_provisioner.core.domain.branches import BranchInfo


class BranchPort(ABC):

    @abstractmethod
    def get_branch(self, project: str, branch_name: str) -> BranchInfo | None:
        """Returns branch info, or None when the branch does not exist."""

    @abstractmethod
    def create_branch(self, project: str, branch_name: str, ref: str) -> BranchInfo:
        """Creates branch_name from ref."""

    @abstractmethod
    def delete_branch(self, project: str, branch_name: str) -> None:
        pass
