from typing import Any

import structlog

from gitlab_provisioner.infrastructure.tools.vcs.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.services.gitlab_paths import branch_path

logger = structlog.get_logger()


class GitLabBranchService:
    def __init__(self, client: GitLabHttpClient):
        self.client = client

    def get_branch(self, project: str, branch_name: str) -> dict[str, Any] | None:
        """
        Checks if a branch exists. Returns branch info or None.
        """
        response = self.client.get(branch_path(project, branch_name))
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def create_branch(self, project: str, branch_name: str, ref: str) -> dict[str, Any]:
        logger.info("Creating GitLab branch", branch=branch_name, project=project, ref=ref)
        payload = {
            "branch": branch_name,
            "ref": ref,
        }
        response = self.client.post(branch_path(project), payload)
        response.raise_for_status()
        return response.json()

    def delete_branch(self, project: str, branch_name: str) -> None:
        logger.info("Deleting GitLab branch", branch=branch_name, project=project)
        response = self.client.delete(branch_path(project, branch_name))
        if response.status_code == 404:
            logger.info("Branch already absent", branch=branch_name, project=project)
            return
        response.raise_for_status()
