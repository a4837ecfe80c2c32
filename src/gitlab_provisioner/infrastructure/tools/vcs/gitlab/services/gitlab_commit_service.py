from typing import Any

import structlog

from gitlab_provisioner.core.domain.files import ReconciliationRequest
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.mappers.gitlab_commit_payload_builder import (
    GitLabCommitPayloadBuilder,
)
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.services.gitlab_paths import project_path

logger = structlog.get_logger()


class GitLabCommitService:
    def __init__(self, client: GitLabHttpClient, payload_builder: GitLabCommitPayloadBuilder):
        self.client = client
        self.payload_builder = payload_builder

    def create_commit(self, request: ReconciliationRequest) -> dict[str, Any]:
        """
        Submits every action of the request in a single commit.
        GitLab applies the whole batch or none of it.
        """
        path = f"{project_path(request.project)}/repository/commits"
        logger.info(
            "Committing actions",
            action_count=len(request.actions),
            branch=request.branch,
            project=request.project,
        )
        payload = self.payload_builder.build_commit_payload(request)
        response = self.client.post(path, payload)
        response.raise_for_status()
        return response.json()
