from typing import Any

import structlog

from gitlab_provisioner.core.domain.files import FileWriteRequest
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.mappers.gitlab_commit_payload_builder import (
    GitLabCommitPayloadBuilder,
)
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.services.gitlab_paths import file_path

logger = structlog.get_logger()


class GitLabFileService:
    def __init__(self, client: GitLabHttpClient, payload_builder: GitLabCommitPayloadBuilder):
        self.client = client
        self.payload_builder = payload_builder

    def get_file(self, project: str, repo_file_path: str, ref: str) -> dict[str, Any] | None:
        """
        Fetches a single file at ref. Returns the raw JSON, or None on 404.
        """
        response = self.client.get(file_path(project, repo_file_path), params={"ref": ref})
        if response.status_code == 404:
            logger.debug("File not found", file_path=repo_file_path, ref=ref, project=project)
            return None
        response.raise_for_status()
        return response.json()

    def create_file(self, request: FileWriteRequest) -> dict[str, Any]:
        logger.info("Creating file", file_path=request.file_path, branch=request.branch, project=request.project)
        payload = self.payload_builder.build_file_payload(request)
        response = self.client.post(file_path(request.project, request.file_path), payload)
        response.raise_for_status()
        return response.json()

    def update_file(self, request: FileWriteRequest) -> dict[str, Any]:
        logger.info("Updating file", file_path=request.file_path, branch=request.branch, project=request.project)
        payload = self.payload_builder.build_file_payload(request)
        response = self.client.put(file_path(request.project, request.file_path), payload)
        response.raise_for_status()
        return response.json()

    def delete_file(self, request: FileWriteRequest) -> None:
        logger.info("Deleting file", file_path=request.file_path, branch=request.branch, project=request.project)
        payload = self.payload_builder.build_file_payload(request, include_content=False)
        response = self.client.delete(file_path(request.project, request.file_path), params=payload)
        response.raise_for_status()
