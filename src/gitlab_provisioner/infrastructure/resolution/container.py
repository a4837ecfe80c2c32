from functools import lru_cache

import structlog

from gitlab_provisioner.core.application.resources import (
    BranchResource,
    RepositoryFileResource,
    RepositoryFilesResource,
    ResourceRegistry,
)
from gitlab_provisioner.infrastructure.common.retry import RetryPolicy
from gitlab_provisioner.infrastructure.configuration.app_config import AppConfig
from gitlab_provisioner.infrastructure.tools.vcs.gitlab import (
    GitLabHttpClient,
    GitLabRepositoryAdapter,
)
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.mappers import (
    GitLabCommitPayloadBuilder,
    GitLabResponseMapper,
)
from gitlab_provisioner.infrastructure.tools.vcs.gitlab.services import (
    GitLabBranchService,
    GitLabCommitService,
    GitLabFileService,
)

logger = structlog.get_logger()


def build_gitlab_adapter(config: AppConfig) -> GitLabRepositoryAdapter:
    """Wires the GitLab HTTP client, services and adapter from settings (fail fast on credentials)."""
    settings = config.gitlab
    client = GitLabHttpClient(settings)
    payload_builder = GitLabCommitPayloadBuilder()
    return GitLabRepositoryAdapter(
        file_service=GitLabFileService(client, payload_builder),
        commit_service=GitLabCommitService(client, payload_builder),
        branch_service=GitLabBranchService(client),
        mapper=GitLabResponseMapper(),
        read_retry=RetryPolicy(max_attempts=settings.read_retry_attempts),
    )


def build_registry(config: AppConfig) -> ResourceRegistry:
    adapter = build_gitlab_adapter(config)
    registry = ResourceRegistry(
        [
            RepositoryFilesResource(adapter, conflict_fallback=config.gitlab.create_conflict_fallback),
            RepositoryFileResource(adapter),
            BranchResource(adapter),
        ]
    )
    logger.info("Resource registry ready", resource_types=list(registry.resource_types()))
    return registry


@lru_cache(maxsize=1)
def get_app_config() -> AppConfig:
    return AppConfig()


@lru_cache(maxsize=1)
def get_registry() -> ResourceRegistry:
    return build_registry(get_app_config())
