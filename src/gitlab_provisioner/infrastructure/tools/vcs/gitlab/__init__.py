from .clients.gitlab_http_client import GitLabHttpClient
from .gitlab_repository_adapter import GitLabRepositoryAdapter

__all__ = ["GitLabHttpClient", "GitLabRepositoryAdapter"]
