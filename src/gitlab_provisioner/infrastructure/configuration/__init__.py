from gitlab_provisioner.infrastructure.configuration.app_config import AppConfig
from gitlab_provisioner.infrastructure.configuration.gitlab_settings import GitLabSettings

__all__ = ["AppConfig", "GitLabSettings"]
