from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_provisioner.infrastructure.configuration.gitlab_settings import GitLabSettings


class AppConfig(BaseSettings):
    """
    Master configuration class combining all sub-settings.
    """
    app_name: str = Field(default="GitLab Provisioner", alias="APP_NAME")
    api_key: SecretStr | None = Field(default=None, alias="PROVISIONER_API_KEY")
    gitlab: GitLabSettings = Field(default_factory=GitLabSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
