from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_provisioner.core.exceptions import ConfigurationError


class GitLabSettings(BaseSettings):
    """Connection settings for the GitLab REST API."""

    # ── Core GitLab settings ──
    base_url: str = Field(default="https://gitlab.com", alias="GITLAB_BASE_URL")
    token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")

    # ── TLS ──
    insecure: bool = Field(default=False, alias="GITLAB_INSECURE")
    cacert_file: str | None = Field(default=None, alias="GITLAB_CACERT_FILE")
    client_cert: str | None = Field(default=None, alias="GITLAB_CLIENT_CERT")
    client_key: str | None = Field(default=None, alias="GITLAB_CLIENT_KEY")

    # ── Behaviour ──
    timeout_seconds: float = Field(default=20.0, alias="GITLAB_TIMEOUT_SECONDS")
    read_retry_attempts: int = Field(default=1, alias="GITLAB_READ_RETRY_ATTEMPTS")
    create_conflict_fallback: bool = Field(default=True, alias="GITLAB_CREATE_CONFLICT_FALLBACK")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @field_validator("base_url")
    @classmethod
    def strip_api_suffix(cls, value: str) -> str:
        """Accept both https://host and https://host/api/v4."""
        value = value.rstrip("/")
        if value.endswith("/api/v4"):
            value = value[: -len("/api/v4")]
        return value

    @field_validator("read_retry_attempts")
    @classmethod
    def at_least_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("GITLAB_READ_RETRY_ATTEMPTS must be >= 1")
        return value

    def validate_credentials(self) -> None:
        if not self.token or not self.token.get_secret_value():
            raise ConfigurationError("GitLab token is missing in settings.")
        if bool(self.client_cert) != bool(self.client_key):
            raise ConfigurationError("GITLAB_CLIENT_CERT and GITLAB_CLIENT_KEY must be set together.")
