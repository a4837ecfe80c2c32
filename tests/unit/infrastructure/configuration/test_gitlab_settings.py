import pytest
from pydantic import ValidationError

from gitlab_provisioner.core.exceptions import ConfigurationError
from gitlab_provisioner.infrastructure.configuration import AppConfig, GitLabSettings


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("GITLAB_BASE_URL", "https://git.corp.local/api/v4/")
    monkeypatch.setenv("GITLAB_TOKEN", "glpat-abcdefgh12345")
    monkeypatch.setenv("GITLAB_INSECURE", "true")
    monkeypatch.setenv("GITLAB_READ_RETRY_ATTEMPTS", "3")

    settings = GitLabSettings()

    assert settings.base_url == "https://git.corp.local"
    assert settings.token.get_secret_value() == "glpat-abcdefgh12345"
    assert settings.insecure is True
    assert settings.read_retry_attempts == 3
    assert settings.create_conflict_fallback is True


def test_token_is_not_leaked_in_repr(gitlab_settings):
    assert "mock_gl_token" not in repr(gitlab_settings)


def test_retry_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        GitLabSettings(token="t", read_retry_attempts=0)


def test_client_cert_requires_key():
    settings = GitLabSettings(token="t", client_cert="/tmp/cert.pem")

    with pytest.raises(ConfigurationError):
        settings.validate_credentials()


def test_app_config_api_key(monkeypatch):
    monkeypatch.setenv("PROVISIONER_API_KEY", "s3cret")

    config = AppConfig()

    assert config.api_key.get_secret_value() == "s3cret"
    assert config.app_name == "GitLab Provisioner"
