from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from gitlab_provisioner.infrastructure.configuration.app_config import AppConfig
from gitlab_provisioner.infrastructure.resolution.container import get_app_config

api_key_header = APIKeyHeader(name="X-API-KEY", auto_error=False)


def validate_api_key(
    api_key: str | None = Security(api_key_header),
    config: AppConfig = Depends(get_app_config),
) -> str | None:
    """Enforced only when PROVISIONER_API_KEY is configured."""
    if config.api_key is None:
        return None
    if not api_key or api_key != config.api_key.get_secret_value():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials"
        )
    return api_key
