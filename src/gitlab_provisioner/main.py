import os

import uvicorn

from gitlab_provisioner.infrastructure.entrypoints.api.app_factory import create_app
from gitlab_provisioner.infrastructure.resolution.container import get_app_config


def app_factory():
    return create_app(get_app_config())


def dev() -> None:
    uvicorn.run(
        "gitlab_provisioner.main:app_factory",
        factory=True,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        reload=os.environ.get("APP_ENV", "local") == "local",
    )


if __name__ == "__main__":
    dev()
