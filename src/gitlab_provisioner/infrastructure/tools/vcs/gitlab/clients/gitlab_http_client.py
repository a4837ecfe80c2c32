import ssl
from typing import Any

import httpx
import structlog

from gitlab_provisioner.infrastructure.configuration.gitlab_settings import GitLabSettings

logger = structlog.get_logger()


class GitLabHttpClient:
    """Thin synchronous wrapper around httpx with GitLab auth and TLS options.

    Paths are relative to the instance root, e.g. ``api/v4/projects/42``.
    Responses are returned as-is; status handling belongs to the callers.
    """

    def __init__(self, settings: GitLabSettings):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self._validate_config()
        self._verify: ssl.SSLContext | bool | None = None

    def _validate_config(self):
        self.settings.validate_credentials()

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        token = self.settings.token.get_secret_value() if self.settings.token else ""
        headers["PRIVATE-TOKEN"] = token
        return headers

    def _tls(self) -> ssl.SSLContext | bool:
        if self._verify is None:
            self._verify = self._build_ssl_context()
        return self._verify

    def _build_ssl_context(self) -> ssl.SSLContext | bool:
        settings = self.settings
        if settings.insecure and not settings.client_cert:
            return False
        context = ssl.create_default_context(cafile=settings.cacert_file)
        if settings.insecure:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if settings.client_cert and settings.client_key:
            context.load_cert_chain(settings.client_cert, settings.client_key)
        return context

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        logger.debug("GitLab request", http_method=method, url=url)
        with httpx.Client(verify=self._tls(), timeout=self.settings.timeout_seconds) as client:
            return client.request(method, url, headers=self._get_headers(), **kwargs)

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        return self._request("GET", path, params=params)

    def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        return self._request("POST", path, json=json_data)

    def put(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        return self._request("PUT", path, json=json_data)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        return self._request("DELETE", path, params=params)
