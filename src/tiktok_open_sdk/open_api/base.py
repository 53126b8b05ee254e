"""Shared plumbing for Open API client components."""

from __future__ import annotations

from ..config import Config
from ..http_client import HttpClient, HttpxHttpClient


class OpenApiComponent:
    """Base for stateless client components bound to a Config.

    The HTTP client is created on first use from ``config.http`` unless
    one is injected. A client created here belongs to the component and
    is released by ``close()`` (or by leaving a ``with`` block); an
    injected client is left to its owner.

    Example:
        >>> with UserAuth(config) as auth:
        ...     auth.fetch_access_token("code")
    """

    def __init__(self, config: Config, http_client: HttpClient | None = None) -> None:
        self.config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def http_client(self) -> HttpClient:
        if self._http_client is None:
            self._http_client = HttpxHttpClient(self.config.http)
        return self._http_client

    def close(self) -> None:
        if self._owns_http_client and isinstance(self._http_client, HttpxHttpClient):
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> OpenApiComponent:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def bearer(access_token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}
