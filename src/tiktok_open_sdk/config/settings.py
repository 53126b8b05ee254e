"""SDK configuration objects.

A Config is passed explicitly to every client component. The
process-wide default used by the convenience accessors lives in
``tiktok_open_sdk`` and is created through ``configure()``.

No validation happens here: bad URLs or empty credentials surface
only when a request is made.

Thread safety: Config is plain mutable data with no locking.
Configure once at startup, before spawning worker threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import OpenApiUrls
from ..http_client import HttpClientConfig


@dataclass
class UserAuthConfig:
    """OAuth URLs, scopes and redirect URI for the user authorization flow."""

    auth_url: str = OpenApiUrls.AUTH_URL
    token_url: str = OpenApiUrls.TOKEN_URL
    revoke_token_url: str = OpenApiUrls.REVOKE_TOKEN_URL
    scopes: list[str] = field(default_factory=list)
    redirect_uri: str | None = None


@dataclass
class Config:
    """Client credentials, endpoint URLs and transport settings.

    Example:
        >>> config = Config(client_key="your_key", client_secret="your_secret")
        >>> config.user_auth.scopes = ["user.info.basic", "video.list"]
        >>> config.user_auth.redirect_uri = "https://your-redirect-uri.example.com"
    """

    client_key: str | None = None
    client_secret: str | None = None
    user_info_url: str = OpenApiUrls.USER_INFO_URL
    creator_info_query_url: str = OpenApiUrls.CREATOR_INFO_QUERY_URL
    user_auth: UserAuthConfig = field(default_factory=UserAuthConfig)
    http: HttpClientConfig = field(default_factory=HttpClientConfig)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Config:
        """Build a Config from TIKTOK_* environment variables.

        A .env file is loaded first (without overriding variables that
        are already set).

        Raises:
            ConfigError: If a variable cannot be converted to its type
        """
        from .loader import load_config_from_env

        return load_config_from_env(dotenv_path)
