"""
TikTok Open SDK

Client for the TikTok Open Platform OAuth 2.0 and REST APIs.

This library provides:
- Authorization URI construction and the token lifecycle
  (issue, refresh, revoke, client credentials)
- User info and creator info endpoints with input validation
- A login strategy for third-party authentication frameworks

Every call returns a ResponseEnvelope with ``success``, ``code`` and
``response``. Remote API errors are data, not exceptions.

Basic Usage:
    >>> import tiktok_open_sdk as sdk
    >>>
    >>> def setup(config):
    ...     config.client_key = "your_key"
    ...     config.client_secret = "your_secret"
    ...     config.user_auth.scopes = ["user.info.basic", "video.list"]
    ...     config.user_auth.redirect_uri = "https://your-redirect-uri.example.com"
    >>>
    >>> sdk.configure(setup)
    >>> sdk.user_auth().authorization_uri({"state": "xyz"})
    >>> envelope = sdk.user_auth().fetch_access_token("code-from-callback")
    >>> sdk.user().get_user_info(envelope.response["access_token"], ["open_id"])

Explicit configuration (no process-wide state):
    >>> from tiktok_open_sdk import Config, UserAuth
    >>> auth = UserAuth(Config(client_key="key", client_secret="secret"))

The process-wide configuration is not synchronized. Configure once at
startup, before spawning worker threads.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version

from .config import Config, ConfigError, UserAuthConfig
from .constants import OPEN_API_BASE_URL, OpenApiUrls
from .exceptions import (
    ConfigurationError,
    RequestValidationError,
    SdkError,
    TokenResponseError,
    UnsupportedContentTypeError,
    UnsupportedMethodError,
)
from .http_client import (
    HttpClient,
    HttpClientConfig,
    HttpResponse,
    HttpxHttpClient,
    MockHttpClient,
)
from .open_api import AuthHelper, ClientAuth, PostPublish, UserApi, UserAuth
from .responses import ResponseEnvelope, parse_json, render_response
from .strategy import AccessToken, CallbackContext, TikTokOpenStrategy
from .validation import USER_INFO_FIELDS, is_valid_token, validate_fields, validate_token

try:
    __version__ = version("tiktok-open-sdk")
except PackageNotFoundError:
    __version__ = "0.0.0"

_config: Config | None = None
_http_client: HttpxHttpClient | None = None


def configure(mutator: Callable[[Config], object] | None = None) -> Config:
    """Create the process-wide configuration if needed and apply mutator to it.

    Args:
        mutator: Function receiving the Config to modify in place

    Returns:
        The process-wide Config
    """
    config = get_config()
    if mutator is not None:
        mutator(config)
    return config


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the process-wide configuration and close the shared HTTP client."""
    global _config, _http_client
    _config = None
    if _http_client is not None:
        _http_client.close()
        _http_client = None


def default_http_client() -> HttpxHttpClient:
    """The HTTP client shared by the accessors below.

    Built once from ``get_config().http``; transport settings changed
    afterwards apply after ``reset_config()``.
    """
    global _http_client
    if _http_client is None:
        _http_client = HttpxHttpClient(get_config().http)
    return _http_client


def user_auth(http_client: HttpClient | None = None) -> UserAuth:
    return UserAuth(get_config(), http_client or default_http_client())


def client_auth(http_client: HttpClient | None = None) -> ClientAuth:
    return ClientAuth(get_config(), http_client or default_http_client())


def user(http_client: HttpClient | None = None) -> UserApi:
    return UserApi(get_config(), http_client or default_http_client())


def post(http_client: HttpClient | None = None) -> PostPublish:
    return PostPublish(get_config(), http_client or default_http_client())


__all__ = [
    # Configuration
    "Config",
    "UserAuthConfig",
    "ConfigError",
    "configure",
    "get_config",
    "reset_config",
    "default_http_client",
    "OPEN_API_BASE_URL",
    "OpenApiUrls",
    # Clients
    "user_auth",
    "client_auth",
    "user",
    "post",
    "AuthHelper",
    "UserAuth",
    "ClientAuth",
    "UserApi",
    "PostPublish",
    # Responses
    "ResponseEnvelope",
    "parse_json",
    "render_response",
    # Validation
    "USER_INFO_FIELDS",
    "is_valid_token",
    "validate_token",
    "validate_fields",
    # Strategy
    "AccessToken",
    "CallbackContext",
    "TikTokOpenStrategy",
    # HTTP client
    "HttpClient",
    "HttpClientConfig",
    "HttpResponse",
    "HttpxHttpClient",
    "MockHttpClient",
    # Exceptions
    "SdkError",
    "RequestValidationError",
    "ConfigurationError",
    "UnsupportedMethodError",
    "UnsupportedContentTypeError",
    "TokenResponseError",
]
