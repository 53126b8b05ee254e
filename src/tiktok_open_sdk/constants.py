"""
Centralized constants for the TikTok Open SDK.

Constants are grouped by:
- Endpoint defaults: URLs users may override through Config
- Protocol constants: Fixed by OAuth 2.0 and the Open API
- Transport defaults: Timeouts used by the default HTTP client
"""

from __future__ import annotations

# =============================================================================
# ENDPOINT DEFAULTS
# =============================================================================

OPEN_API_BASE_URL = "https://open.tiktokapis.com"


class OpenApiUrls:
    """Default endpoint URLs for the TikTok Open Platform."""

    AUTH_URL = "https://www.tiktok.com/v2/auth/authorize/"
    TOKEN_URL = f"{OPEN_API_BASE_URL}/v2/oauth/token/"
    REVOKE_TOKEN_URL = f"{OPEN_API_BASE_URL}/v2/oauth/revoke/"
    USER_INFO_URL = f"{OPEN_API_BASE_URL}/v2/user/info/"
    CREATOR_INFO_QUERY_URL = f"{OPEN_API_BASE_URL}/v2/post/publish/creator_info/query/"


# =============================================================================
# PROTOCOL CONSTANTS
# =============================================================================


class OAuthProtocol:
    """Constants defined by OAuth 2.0 as used by the Open API."""

    RESPONSE_TYPE_CODE = "code"

    GRANT_TYPE_AUTH_CODE = "authorization_code"
    GRANT_TYPE_REFRESH_TOKEN = "refresh_token"
    GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"


class ContentType:
    """Request body encodings understood by the HTTP client."""

    FORM = "application/x-www-form-urlencoded"
    JSON = "application/json"
    JSON_UTF8 = "application/json; charset=UTF-8"


class Scopes:
    """User info scopes."""

    BASIC = "user.info.basic"
    PROFILE = "user.info.profile"
    STATS = "user.info.stats"


# =============================================================================
# TRANSPORT DEFAULTS
# =============================================================================


class HttpDefaults:
    """Default timeouts for the HTTP client (seconds)."""

    READ_TIMEOUT = 10.0
    OPEN_TIMEOUT = 5.0


__all__ = [
    "OPEN_API_BASE_URL",
    "OpenApiUrls",
    "OAuthProtocol",
    "ContentType",
    "Scopes",
    "HttpDefaults",
]
