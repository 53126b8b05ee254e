"""
Custom exception hierarchy for the TikTok Open SDK.

All exceptions inherit from SdkError, allowing users to catch all
library-specific errors with a single except clause.

Remote API failures (4xx/5xx) are never raised: they come back as a
ResponseEnvelope with ``success`` set to False. Transport failures
(timeouts, connection errors) are the httpx exceptions, unwrapped.

Example:
    >>> try:
    ...     sdk.user().get_user_info("short", ["open_id"])
    ... except RequestValidationError as e:
    ...     print(e)
    Invalid token format: must be at least 10 printable characters.
"""

from __future__ import annotations

from typing import Any


class SdkError(Exception):
    """Base exception for all TikTok Open SDK errors."""

    pass


class RequestValidationError(SdkError):
    """Raised when a request input fails local validation.

    Always raised before any network call is made.
    """

    pass


class ConfigurationError(SdkError):
    """Raised when configuration cannot be loaded or is unusable."""

    pass


class UnsupportedMethodError(SdkError, ValueError):
    """Raised when the HTTP client is asked for a method other than GET or POST."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unsupported method: {method}")


class UnsupportedContentTypeError(SdkError, ValueError):
    """Raised when a request body cannot be encoded for its Content-Type."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"Unsupported content type: {content_type or ''}")


class TokenResponseError(SdkError):
    """Raised by the strategy when the token endpoint rejects a code exchange.

    Attributes:
        response: The normalized response body returned by the token endpoint
        code: HTTP status code of the token response
    """

    def __init__(self, response: Any, code: int | None = None) -> None:
        self.response = response
        self.code = code
        super().__init__(f"Token request failed (HTTP {code}): {response!r}")


__all__ = [
    "SdkError",
    "RequestValidationError",
    "ConfigurationError",
    "UnsupportedMethodError",
    "UnsupportedContentTypeError",
    "TokenResponseError",
]
