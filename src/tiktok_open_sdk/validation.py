"""
Request validation for the TikTok Open SDK.

Validation is reserved for caller-controlled resource inputs (access
tokens and user info field names). Client credentials are passed
through as-is and left for the remote API to reject.

All validation functions raise RequestValidationError before any
network call is made.

Example:
    >>> validate_token("short")
    RequestValidationError: Invalid token format: must be at least 10 printable characters.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable

from .exceptions import RequestValidationError

_logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 10

INVALID_TOKEN_MESSAGE = "Invalid token format: must be at least 10 printable characters."

# User info fields that can be requested from the API.
USER_INFO_FIELDS = (
    "open_id",
    "union_id",
    "avatar_url",
    "avatar_url_100",
    "avatar_large_url",
    "display_name",
    "bio_description",
    "profile_deep_link",
    "is_verified",
    "username",
    "follower_count",
    "following_count",
    "likes_count",
    "video_count",
)


# =============================================================================
# TOKEN VALIDATION
# =============================================================================


def is_valid_token(token: object) -> bool:
    """Check whether token is a string of at least 10 printable characters.

    Only control characters (Unicode category Cc) count as unprintable.
    Other separators and format characters such as NBSP or a zero-width
    joiner are accepted. A single control character anywhere makes the
    token invalid.

    Example:
        >>> is_valid_token("act.1234567890")
        True
        >>> is_valid_token("act.12345\\n67890")
        False
    """
    if not isinstance(token, str) or len(token) < MIN_TOKEN_LENGTH:
        return False
    return not any(unicodedata.category(char) == "Cc" for char in token)


def validate_token(token: object) -> None:
    """Validate an access token.

    Raises:
        RequestValidationError: If the token is not at least 10 printable characters
    """
    if is_valid_token(token):
        return

    _logger.debug("Rejected access token of type %s", type(token).__name__)
    raise RequestValidationError(INVALID_TOKEN_MESSAGE)


# =============================================================================
# FIELD VALIDATION
# =============================================================================


def validate_fields(fields: Iterable[str]) -> None:
    """Ensure every requested field is a known user info field.

    Offending fields are reported in the order they were requested.

    Raises:
        RequestValidationError: If any field is not in USER_INFO_FIELDS

    Example:
        >>> validate_fields(["open_id", "email", "phone"])
        RequestValidationError: Invalid fields: email, phone
    """
    invalid = [name for name in fields if name not in USER_INFO_FIELDS]

    if not invalid:
        return

    _logger.debug("Rejected user info fields: %s", invalid)
    raise RequestValidationError(f"Invalid fields: {', '.join(str(name) for name in invalid)}")


__all__ = [
    "MIN_TOKEN_LENGTH",
    "INVALID_TOKEN_MESSAGE",
    "USER_INFO_FIELDS",
    "is_valid_token",
    "validate_token",
    "validate_fields",
]
