"""Third-party-login framework integration."""

from .tiktok_open import (
    PROFILE_INFO_FIELDS,
    SCOPE_FIELDS,
    STATE_SESSION_KEY,
    CallbackContext,
    TikTokOpenStrategy,
)
from .token import AccessToken

__all__ = [
    "PROFILE_INFO_FIELDS",
    "SCOPE_FIELDS",
    "STATE_SESSION_KEY",
    "AccessToken",
    "CallbackContext",
    "TikTokOpenStrategy",
]
