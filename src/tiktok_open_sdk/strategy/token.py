"""Access token record produced by the login strategy."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

# Keys consumed into AccessToken attributes; everything else lands in params.
_TOKEN_KEYS = ("access_token", "refresh_token", "expires_in", "expires_at")


def _seconds(value: Any) -> int:
    """Lenient integer conversion; anything unparseable counts as 0."""
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass(frozen=True)
class AccessToken:
    """OAuth access token handed to the host framework.

    The SDK builds it and never stores it; persisting it is the host's job.

    Attributes:
        token: The access token string
        refresh_token: Token used to obtain a new access token
        expires_at: Expiry as epoch seconds, or None if unknown
        params: Remaining fields of the token response (open_id, scope, ...)
    """

    token: str
    refresh_token: str | None = None
    expires_at: int | None = None
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: dict[str, Any], now: float | None = None) -> AccessToken:
        """Build a token from a token endpoint response body.

        ``expires_at`` is ``now + expires_in``; a missing or non-numeric
        expires_in counts as 0.
        """
        issued_at = int(time.time() if now is None else now)
        expires_in = _seconds(data.get("expires_in"))

        return cls(
            token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
            expires_at=issued_at + expires_in,
            params={key: value for key, value in data.items() if key not in _TOKEN_KEYS},
        )

    @property
    def expires(self) -> bool:
        return self.expires_at is not None

    def expired(self, now: float | None = None) -> bool:
        if self.expires_at is None:
            return False
        current = time.time() if now is None else now
        return self.expires_at <= current

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.params,
            "access_token": self.token,
            "refresh_token": self.refresh_token,
            "expires_at": self.expires_at,
        }
