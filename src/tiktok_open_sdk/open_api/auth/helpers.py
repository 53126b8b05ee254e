"""Headers, credentials and authorization defaults shared by auth clients."""

from __future__ import annotations

from typing import Any

from ...config import Config
from ...constants import ContentType, OAuthProtocol


class AuthHelper:
    """Builds the pieces every OAuth request shares from a Config.

    Values are read from the config at call time, so changes made
    through ``configure()`` are picked up by existing clients.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    @staticmethod
    def headers() -> dict[str, str]:
        return {
            "Content-Type": ContentType.FORM,
            "Cache-Control": "no-cache",
        }

    def credentials(self) -> dict[str, Any]:
        return {
            "client_key": self.config.client_key,
            "client_secret": self.config.client_secret,
        }

    def authorization_uri_default_params(self) -> dict[str, Any]:
        """Default query for the authorization URI.

        ``state`` is None unless the caller supplies one.
        """
        user_auth = self.config.user_auth
        return {
            "client_key": self.config.client_key,
            "response_type": OAuthProtocol.RESPONSE_TYPE_CODE,
            "scope": ",".join(user_auth.scopes),
            "redirect_uri": user_auth.redirect_uri,
            "state": None,
        }
