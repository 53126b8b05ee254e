"""User authorization: authorization URI and the token lifecycle."""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Mapping
from typing import Any

from ...config import Config
from ...constants import OAuthProtocol
from ...http_client import HttpClient
from ...responses import ResponseEnvelope, render_response
from ..base import OpenApiComponent
from .helpers import AuthHelper

_logger = logging.getLogger(__name__)

# Keys callers may override in the authorization URI.
AUTHORIZATION_URI_PARAMS = ("scope", "redirect_uri", "state")

_UNSET: Any = object()


def _query_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


class UserAuth(OpenApiComponent):
    """OAuth 2.0 authorization code flow for end users.

    None of these calls validates its inputs: codes, tokens and
    credentials are sent as given and the remote API rejects bad ones.
    Remote failures come back as an unsuccessful ResponseEnvelope.

    Example:
        >>> auth = UserAuth(config)
        >>> auth.authorization_uri({"state": "xyz"})
        'https://www.tiktok.com/v2/auth/authorize/?client_key=...&state=xyz'
        >>> auth.fetch_access_token("code-from-callback").success
        True
    """

    def __init__(self, config: Config, http_client: HttpClient | None = None) -> None:
        super().__init__(config, http_client)
        self.helper = AuthHelper(config)

    def authorization_uri(self, params: Mapping[str, Any] | None = None) -> str:
        """Build the authorization URI.

        Args:
            params: Optional overrides for ``scope``, ``redirect_uri`` and
                ``state``. Other keys are ignored. A list scope is
                comma-joined.

        Returns:
            The configured auth URL with the query string applied
        """
        query = self.helper.authorization_uri_default_params()
        for key in AUTHORIZATION_URI_PARAMS:
            if params and key in params:
                query[key] = params[key]

        encoded = urllib.parse.urlencode(
            {key: _query_value(value) for key, value in query.items()}
        )
        parts = urllib.parse.urlsplit(self.config.user_auth.auth_url or "")
        return urllib.parse.urlunsplit(parts._replace(query=encoded))

    def fetch_access_token(self, code: str, redirect_uri: str | None = _UNSET) -> ResponseEnvelope:
        """Exchange an authorization code for an access token.

        Args:
            code: The authorization code received on the callback
            redirect_uri: The redirect URI used for authorization.
                Defaults to the configured redirect URI.
        """
        if redirect_uri is _UNSET:
            redirect_uri = self.config.user_auth.redirect_uri

        return self._token_request(
            {
                "code": code,
                "grant_type": OAuthProtocol.GRANT_TYPE_AUTH_CODE,
                "redirect_uri": redirect_uri,
            }
        )

    def refresh_access_token(self, refresh_token: str) -> ResponseEnvelope:
        """Exchange a refresh token for a new access token."""
        return self._token_request(
            {
                "grant_type": OAuthProtocol.GRANT_TYPE_REFRESH_TOKEN,
                "refresh_token": refresh_token,
            }
        )

    def revoke_access_token(self, token: str) -> ResponseEnvelope:
        """Revoke an access token."""
        url = self.config.user_auth.revoke_token_url
        body = {**self.helper.credentials(), "token": token}

        _logger.debug("Revoking access token at %s", url)
        response = self.http_client.post(url, headers=self.helper.headers(), body=body)
        envelope = render_response(response)
        _logger.debug("Token revocation returned HTTP %s", envelope.code)
        return envelope

    def _token_request(self, grant: dict[str, Any]) -> ResponseEnvelope:
        url = self.config.user_auth.token_url
        body = {**self.helper.credentials(), **grant}

        _logger.debug("Requesting %s grant from %s", grant["grant_type"], url)
        response = self.http_client.post(url, headers=self.helper.headers(), body=body)
        envelope = render_response(response)
        _logger.debug("%s grant returned HTTP %s", grant["grant_type"], envelope.code)
        return envelope
