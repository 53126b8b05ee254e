"""
Login strategy for TikTok Open Platform.

Bridges a third-party-login framework's request/callback cycle to the
SDK clients. The host framework owns routing and sessions; it creates
one strategy per request from a CallbackContext and calls:

1. request_phase() to get the URL to redirect the user to
2. auth_hash() on the callback to exchange the code and read the profile

Supported scopes and their user info fields:
    - user.info.basic:   open_id, union_id, display_name, avatar_url,
                         avatar_url_100, avatar_large_url
    - user.info.profile: profile_deep_link, bio_description, is_verified, username
    - user.info.stats:   follower_count, following_count, likes_count, video_count

Example:
    >>> context = CallbackContext(params=request.args, callback_url=request.url)
    >>> strategy = TikTokOpenStrategy(context, config=config)
    >>> identity = strategy.auth_hash()
    >>> identity["uid"], identity["info"]["name"]
"""

from __future__ import annotations

import logging
import secrets
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from ..config import Config
from ..constants import OPEN_API_BASE_URL, OAuthProtocol, Scopes
from ..exceptions import RequestValidationError, TokenResponseError
from ..open_api import UserApi, UserAuth
from .token import AccessToken

_logger = logging.getLogger(__name__)

SCOPE_FIELDS: dict[str, tuple[str, ...]] = {
    Scopes.BASIC: (
        "open_id",
        "union_id",
        "display_name",
        "avatar_url",
        "avatar_url_100",
        "avatar_large_url",
    ),
    Scopes.PROFILE: ("profile_deep_link", "bio_description", "is_verified", "username"),
    Scopes.STATS: ("follower_count", "following_count", "likes_count", "video_count"),
}

# Profile fields added to ``info`` when the profile scope was requested.
PROFILE_INFO_FIELDS = ("username", "bio_description", "profile_deep_link")

STATE_SESSION_KEY = "omniauth.state"


@dataclass
class CallbackContext:
    """The host framework's view of the current request.

    Attributes:
        params: Query/form parameters of the request
        callback_url: Full callback URL as seen by the host
        session: Mutable per-user session storage, if the host has one
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    callback_url: str = ""
    session: dict[str, Any] = field(default_factory=dict)


class TikTokOpenStrategy:
    """Third-party-login strategy backed by the SDK.

    Per-request values (scopes, fields, token, profile) are computed
    once and cached for the lifetime of the instance, so create one
    strategy per request.
    """

    name = "tiktok_open_sdk"
    authorize_options = ("scope", "state", "redirect_uri")

    def __init__(
        self,
        context: CallbackContext,
        config: Config | None = None,
        user_auth: UserAuth | None = None,
        user_api: UserApi | None = None,
        client_key: str | None = None,
        authorize_params: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            context: The current request
            config: SDK configuration (the process-wide default if None)
            user_auth: Auth client (built from config if None)
            user_api: User API client (built from config if None)
            client_key: Overrides config.client_key in authorize params
            authorize_params: Static authorize URL parameters (may set scope,
                redirect_uri or state)
        """
        http_client = None
        if config is None:
            from .. import default_http_client, get_config

            config = get_config()
            http_client = default_http_client()

        self.context = context
        self.config = config
        self._owns_user_auth = user_auth is None
        self.user_auth = user_auth or UserAuth(config, http_client)
        self.user_api = user_api or UserApi(config, self.user_auth.http_client)
        self.client_key = client_key if client_key is not None else config.client_key
        self.extra_authorize_params = dict(authorize_params or {})

    def close(self) -> None:
        """Release the HTTP client of a user_auth built by this strategy."""
        if self._owns_user_auth:
            self.user_auth.close()

    def __enter__(self) -> TikTokOpenStrategy:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Request phase
    # =========================================================================

    def client_options(self) -> dict[str, Any]:
        return {
            "site": OPEN_API_BASE_URL,
            "authorize_url": self.config.user_auth.auth_url,
            "token_url": self.config.user_auth.token_url,
        }

    def authorize_params(self) -> dict[str, Any]:
        """Parameters for the authorization URL.

        Configured scope and redirect URI, the static ``authorize_params``
        given at construction, a state (kept in the session) and the client
        key. Nothing is read from the incoming request.
        """
        user_auth = self.config.user_auth
        params: dict[str, Any] = {
            "scope": ",".join(user_auth.scopes),
            "redirect_uri": user_auth.redirect_uri,
        }
        params.update(self.extra_authorize_params)

        if not params.get("state"):
            params["state"] = secrets.token_hex(24)
        self.context.session[STATE_SESSION_KEY] = params["state"]

        params["client_key"] = self.client_key
        return params

    def request_phase(self) -> str:
        """Return the authorization URL the host should redirect to.

        Raises:
            RequestValidationError: If a client_secret made it into the params
        """
        params = {**self.authorize_params(), "response_type": OAuthProtocol.RESPONSE_TYPE_CODE}

        if "client_secret" in params:
            raise RequestValidationError(
                "client_secret is not allowed in authorize URL query params"
            )

        query = urllib.parse.urlencode(
            {key: "" if value is None else value for key, value in params.items()}
        )
        parts = urllib.parse.urlsplit(self.config.user_auth.auth_url or "")
        return urllib.parse.urlunsplit(parts._replace(query=query))

    # =========================================================================
    # Callback phase
    # =========================================================================

    @property
    def callback_url(self) -> str:
        """The callback URL without its query string."""
        return self.context.callback_url.split("?", 1)[0]

    def build_access_token(self) -> AccessToken:
        """Exchange the callback's code for an access token.

        Raises:
            TokenResponseError: If the token endpoint reports a failure or
                its body carries no access token
        """
        envelope = self.user_auth.fetch_access_token(
            self.context.params.get("code"), redirect_uri=self.callback_url
        )

        if not envelope.success:
            _logger.warning("Token exchange failed with HTTP %s", envelope.code)
            raise TokenResponseError(envelope.response, envelope.code)

        body = envelope.response
        if not isinstance(body, dict) or not body.get("access_token"):
            _logger.warning("Token response with HTTP %s has no access token", envelope.code)
            raise TokenResponseError(body, envelope.code)

        return AccessToken.from_response(body)

    @cached_property
    def access_token(self) -> AccessToken:
        return self.build_access_token()

    @cached_property
    def request_scopes(self) -> list[str]:
        scopes = self.context.params.get("scopes") or Scopes.BASIC
        return scopes.split(",")

    @cached_property
    def user_info_fields(self) -> list[str]:
        """Union of the requested scopes' fields; unknown scopes add nothing."""
        fields: list[str] = []
        for scope in self.request_scopes:
            for name in SCOPE_FIELDS.get(scope, ()):
                if name not in fields:
                    fields.append(name)
        return fields

    @cached_property
    def raw_info(self) -> dict[str, Any]:
        envelope = self.user_api.get_user_info(self.access_token.token, self.user_info_fields)
        body = envelope.response if isinstance(envelope.response, dict) else {}
        data = body.get("data")
        user = data.get("user") if isinstance(data, dict) else None
        return user if isinstance(user, dict) else {}

    @property
    def uid(self) -> str:
        return str(self.raw_info.get("open_id", ""))

    @property
    def info(self) -> dict[str, Any]:
        info = {
            "name": self.raw_info.get("display_name"),
            "image": self.raw_info.get("avatar_url_100"),
        }
        if Scopes.PROFILE in self.request_scopes:
            info.update(
                {key: self.raw_info[key] for key in PROFILE_INFO_FIELDS if key in self.raw_info}
            )
        return info

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.raw_info)

    @property
    def credentials(self) -> dict[str, Any]:
        token = self.access_token
        credentials: dict[str, Any] = {"token": token.token, "expires": token.expires}
        if token.refresh_token:
            credentials["refresh_token"] = token.refresh_token
        if token.expires_at is not None:
            credentials["expires_at"] = token.expires_at
        return credentials

    def auth_hash(self) -> dict[str, Any]:
        """Normalized identity record for the host framework."""
        return {
            "provider": self.name,
            "uid": self.uid,
            "info": self.info,
            "credentials": self.credentials,
            "extra": self.extra,
        }
