"""Client credentials flow."""

from __future__ import annotations

import logging

from ...config import Config
from ...constants import OAuthProtocol
from ...http_client import HttpClient
from ...responses import ResponseEnvelope, render_response
from ..base import OpenApiComponent
from .helpers import AuthHelper

_logger = logging.getLogger(__name__)


class ClientAuth(OpenApiComponent):
    """Authenticates the application itself, with no end user involved."""

    def __init__(self, config: Config, http_client: HttpClient | None = None) -> None:
        super().__init__(config, http_client)
        self.helper = AuthHelper(config)

    def fetch_client_token(self) -> ResponseEnvelope:
        """Fetch a client access token from the token endpoint."""
        url = self.config.user_auth.token_url
        body = {
            **self.helper.credentials(),
            "grant_type": OAuthProtocol.GRANT_TYPE_CLIENT_CREDENTIALS,
        }

        _logger.debug("Requesting client token from %s", url)
        response = self.http_client.post(url, headers=self.helper.headers(), body=body)
        return render_response(response)
