"""Content posting endpoints of the Open API."""

from __future__ import annotations

import logging

from ..responses import ResponseEnvelope, render_response
from ..validation import validate_token
from .base import OpenApiComponent

_logger = logging.getLogger(__name__)


class PostPublish(OpenApiComponent):
    def creator_info_query(self, access_token: str) -> ResponseEnvelope:
        """Query the creator's posting capabilities.

        The token is always validated; there is no bypass.

        Raises:
            RequestValidationError: If the access token is invalid
        """
        validate_token(access_token)

        url = self.config.creator_info_query_url
        _logger.debug("Querying creator info at %s", url)

        response = self.http_client.post(url, headers=self.bearer(access_token))
        return render_response(response)
