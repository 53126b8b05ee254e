"""User endpoints of the Open API."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..responses import ResponseEnvelope, render_response
from ..validation import USER_INFO_FIELDS, validate_fields, validate_token
from .base import OpenApiComponent

_logger = logging.getLogger(__name__)


class UserApi(OpenApiComponent):
    """Reads the authorized user's profile."""

    FIELDS = USER_INFO_FIELDS

    def get_user_info(
        self,
        access_token: str,
        fields: Sequence[str],
        validate: bool = True,
    ) -> ResponseEnvelope:
        """Retrieve user information.

        Args:
            access_token: OAuth access token of the user
            fields: User fields to retrieve, a subset of FIELDS
            validate: Check the token and then the fields before sending.
                Passing False sends anything the caller gives, including
                malformed tokens; leave it on unless the inputs were
                already checked.

        Raises:
            RequestValidationError: If validation is on and the token or
                any field is invalid (token errors take precedence)
        """
        if validate:
            validate_token(access_token)
            validate_fields(fields)

        url = self.config.user_info_url
        _logger.debug("Fetching user info fields %s from %s", list(fields), url)

        response = self.http_client.get(
            url,
            params={"fields": ",".join(fields)},
            headers=self.bearer(access_token),
        )
        return render_response(response)
