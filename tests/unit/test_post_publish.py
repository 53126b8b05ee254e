"""Unit tests for the creator info query."""

import httpx
import pytest

from tests.config import TEST_ACCESS_TOKEN, TEST_CREATOR_INFO_QUERY_URL
from tiktok_open_sdk import PostPublish, RequestValidationError


@pytest.mark.unit
class TestCreatorInfoQuery:
    def test_posts_with_bearer_token_and_no_body(
        self, sdk_config, mock_http_client, creator_info_response
    ):
        http_client = mock_http_client(json_response=creator_info_response)

        envelope = PostPublish(sdk_config, http_client).creator_info_query(TEST_ACCESS_TOKEN)

        request = http_client.last_request
        assert request["method"] == "POST"
        assert request["url"] == TEST_CREATOR_INFO_QUERY_URL
        assert request["headers"] == {"Authorization": f"Bearer {TEST_ACCESS_TOKEN}"}
        assert request["content"] is None
        assert envelope.success is True
        assert envelope.response == creator_info_response

    @pytest.mark.parametrize("token", [None, "", "short", "tab\tinside_token"])
    def test_always_validates_token(self, sdk_config, mock_http_client, token):
        http_client = mock_http_client()

        with pytest.raises(RequestValidationError):
            PostPublish(sdk_config, http_client).creator_info_query(token)

        assert http_client.requests == []

    def test_server_error_is_returned(self, sdk_config, mock_http_client):
        http_client = mock_http_client(status_code=500, text_response="Internal Server Error")

        envelope = PostPublish(sdk_config, http_client).creator_info_query(TEST_ACCESS_TOKEN)

        assert envelope.success is False
        assert envelope.code == 500
        assert envelope.response == {"raw": "Internal Server Error"}

    def test_timeout_propagates(self, sdk_config, mock_http_client):
        http_client = mock_http_client(raise_error=httpx.ConnectTimeout("timed out"))

        with pytest.raises(httpx.TimeoutException):
            PostPublish(sdk_config, http_client).creator_info_query(TEST_ACCESS_TOKEN)
