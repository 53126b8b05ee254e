"""Shared pytest configuration and fixtures for TikTok Open SDK tests."""

import pytest

import tiktok_open_sdk as sdk
from tiktok_open_sdk import Config, MockHttpClient, UserAuthConfig

# Import HTTP mocking fixtures from fixtures module
pytest_plugins = ["tests.fixtures.mock_http"]

from tests.config import (  # noqa: E402
    TEST_AUTH_URL,
    TEST_CLIENT_KEY,
    TEST_CLIENT_SECRET,
    TEST_CREATOR_INFO_QUERY_URL,
    TEST_REDIRECT_URI,
    TEST_REVOKE_TOKEN_URL,
    TEST_SCOPES,
    TEST_TOKEN_URL,
    TEST_USER_INFO_URL,
)


@pytest.fixture
def sdk_config():
    """Configuration with test credentials and the real endpoint URLs."""
    return Config(
        client_key=TEST_CLIENT_KEY,
        client_secret=TEST_CLIENT_SECRET,
        user_info_url=TEST_USER_INFO_URL,
        creator_info_query_url=TEST_CREATOR_INFO_QUERY_URL,
        user_auth=UserAuthConfig(
            auth_url=TEST_AUTH_URL,
            token_url=TEST_TOKEN_URL,
            revoke_token_url=TEST_REVOKE_TOKEN_URL,
            scopes=list(TEST_SCOPES),
            redirect_uri=TEST_REDIRECT_URI,
        ),
    )


@pytest.fixture
def mock_http_client():
    """Factory for MockHttpClient instances."""

    def _make(status_code=200, json_response=None, text_response="", raise_error=None):
        return MockHttpClient(
            status_code=status_code,
            json_response=json_response,
            text_response=text_response,
            raise_error=raise_error,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_process_config():
    """Keep the process-wide configuration isolated between tests."""
    sdk.reset_config()
    yield
    sdk.reset_config()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove TIKTOK_* variables so environment loading sees only what a test sets."""
    from tiktok_open_sdk.config import ConfigSchema

    # setenv first so values loaded from .env files are also undone at teardown
    for spec in ConfigSchema.all_specs().values():
        monkeypatch.setenv(spec.name, "")
        monkeypatch.delenv(spec.name)
    return monkeypatch


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (HTTP layer mocked with respx)"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
