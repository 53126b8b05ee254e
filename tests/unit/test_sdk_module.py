"""Unit tests for the process-wide configuration and client accessors."""

import pytest

import tiktok_open_sdk as sdk
from tiktok_open_sdk import (
    CallbackContext,
    ClientAuth,
    Config,
    HttpxHttpClient,
    PostPublish,
    TikTokOpenStrategy,
    UserApi,
    UserAuth,
)
from tiktok_open_sdk.constants import OpenApiUrls


@pytest.mark.unit
class TestConfigure:
    def test_get_config_creates_defaults_once(self):
        config = sdk.get_config()

        assert isinstance(config, Config)
        assert sdk.get_config() is config
        assert config.client_key is None
        assert config.user_info_url == OpenApiUrls.USER_INFO_URL
        assert config.user_auth.auth_url == OpenApiUrls.AUTH_URL
        assert config.user_auth.scopes == []

    def test_mutator_edits_in_place(self):
        def setup(config):
            config.client_key = "key"
            config.client_secret = "secret"
            config.user_auth.scopes = ["user.info.basic"]

        config = sdk.configure(setup)

        assert config is sdk.get_config()
        assert config.client_key == "key"
        assert config.client_secret == "secret"
        assert config.user_auth.scopes == ["user.info.basic"]

    def test_repeated_configure_accumulates(self):
        sdk.configure(lambda c: setattr(c, "client_key", "key"))
        sdk.configure(lambda c: setattr(c, "client_secret", "secret"))

        config = sdk.get_config()
        assert (config.client_key, config.client_secret) == ("key", "secret")

    def test_configure_without_mutator(self):
        assert sdk.configure() is sdk.get_config()

    def test_reset_config(self):
        first = sdk.configure(lambda c: setattr(c, "client_key", "key"))

        sdk.reset_config()

        assert sdk.get_config() is not first
        assert sdk.get_config().client_key is None


@pytest.mark.unit
class TestAccessors:
    @pytest.mark.parametrize(
        "accessor,cls",
        [
            (sdk.user_auth, UserAuth),
            (sdk.client_auth, ClientAuth),
            (sdk.user, UserApi),
            (sdk.post, PostPublish),
        ],
    )
    def test_accessors_bind_process_config(self, accessor, cls, mock_http_client):
        http_client = mock_http_client()

        client = accessor(http_client)

        assert isinstance(client, cls)
        assert client.config is sdk.get_config()
        assert client.http_client is http_client

    def test_accessor_sees_later_configuration(self, mock_http_client):
        http_client = mock_http_client(json_response={})
        auth = sdk.user_auth(http_client)

        sdk.configure(lambda c: setattr(c, "client_key", "late_key"))
        uri = auth.authorization_uri()

        assert "client_key=late_key" in uri

    def test_version_is_exposed(self):
        assert isinstance(sdk.__version__, str)
        assert sdk.__version__


@pytest.mark.unit
class TestHttpClientLifecycle:
    def test_accessors_share_one_default_client(self):
        shared = sdk.default_http_client()

        assert isinstance(shared, HttpxHttpClient)
        assert sdk.user_auth().http_client is shared
        assert sdk.client_auth().http_client is shared
        assert sdk.user().http_client is shared
        assert sdk.post().http_client is shared

    def test_reset_config_closes_default_client(self):
        shared = sdk.default_http_client()

        sdk.reset_config()

        assert shared._client.is_closed
        assert sdk.default_http_client() is not shared

    def test_closing_accessor_component_keeps_shared_client_open(self):
        with sdk.user_auth() as auth:
            shared = auth.http_client

        assert not shared._client.is_closed

    def test_component_closes_client_it_created(self):
        auth = UserAuth(Config())
        owned = auth.http_client

        with auth:
            pass

        assert owned._client.is_closed

    def test_component_leaves_injected_client_open(self):
        injected = HttpxHttpClient()

        with UserAuth(Config(), injected):
            pass

        assert not injected._client.is_closed
        injected.close()

    def test_default_strategy_uses_shared_client(self):
        strategy = TikTokOpenStrategy(CallbackContext())

        assert strategy.user_auth.http_client is sdk.default_http_client()
        assert strategy.user_api.http_client is sdk.default_http_client()

    def test_strategy_closes_client_it_created(self):
        with TikTokOpenStrategy(CallbackContext(), config=Config()) as strategy:
            owned = strategy.user_auth.http_client

        assert owned._client.is_closed
