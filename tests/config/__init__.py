"""Test configuration constants for TikTok Open SDK tests."""

TEST_CLIENT_KEY = "test_client_key"
TEST_CLIENT_SECRET = "test_client_secret"

TEST_AUTH_URL = "https://www.tiktok.com/v2/auth/authorize/"
TEST_TOKEN_URL = "https://open.tiktokapis.com/v2/oauth/token/"
TEST_REVOKE_TOKEN_URL = "https://open.tiktokapis.com/v2/oauth/revoke/"
TEST_USER_INFO_URL = "https://open.tiktokapis.com/v2/user/info/"
TEST_CREATOR_INFO_QUERY_URL = "https://open.tiktokapis.com/v2/post/publish/creator_info/query/"

TEST_SCOPES = ("user.info.basic", "user.info.profile")
TEST_REDIRECT_URI = "https://example.com/auth/tiktok_open_sdk/callback"

TEST_ACCESS_TOKEN = "act.example12345Example12345Example"
TEST_REFRESH_TOKEN = "rft.example12345Example12345Example"
TEST_OPEN_ID = "test_open_id"

__all__ = [
    "TEST_CLIENT_KEY",
    "TEST_CLIENT_SECRET",
    "TEST_AUTH_URL",
    "TEST_TOKEN_URL",
    "TEST_REVOKE_TOKEN_URL",
    "TEST_USER_INFO_URL",
    "TEST_CREATOR_INFO_QUERY_URL",
    "TEST_SCOPES",
    "TEST_REDIRECT_URI",
    "TEST_ACCESS_TOKEN",
    "TEST_REFRESH_TOKEN",
    "TEST_OPEN_ID",
]
