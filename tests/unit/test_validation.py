"""Unit tests for token and field validation."""

import pytest

from tiktok_open_sdk import RequestValidationError
from tiktok_open_sdk.validation import (
    INVALID_TOKEN_MESSAGE,
    USER_INFO_FIELDS,
    is_valid_token,
    validate_fields,
    validate_token,
)


@pytest.mark.unit
class TestIsValidToken:
    @pytest.mark.parametrize(
        "token",
        [
            "a" * 10,
            "act.1234567890abcdef",
            "token with spaces in it",
            "!@#$%^&*()_+-=",
            "tökën-ünïcödé-välüé",
        ],
    )
    def test_accepts_printable_tokens_of_ten_or_more(self, token):
        assert is_valid_token(token) is True

    @pytest.mark.parametrize("token", ["", "short", "a" * 9])
    def test_rejects_tokens_shorter_than_ten(self, token):
        assert is_valid_token(token) is False

    @pytest.mark.parametrize(
        "token",
        [
            "valid_token\n",
            "\tvalid_token",
            "valid\x00token_with_null",
            "valid_token_\x7f",
        ],
    )
    def test_rejects_control_characters_anywhere(self, token):
        assert is_valid_token(token) is False

    @pytest.mark.parametrize(
        "token",
        [
            "act.abc\xa0defghij",
            "act.abc\u200ddefghij",
            "act.\ue000abcdefghij",
            "act.abc\u2028defghij",
        ],
    )
    def test_accepts_non_control_unicode_characters(self, token):
        assert is_valid_token(token) is True

    def test_rejects_c1_control_characters(self):
        assert is_valid_token("act.abc\x85defghij") is False

    def test_checks_whole_string_not_prefix(self):
        assert is_valid_token("0123456789" + "\n" + "tail") is False

    @pytest.mark.parametrize("token", [None, 1234567890123, ["a" * 12], b"bytes_token_123"])
    def test_rejects_non_strings(self, token):
        assert is_valid_token(token) is False


@pytest.mark.unit
class TestValidateToken:
    def test_valid_token_is_noop(self):
        assert validate_token("valid_token_123") is None

    @pytest.mark.parametrize("token", [None, "", "short", "bad\ntoken_value"])
    def test_invalid_token_raises_with_fixed_message(self, token):
        with pytest.raises(RequestValidationError) as exc_info:
            validate_token(token)

        assert str(exc_info.value) == INVALID_TOKEN_MESSAGE
        assert str(exc_info.value) == (
            "Invalid token format: must be at least 10 printable characters."
        )


@pytest.mark.unit
class TestValidateFields:
    def test_allow_list_has_fourteen_fields(self):
        assert len(USER_INFO_FIELDS) == 14
        assert len(set(USER_INFO_FIELDS)) == 14

    def test_subset_is_noop(self):
        assert validate_fields(["open_id", "display_name", "video_count"]) is None

    def test_all_fields_are_accepted(self):
        validate_fields(list(USER_INFO_FIELDS))

    def test_empty_list_is_noop(self):
        validate_fields([])

    def test_reports_invalid_fields_in_request_order(self):
        with pytest.raises(RequestValidationError) as exc_info:
            validate_fields(["zeta", "open_id", "alpha", "display_name"])

        assert str(exc_info.value) == "Invalid fields: zeta, alpha"

    def test_reports_single_invalid_field(self):
        with pytest.raises(RequestValidationError, match=r"^Invalid fields: email$"):
            validate_fields(["open_id", "email"])
