import logging

import pytest

from tiktok_open_sdk.log import (
    NOISY_HTTP_LOGGERS,
    configure_logging,
    normalize_level,
    set_noisy_http_logger_levels,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    sdk_logger = logging.getLogger("tiktok_open_sdk")
    saved = (list(root.handlers), root.level, sdk_logger.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    sdk_logger.setLevel(saved[2])
    set_noisy_http_logger_levels("WARNING")


@pytest.mark.unit
class TestNormalizeLevel:
    @pytest.mark.parametrize(
        "raw,expected", [("debug", "DEBUG"), ("INFO", "INFO"), ("error", "ERROR")]
    )
    def test_upper_cases_known_levels(self, raw, expected):
        assert normalize_level(raw) == expected

    def test_ignores_trailing_comment(self):
        assert normalize_level("DEBUG # verbose while testing") == "DEBUG"

    @pytest.mark.parametrize("raw", ["", None, "LOUD", "  "])
    def test_falls_back_to_warning(self, raw):
        assert normalize_level(raw) == "WARNING"


@pytest.mark.unit
class TestNoisyHttpLoggerLevelSetter:
    def test_sets_warning_by_default(self, restore_logging):
        set_noisy_http_logger_levels("INFO")
        for name in NOISY_HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_stays_debug_when_global_debug(self, restore_logging):
        set_noisy_http_logger_levels("DEBUG")
        for name in NOISY_HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG


@pytest.mark.unit
class TestConfigureLogging:
    def test_sets_sdk_logger_level(self, restore_logging):
        assert configure_logging("info") == "INFO"
        assert logging.getLogger("tiktok_open_sdk").level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_debug_lets_http_loggers_through(self, restore_logging):
        assert configure_logging("DEBUG") == "DEBUG"
        assert logging.getLogger("httpcore").level == logging.DEBUG

    def test_invalid_level_uses_warning(self, restore_logging):
        assert configure_logging("chatty") == "WARNING"
        assert logging.getLogger().level == logging.WARNING
