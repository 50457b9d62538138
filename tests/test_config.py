"""
Tests for Configuration, Helpers and Logging

Tests cover settings validation, the config summary, the helper
functions used by the parameter contracts, and logger setup.
"""

import logging
import pytest
from datetime import datetime
from unittest.mock import patch
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.validators import validate_settings, get_config_summary
from utils.exceptions import ConfigurationError, TumblrClientError
from utils.helpers import (
    compact, format_post_date, is_valid_url, join_tags, normalize_blog_identifier, safe_get
)
from utils.logger import APP_LOGGER_NAME, CustomFormatter, get_logger, setup_file_logging


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidateSettings:

    def test_valid_settings(self, mock_settings):
        assert validate_settings() is True

    def test_missing_consumer_key(self, mock_settings):
        with patch.object(mock_settings, "TUMBLR_CONSUMER_KEY", ""):
            with pytest.raises(ConfigurationError) as exc_info:
                validate_settings()

        assert "TUMBLR_CONSUMER_KEY" in str(exc_info.value)

    def test_missing_blog_identifier(self, mock_settings):
        with patch.object(mock_settings, "TUMBLR_BLOG_IDENTIFIER", ""):
            with pytest.raises(ConfigurationError):
                validate_settings()
            assert validate_settings(require_blog_identifier=False) is True

    def test_partial_oauth_credentials(self, mock_settings):
        with patch.object(mock_settings, "TUMBLR_OAUTH_SECRET", ""):
            with pytest.raises(ConfigurationError) as exc_info:
                validate_settings()

        assert "Incomplete OAuth" in str(exc_info.value)

    def test_no_oauth_is_allowed(self, mock_settings):
        with patch.multiple(mock_settings, TUMBLR_CONSUMER_SECRET="", TUMBLR_OAUTH_TOKEN="", TUMBLR_OAUTH_SECRET=""):
            assert validate_settings() is True

    def test_all_errors_reported_at_once(self, mock_settings):
        with patch.multiple(mock_settings, TUMBLR_CONSUMER_KEY="", TUMBLR_API_HOST="not a url",
                            DEFAULT_AVATAR_SIZE=65):
            with pytest.raises(ConfigurationError) as exc_info:
                validate_settings()

        message = str(exc_info.value)
        assert "TUMBLR_CONSUMER_KEY" in message
        assert "TUMBLR_API_HOST" in message
        assert "DEFAULT_AVATAR_SIZE" in message

    def test_configuration_error_in_hierarchy(self):
        assert issubclass(ConfigurationError, TumblrClientError)

    def test_summary_has_no_secrets(self, mock_settings):
        summary = get_config_summary()

        assert summary["blog"] == "test-blog.tumblr.com"
        assert summary["credentials"] == {"consumer_key": True, "oauth": True}
        assert "test-oauth-secret" not in str(summary)


# =============================================================================
# Helper Tests
# =============================================================================

class TestHelpers:

    @pytest.mark.parametrize("tags, expected", [
        (None, None),
        ("a,b", "a,b"),
        (["a", " b ", ""], "a,b"),
        ([], ""),
    ])
    def test_join_tags(self, tags, expected):
        assert join_tags(tags) == expected

    def test_format_naive_date_as_utc(self):
        assert format_post_date(datetime(2024, 1, 15, 10, 0, 0)) == "2024-01-15 10:00:00 GMT"

    def test_format_date_string_passthrough(self):
        assert format_post_date("tomorrow") == "tomorrow"
        assert format_post_date(None) is None

    def test_compact(self):
        assert compact({"a": None, "b": 0, "c": False, "d": ""}) == {"b": 0, "c": False, "d": ""}

    def test_safe_get(self):
        data = {"meta": {"status": 404}}
        assert safe_get(data, "meta", "status") == 404
        assert safe_get(data, "meta", "msg", default="x") == "x"
        assert safe_get([], "meta") is None

    @pytest.mark.parametrize("identifier, expected", [
        ("staff", "staff.tumblr.com"),
        ("staff.tumblr.com", "staff.tumblr.com"),
        ("blog.example.com", "blog.example.com"),
        (" staff ", "staff.tumblr.com"),
    ])
    def test_normalize_blog_identifier(self, identifier, expected):
        assert normalize_blog_identifier(identifier) == expected

    def test_is_valid_url(self):
        assert is_valid_url("https://api.tumblr.com")
        assert not is_valid_url("api.tumblr.com")


# =============================================================================
# Logger Tests
# =============================================================================

class TestLogger:

    def test_module_logger_is_child_of_app_logger(self):
        log = get_logger("services.blog_service")
        assert log.name == f"{APP_LOGGER_NAME}.services.blog_service"

    def test_console_handler_attached_once(self):
        get_logger("a")
        get_logger("b")
        app_logger = logging.getLogger(APP_LOGGER_NAME)

        console = [h for h in app_logger.handlers if getattr(h, "_tumblr_console", False)]
        assert len(console) == 1
        assert isinstance(console[0].formatter, CustomFormatter)

    def test_setup_file_logging(self, tmp_path):
        log_file = tmp_path / "client.log"
        app_logger = logging.getLogger(APP_LOGGER_NAME)
        original_level = app_logger.level

        log = setup_file_logging(str(log_file), logging.DEBUG)
        try:
            get_logger("tests").debug("hello file")
            for handler in log.handlers:
                handler.flush()
            assert "hello file" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in [h for h in log.handlers if isinstance(h, logging.FileHandler)]:
                log.removeHandler(handler)
                handler.close()
            log.setLevel(original_level)

    def test_formatter_colours_by_level(self):
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "bad", None, None)
        assert CustomFormatter().format(record).startswith(CustomFormatter.red)
