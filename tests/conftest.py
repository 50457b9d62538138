"""
Shared Test Fixtures for the Tumblr Blog Client

This module provides common fixtures used across all test modules.
Fixtures include a mock remote client, sample API payloads, settings
patches and log capture.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from typing import Any, Dict, List
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.remote_client import TumblrRemoteClient


BLOG = "test-blog.tumblr.com"


# =============================================================================
# Payload Factories
# =============================================================================

def make_post(post_id: int = 1, post_type: str = "text", **overrides: Any) -> Dict[str, Any]:
    """Build a post payload as returned in a /posts listing."""
    post = {
        "blog_name": "test-blog",
        "id": post_id,
        "id_string": str(post_id),
        "post_url": f"https://test-blog.tumblr.com/post/{post_id}",
        "type": post_type,
        "timestamp": 1700000000 + post_id,
        "date": "2023-11-14 22:13:20 GMT",
        "format": "html",
        "reblog_key": f"key{post_id}",
        "tags": ["python"],
        "bookmarklet": False,
        "mobile": False,
        "source_url": "",
        "title": f"Post {post_id}",
        "liked": False,
        "state": "published",
    }
    post.update(overrides)
    return post


def make_posts_response(posts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a /posts payload."""
    return {
        "blog": {"name": "test-blog", "title": "Test Blog"},
        "posts": posts,
        "total_posts": len(posts),
    }


def make_error_envelope(status: int, msg: str, errors: List[Any] = None) -> Dict[str, Any]:
    """Build the envelope pytumblr returns when the API reports an error."""
    return {
        "meta": {"status": status, "msg": msg},
        "response": [],
        "errors": errors or [],
    }


@pytest.fixture
def blog_info_payload():
    """Sample /info payload."""
    return {
        "blog": {
            "name": "test-blog",
            "title": "Test Blog",
            "url": "https://test-blog.tumblr.com/",
            "posts": 2,
            "total_posts": 2,
            "description": "A blog for tests",
            "updated": 1700000002,
        }
    }


@pytest.fixture
def posts_payload():
    """Sample /posts payload with two posts, newest first."""
    return make_posts_response([make_post(2), make_post(1)])


# =============================================================================
# Remote Client Fixtures
# =============================================================================

@pytest.fixture
def mock_remote_client():
    """
    Mock RemoteClient whose coroutine methods are AsyncMocks.

    Usage:
        def test_something(mock_remote_client):
            mock_remote_client.blog_info.return_value = {...}

    Returns:
        AsyncMock: A mock with the TumblrRemoteClient interface.
    """
    return AsyncMock(spec=TumblrRemoteClient)


@pytest.fixture
def mock_pytumblr():
    """
    Mock pytumblr.TumblrRestClient instance.

    Returns:
        MagicMock: A mock of the blocking client.
    """
    client = MagicMock()
    client.send_api_request.return_value = {}
    client.posts.return_value = make_posts_response([])
    return client


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def mock_settings():
    """
    Patch the settings module with safe test values.

    Patches attributes on config.settings itself, so every module that did
    `from config import settings` sees them.

    Returns:
        module: The patched settings module.
    """
    from config import settings

    values = {
        "TUMBLR_CONSUMER_KEY": "test-consumer-key",
        "TUMBLR_CONSUMER_SECRET": "test-consumer-secret",
        "TUMBLR_OAUTH_TOKEN": "test-oauth-token",
        "TUMBLR_OAUTH_SECRET": "test-oauth-secret",
        "TUMBLR_BLOG_IDENTIFIER": BLOG,
        "TUMBLR_API_HOST": "https://api.tumblr.com",
        "LOG_LEVEL": "INFO",
        "LOG_FILE": "/tmp/test_tumblr_client.log",
        "DEFAULT_AVATAR_SIZE": 64,
    }
    with patch.multiple(settings, **values):
        yield settings


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log records from the application logger.

    Returns:
        list: A list that will contain captured log records.
    """
    from utils.logger import get_logger

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    app_logger = get_logger()
    original_level = app_logger.level
    app_logger.setLevel(logging.DEBUG)
    app_logger.addHandler(handler)

    yield handler.records

    app_logger.removeHandler(handler)
    app_logger.setLevel(original_level)
