"""
Configuration Settings for the Tumblr Blog Client

This module centralizes all configuration settings for the client,
including environment variables, API credentials, and application constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))

# Tumblr OAuth 1.0a Authentication
TUMBLR_CONSUMER_KEY = os.getenv("TUMBLR_CONSUMER_KEY", "")
TUMBLR_CONSUMER_SECRET = os.getenv("TUMBLR_CONSUMER_SECRET", "")
TUMBLR_OAUTH_TOKEN = os.getenv("TUMBLR_OAUTH_TOKEN", "")
TUMBLR_OAUTH_SECRET = os.getenv("TUMBLR_OAUTH_SECRET", "")

# Target blog (name like "staff" or hostname like "staff.tumblr.com")
TUMBLR_BLOG_IDENTIFIER = os.getenv("TUMBLR_BLOG_IDENTIFIER", "")

# API host
TUMBLR_API_HOST = os.getenv("TUMBLR_API_HOST", "https://api.tumblr.com")

# =============================================================================
# Logging Settings
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", os.path.join(APP_ROOT, "tumblr_client.log"))

# =============================================================================
# API Settings
# =============================================================================

# Avatar sizes accepted by /v2/blog/{blog}/avatar/{size}
DEFAULT_AVATAR_SIZE = 64
VALID_AVATAR_SIZES = (16, 24, 30, 40, 48, 64, 96, 128, 512)

# Scheduled post dates are sent as GMT strings
DATE_FORMAT = "%Y-%m-%d %H:%M:%S GMT"

# Domain appended to bare blog names
DEFAULT_BLOG_DOMAIN = ".tumblr.com"

# Posts listing
MAX_POSTS_LIMIT = 20                 # Tumblr caps limit at 20 per request
