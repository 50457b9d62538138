"""
Configuration Validation for the Tumblr Blog Client

This module contains configuration validation logic.
Kept apart from settings.py so settings stays a plain constants module.
"""

from utils.exceptions import ConfigurationError
from utils.helpers import is_valid_url
from utils.logger import get_logger


def validate_settings(require_blog_identifier: bool = True):
    """
    Validate that all required settings are properly configured.

    Args:
        require_blog_identifier: Set to False when the blog is supplied elsewhere

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here to avoid circular imports
    from config import settings

    errors = []
    logger = get_logger(__name__)

    # Required environment variables
    required_vars = [("TUMBLR_CONSUMER_KEY", settings.TUMBLR_CONSUMER_KEY)]
    if require_blog_identifier:
        required_vars.append(("TUMBLR_BLOG_IDENTIFIER", settings.TUMBLR_BLOG_IDENTIFIER))

    for var_name, var_value in required_vars:
        if not var_value:
            errors.append(f"Missing required environment variable: {var_name}")

    # Write operations need the full OAuth 1.0a set; reads work with the consumer key alone
    oauth_values = [
        settings.TUMBLR_CONSUMER_SECRET,
        settings.TUMBLR_OAUTH_TOKEN,
        settings.TUMBLR_OAUTH_SECRET,
    ]
    if any(oauth_values) and not all(oauth_values):
        errors.append("Incomplete OAuth credentials. Please configure TUMBLR_CONSUMER_SECRET, "
                      "TUMBLR_OAUTH_TOKEN and TUMBLR_OAUTH_SECRET together.")
    elif not any(oauth_values):
        logger.warning("No OAuth token configured. Only public read operations will succeed.")

    if not is_valid_url(settings.TUMBLR_API_HOST):
        errors.append(f"TUMBLR_API_HOST must be an absolute URL, got {settings.TUMBLR_API_HOST!r}")

    if settings.DEFAULT_AVATAR_SIZE not in settings.VALID_AVATAR_SIZES:
        errors.append(f"DEFAULT_AVATAR_SIZE must be one of {settings.VALID_AVATAR_SIZES}, "
                      f"got {settings.DEFAULT_AVATAR_SIZE}")

    if settings.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        errors.append(f"LOG_LEVEL must be a standard logging level name, got {settings.LOG_LEVEL}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    return {
        "blog": settings.TUMBLR_BLOG_IDENTIFIER,
        "api_host": settings.TUMBLR_API_HOST,
        "credentials": {
            "consumer_key": bool(settings.TUMBLR_CONSUMER_KEY),
            "oauth": bool(settings.TUMBLR_OAUTH_TOKEN and settings.TUMBLR_OAUTH_SECRET),
        },
        "logging": {
            "level": settings.LOG_LEVEL,
            "file": str(settings.LOG_FILE),
        },
    }
