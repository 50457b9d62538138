"""
Helper Utility Module

This module provides various helper functions used throughout the Tumblr client.
"""

from typing import Optional, Dict, Any, Mapping, Sequence, Union
from datetime import datetime, timezone
from urllib.parse import urlparse

from config import settings


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is valid.

    Args:
        url: The URL to validate

    Returns:
        bool: True if the URL is valid, False otherwise
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def join_tags(tags: Optional[Union[str, Sequence[str]]]) -> Optional[str]:
    """
    Join tags into the comma-separated form the API expects.

    Args:
        tags: A comma-separated string or a sequence of tag strings

    Returns:
        str: Comma-joined tags, or None if no tags were given
    """
    if tags is None:
        return None
    if isinstance(tags, str):
        return tags
    return ",".join(tag.strip() for tag in tags if tag and tag.strip())


def format_post_date(value: Optional[Union[str, datetime]]) -> Optional[str]:
    """
    Format a post date as a GMT string.

    Naive datetimes are treated as UTC. Strings are passed through untouched.

    Args:
        value: The date to format

    Returns:
        str: The formatted date, or None if no date was given
    """
    if value is None or isinstance(value, str):
        return value
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(settings.DATE_FORMAT)


def compact(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Drop keys whose value is None.

    Args:
        params: The mapping to clean

    Returns:
        Dict: A new dict without None values
    """
    return {key: value for key, value in params.items() if value is not None}


def safe_get(data: Dict[str, Any], *keys, default: Any = None) -> Any:
    """
    Safely get a value from a nested dictionary.

    Args:
        data: The dictionary to search
        *keys: The keys to follow
        default: Default value if key doesn't exist

    Returns:
        The value at the specified keys or the default value
    """
    for key in keys:
        try:
            data = data[key]
        except (KeyError, TypeError, IndexError):
            return default
    return data


def normalize_blog_identifier(blog_identifier: str) -> str:
    """
    Turn a bare blog name into its hostname.

    "staff" becomes "staff.tumblr.com"; hostnames and custom domains are kept.

    Args:
        blog_identifier: Blog name or hostname

    Returns:
        str: The hostname used in API URLs
    """
    blog_identifier = blog_identifier.strip()
    if "." not in blog_identifier:
        return blog_identifier + settings.DEFAULT_BLOG_DOMAIN
    return blog_identifier
