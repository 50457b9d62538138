"""
Custom Exception Classes for the Tumblr Blog Client

This module defines custom exceptions for better error handling and
categorization of failures across the client.
"""

from typing import Any, List, Optional


class TumblrClientError(Exception):
    """Base exception for all Tumblr client errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(TumblrClientError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


class ConstructionError(TumblrClientError):
    """Raised when the remote client cannot be constructed."""
    pass


# =============================================================================
# Remote API Errors
# =============================================================================

class RemoteError(TumblrClientError):
    """
    Raised when the Tumblr API reports a failure for a single call.

    Attributes:
        status: HTTP status from the response meta, or None for transport failures
        message: The meta message returned by the API
        errors: Detailed error entries returned by the API, if any
        response: The raw response payload
    """

    def __init__(self, message: str, status: Optional[int] = None,
                 errors: Optional[List[Any]] = None, response: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors or []
        self.response = response

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status} {self.message}"


class AuthenticationError(RemoteError):
    """Raised when the API rejects the credentials (401/403)."""
    pass


class NotFoundError(RemoteError):
    """Raised when the blog or post does not exist (404)."""
    pass


class RateLimitError(RemoteError):
    """Raised when a rate limit is hit (429)."""
    pass


class TransportError(RemoteError):
    """Raised when the request never produced an API response."""
    pass


class InvalidParametersError(RemoteError):
    """Raised when pytumblr refuses the request parameters before sending anything."""
    pass


# =============================================================================
# Placeholder Operations
# =============================================================================

class OperationNotImplementedError(TumblrClientError, NotImplementedError):
    """Raised by operations that are declared but not backed by logic yet."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} is not implemented yet.")
        self.operation = operation
