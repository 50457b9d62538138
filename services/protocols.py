"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for the Tumblr client.
These protocols enable loose coupling, dependency injection, and easier testing.

Protocols defined:
- RemoteClient: Interface of the remote client adapter wrapped by BlogService
"""

from typing import Protocol, Optional, Dict, Any

from services.models import BlogAvatar, BlogInfo, BlogPosts, PostId


class RemoteClient(Protocol):
    """Protocol defining the capability set consumed by BlogService.

    One coroutine method per relayed endpoint. Each takes the blog identifier
    first, then the already-built request parameters, and resolves or raises
    exactly once.

    Implementations should raise a RemoteError subclass when the API rejects
    the call or the request cannot be sent.
    """

    async def blog_info(self, blog_identifier: str, params: Optional[Dict[str, Any]] = None) -> BlogInfo:
        """Get information about a blog.

        Args:
            blog_identifier: Blog name or hostname.
            params: Optional query parameters.

        Returns:
            The /info payload.
        """
        ...

    async def blog_avatar(
        self,
        blog_identifier: str,
        size: Optional[int] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> BlogAvatar:
        """Get the avatar URL of a blog.

        Args:
            blog_identifier: Blog name or hostname.
            size: Avatar size in pixels, or None for the default.
            params: Optional query parameters.

        Returns:
            Payload with the avatar URL.
        """
        ...

    async def blog_posts(
        self,
        blog_identifier: str,
        type: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> BlogPosts:
        """List a blog's posts, optionally filtered to one post type.

        Args:
            blog_identifier: Blog name or hostname.
            type: Post type filter, or None for every type.
            params: Optional query parameters (tag, limit, offset...).

        Returns:
            The /posts payload.
        """
        ...

    async def edit_post(self, blog_identifier: str, params: Dict[str, Any]) -> PostId:
        """Edit a post. params must carry the post id."""
        ...

    async def delete_post(self, blog_identifier: str, params: Dict[str, Any]) -> PostId:
        """Delete a post. params must carry the post id."""
        ...

    async def create_text_post(self, blog_identifier: str, params: Dict[str, Any]) -> PostId:
        """Create a text post."""
        ...
