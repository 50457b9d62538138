"""
Blog Service Module

This module provides BlogService, the blog-scoped entry point of the client.
It binds one blog identifier and a remote client at construction and exposes
one method per Tumblr endpoint, each returning a cold Single.

The remote client is held as a field, not subclassed.
"""

import functools
from typing import Optional, Dict, Any, Mapping, Union

from config import settings
from services.models import BlogAvatar, BlogInfo, BlogPosts, Post, PostId
from services.params import (
    AudioPostParams, ChatPostParams, DeletePostParams, EditPostParams, LinkPostParams,
    PhotoPostParams, PostsQuery, PostType, QuotePostParams, TextPostParams, VideoPostParams
)
from services.protocols import RemoteClient
from services.remote_client import Credentials, create_remote_client
from services.stream import Single
from utils.exceptions import OperationNotImplementedError
from utils.logger import get_logger

logger = get_logger(__name__)

Params = Union[Mapping[str, Any], Any]


def not_implemented_yet(method):
    """Mark a declared operation as not backed by logic yet.

    The decorated method raises OperationNotImplementedError as soon as it is
    called, whatever its arguments, without touching the remote client.
    """
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        raise OperationNotImplementedError(method.__name__)
    wrapper.not_implemented = True
    return wrapper


def to_request_params(params: Optional[Params]) -> Dict[str, Any]:
    """
    Convert a parameter contract or plain mapping into request parameters.

    Args:
        params: A contract from services.params, a mapping, or None

    Returns:
        Dict: A new dict safe to hand to the remote client.
    """
    if params is None:
        return {}
    if hasattr(params, "to_params"):
        return params.to_params()
    return dict(params)


def _first_post(response: BlogPosts) -> Post:
    return response["posts"][0]


class BlogService:
    """Blog-scoped facade over the Tumblr API."""

    def __init__(self, blog_identifier: str, credentials: Optional[Credentials] = None,
                 client: Optional[RemoteClient] = None):
        """
        Initialize the service for one blog.

        Args:
            blog_identifier: Blog name or hostname every operation targets
            credentials: Used to construct the remote client when none is given
            client: An already constructed RemoteClient

        Raises:
            ConstructionError: If the remote client cannot be constructed.
        """
        self._blog_identifier = blog_identifier
        self._client = client if client is not None else create_remote_client(credentials)
        logger.debug(f"BlogService bound to {blog_identifier}")

    @classmethod
    def from_settings(cls) -> "BlogService":
        """Create a service for TUMBLR_BLOG_IDENTIFIER using the configured credentials."""
        return cls(settings.TUMBLR_BLOG_IDENTIFIER, Credentials.from_settings())

    @property
    def blog_identifier(self) -> str:
        return self._blog_identifier

    @property
    def client(self) -> RemoteClient:
        return self._client

    def __repr__(self) -> str:
        return f"BlogService(blog_identifier={self._blog_identifier!r})"

    # =========================================================================
    # Blog
    # =========================================================================

    def blog_info(self, params: Optional[Params] = None) -> Single[BlogInfo]:
        """
        Get the blog's metadata.

        Args:
            params: Optional query parameters

        Returns:
            Single[BlogInfo]: Emits the /info payload.
        """
        return Single.from_async(self._client.blog_info, self._blog_identifier, to_request_params(params))

    def blog_avatar(self, size: Optional[int] = None, params: Optional[Params] = None) -> Single[BlogAvatar]:
        """
        Get the blog's avatar URL.

        Args:
            size: Avatar size in pixels; the remote client picks its default when None
            params: Optional query parameters

        Returns:
            Single[BlogAvatar]: Emits the avatar payload.
        """
        return Single.from_async(self._client.blog_avatar, self._blog_identifier, size, to_request_params(params))

    @not_implemented_yet
    def blog_likes(self, params: Optional[Params] = None):
        """Posts liked by the blog."""

    @not_implemented_yet
    def blog_followers(self, params: Optional[Params] = None):
        """Followers of the blog."""

    def blog_posts(self, type: Optional[PostType] = None,
                   params: Optional[Union[PostsQuery, Mapping[str, Any]]] = None) -> Single[BlogPosts]:
        """
        List the blog's posts.

        Args:
            type: Restrict the listing to one post type
            params: Filters and paging, as a PostsQuery or a mapping

        Returns:
            Single[BlogPosts]: Emits the /posts payload.
        """
        return Single.from_async(self._client.blog_posts, self._blog_identifier, type, to_request_params(params))

    def blog_post(self, type: Optional[PostType] = None,
                  params: Optional[Union[PostsQuery, Mapping[str, Any]]] = None) -> Single[Optional[Post]]:
        """
        Get the first post of a listing.

        Any failure, including an empty listing or a remote error, is emitted
        as None instead of an error.

        Args:
            type: Restrict the listing to one post type
            params: Filters and paging, as a PostsQuery or a mapping

        Returns:
            Single[Optional[Post]]: Emits the first post, or None.
        """
        def _no_post(error: Exception) -> None:
            logger.warning(f"No post found for {self._blog_identifier} (type={type}): "
                           f"{error.__class__.__name__}: {error}")
            return None

        return self.blog_posts(type, params).map(_first_post).catch(_no_post)

    @not_implemented_yet
    def blog_queue(self, params: Optional[Params] = None):
        """Queued posts of the blog."""

    @not_implemented_yet
    def blog_drafts(self, params: Optional[Params] = None):
        """Draft posts of the blog."""

    @not_implemented_yet
    def blog_submissions(self, params: Optional[Params] = None):
        """Submissions to the blog."""

    # =========================================================================
    # User
    # =========================================================================

    @not_implemented_yet
    def user_info(self, params: Optional[Params] = None):
        """The authenticating user and their blogs."""

    @not_implemented_yet
    def user_dashboard(self, params: Optional[Params] = None):
        """Dashboard posts of the authenticating user."""

    @not_implemented_yet
    def user_following(self, params: Optional[Params] = None):
        """Blogs the authenticating user follows."""

    @not_implemented_yet
    def user_likes(self, params: Optional[Params] = None):
        """Posts the authenticating user liked."""

    @not_implemented_yet
    def tagged_posts(self, tag: Optional[str] = None, params: Optional[Params] = None):
        """Posts with a tag, across all blogs."""

    # =========================================================================
    # Posts
    # =========================================================================

    @not_implemented_yet
    def create_post(self, params: Optional[Params] = None):
        """Create a post of any type."""

    def edit_post(self, params: Union[EditPostParams, Mapping[str, Any]]) -> Single[PostId]:
        """
        Edit a post of this blog.

        Args:
            params: The post id and the fields to change

        Returns:
            Single[PostId]: Emits the edited post's id payload.
        """
        return Single.from_async(self._client.edit_post, self._blog_identifier, to_request_params(params))

    @not_implemented_yet
    def reblog_post(self, params: Optional[Params] = None):
        """Reblog a post to this blog."""

    def delete_post(self, params: Union[DeletePostParams, Mapping[str, Any]]) -> Single[PostId]:
        """
        Delete a post of this blog.

        Args:
            params: The post id

        Returns:
            Single[PostId]: Emits the deleted post's id payload.
        """
        return Single.from_async(self._client.delete_post, self._blog_identifier, to_request_params(params))

    @not_implemented_yet
    def follow_blog(self, params: Optional[Params] = None):
        """Follow a blog as the authenticating user."""

    @not_implemented_yet
    def unfollow_blog(self, params: Optional[Params] = None):
        """Unfollow a blog as the authenticating user."""

    @not_implemented_yet
    def like_post(self, params: Optional[Params] = None):
        """Like a post as the authenticating user."""

    @not_implemented_yet
    def unlike_post(self, params: Optional[Params] = None):
        """Unlike a post as the authenticating user."""

    def create_text_post(self, params: Union[TextPostParams, Mapping[str, Any]]) -> Single[PostId]:
        """
        Create a text post on this blog.

        Args:
            params: Body, optional title, and envelope fields

        Returns:
            Single[PostId]: Emits the new post's id payload.
        """
        return Single.from_async(self._client.create_text_post, self._blog_identifier, to_request_params(params))

    @not_implemented_yet
    def create_photo_post(self, params: Optional[PhotoPostParams] = None):
        """Create a photo post."""

    @not_implemented_yet
    def create_quote_post(self, params: Optional[QuotePostParams] = None):
        """Create a quote post."""

    @not_implemented_yet
    def create_link_post(self, params: Optional[LinkPostParams] = None):
        """Create a link post."""

    @not_implemented_yet
    def create_chat_post(self, params: Optional[ChatPostParams] = None):
        """Create a chat post."""

    @not_implemented_yet
    def create_audio_post(self, params: Optional[AudioPostParams] = None):
        """Create an audio post."""

    @not_implemented_yet
    def create_video_post(self, params: Optional[VideoPostParams] = None):
        """Create a video post."""
