"""
Remote Client Module

This module adapts pytumblr, Tumblr's blocking REST client, to the
RemoteClient protocol: one coroutine per endpoint that resolves with the
response payload or raises a RemoteError, exactly once.

The OAuth signing, HTTP transport and parameter encoding stay in pytumblr.
"""

import asyncio
from dataclasses import dataclass, fields
from typing import Optional, Dict, Any, Callable, List

import pytumblr
import requests

from config import settings
from services.params import (
    AudioPostParams, ChatPostParams, EditPostParams, LinkPostParams, PhotoPostParams, QuotePostParams,
    TextPostParams, VideoPostParams
)
from utils.exceptions import (
    AuthenticationError, ConstructionError, InvalidParametersError, NotFoundError, RateLimitError, RemoteError,
    TransportError
)
from utils.helpers import join_tags, normalize_blog_identifier, safe_get
from utils.logger import get_logger

logger = get_logger(__name__)

_ERRORS_BY_STATUS = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}


@dataclass(frozen=True)
class Credentials:
    """OAuth 1.0a credentials for the Tumblr API."""
    consumer_key: str
    consumer_secret: str = ""
    token: str = ""
    token_secret: str = ""

    @classmethod
    def from_settings(cls) -> "Credentials":
        """Build credentials from the TUMBLR_* settings."""
        return cls(
            consumer_key=settings.TUMBLR_CONSUMER_KEY,
            consumer_secret=settings.TUMBLR_CONSUMER_SECRET,
            token=settings.TUMBLR_OAUTH_TOKEN,
            token_secret=settings.TUMBLR_OAUTH_SECRET,
        )

    def __repr__(self) -> str:
        return f"Credentials(consumer_key={self.consumer_key[:4]}..., oauth={bool(self.token)})"


def raise_for_response(response: Any) -> Any:
    """
    Return a successful payload or raise the RemoteError it describes.

    pytumblr returns the `response` member on success and the whole envelope
    (`meta`, `response`, `errors`) when the API reports a failure.

    Args:
        response: The value returned by a pytumblr call

    Returns:
        The payload, unchanged.

    Raises:
        RemoteError: If the payload carries a meta status of 400 or more.
    """
    status = safe_get(response, "meta", "status")
    if not isinstance(status, int) or status < 400:
        return response

    message = safe_get(response, "meta", "msg", default="Unknown error")
    error_cls = _ERRORS_BY_STATUS.get(status, RemoteError)
    raise error_cls(message, status=status, errors=response.get("errors"), response=response)


def _option_names(*contracts) -> List[str]:
    """Field names of the given parameter contracts, in declaration order."""
    names = []
    for contract in contracts:
        for field in fields(contract):
            if field.name not in names:
                names.append(field.name)
    return names


# Options accepted by write requests. They are sent through send_api_request
# because pytumblr's create_text and edit_post wrappers accept a narrower set.
TEXT_POST_OPTIONS = _option_names(TextPostParams)
EDIT_POST_OPTIONS = _option_names(
    EditPostParams, TextPostParams, PhotoPostParams, QuotePostParams,
    LinkPostParams, ChatPostParams, AudioPostParams, VideoPostParams,
)


def _post_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Copy params for a write request, with tags comma-joined."""
    params = dict(params or {})
    if "tags" in params:
        params["tags"] = join_tags(params["tags"])
    return params


class TumblrRemoteClient:
    """RemoteClient implementation backed by pytumblr.TumblrRestClient."""

    def __init__(self, client: pytumblr.TumblrRestClient):
        """
        Initialize the adapter around an existing pytumblr client.

        Args:
            client: The blocking client every call is delegated to
        """
        self._client = client

    async def _call(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Run a blocking pytumblr call on a worker thread and unwrap its result.

        If the awaiting task is cancelled, the thread still finishes the request
        but its result is dropped.
        """
        logger.debug(f"Calling Tumblr API: {operation}")
        try:
            response = await asyncio.to_thread(func, *args, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Transport error during {operation}: {e}")
            raise TransportError(str(e)) from e
        except Exception as e:
            # pytumblr reports refused parameters with a bare Exception
            if type(e) is not Exception:
                raise
            logger.warning(f"pytumblr refused parameters for {operation}: {e}")
            raise InvalidParametersError(str(e)) from e

        try:
            return raise_for_response(response)
        except RemoteError as e:
            logger.warning(f"Tumblr API rejected {operation}: {e}")
            raise

    def _blog_get(self, operation: str, path: str, params: Optional[Dict[str, Any]], needs_api_key: bool):
        params = dict(params or {})
        return self._call(
            operation,
            self._client.send_api_request,
            "get",
            path,
            params,
            list(params),
            needs_api_key,
        )

    def _blog_write(self, operation: str, path: str, params: Dict[str, Any], valid_options: List[str]):
        return self._call(operation, self._client.send_api_request, "post", path, params, list(valid_options))

    async def blog_info(self, blog_identifier: str, params: Optional[Dict[str, Any]] = None) -> Any:
        blog = normalize_blog_identifier(blog_identifier)
        return await self._blog_get("blog_info", f"/v2/blog/{blog}/info", params, True)

    async def blog_avatar(
        self,
        blog_identifier: str,
        size: Optional[int] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        blog = normalize_blog_identifier(blog_identifier)
        size = size or settings.DEFAULT_AVATAR_SIZE
        return await self._blog_get("blog_avatar", f"/v2/blog/{blog}/avatar/{size}", params, False)

    async def blog_posts(
        self,
        blog_identifier: str,
        type: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        return await self._call("blog_posts", self._client.posts, blog_identifier, type=type, **dict(params or {}))

    async def edit_post(self, blog_identifier: str, params: Dict[str, Any]) -> Any:
        blog = normalize_blog_identifier(blog_identifier)
        return await self._blog_write("edit_post", f"/v2/blog/{blog}/post/edit", _post_params(params),
                                      EDIT_POST_OPTIONS)

    async def delete_post(self, blog_identifier: str, params: Dict[str, Any]) -> Any:
        return await self._call("delete_post", self._client.delete_post, blog_identifier, params["id"])

    async def create_text_post(self, blog_identifier: str, params: Dict[str, Any]) -> Any:
        blog = normalize_blog_identifier(blog_identifier)
        params = _post_params(params)
        params["type"] = "text"
        return await self._blog_write("create_text_post", f"/v2/blog/{blog}/post", params, TEXT_POST_OPTIONS)


def create_remote_client(credentials: Credentials, host: Optional[str] = None) -> TumblrRemoteClient:
    """
    Construct the pytumblr-backed remote client.

    Args:
        credentials: OAuth credentials handed to pytumblr untouched
        host: API host, defaults to settings.TUMBLR_API_HOST

    Returns:
        TumblrRemoteClient: The adapter.

    Raises:
        ConstructionError: If the credentials lack a consumer key or pytumblr fails.
    """
    if credentials is None or not credentials.consumer_key:
        raise ConstructionError("A consumer key is required to construct the Tumblr client")

    try:
        client = pytumblr.TumblrRestClient(
            credentials.consumer_key,
            credentials.consumer_secret,
            credentials.token,
            credentials.token_secret,
            host or settings.TUMBLR_API_HOST,
        )
    except Exception as e:
        raise ConstructionError(f"Failed to construct Tumblr client: {e}") from e

    logger.info("Tumblr client constructed")
    return TumblrRemoteClient(client)
