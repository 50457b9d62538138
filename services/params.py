"""
Post Parameter Contracts

This module defines the request-side shapes sent to the Tumblr API.

Every post-writing call shares a PostEnvelope of optional cross-cutting fields
(state, tags, scheduling, formatting). Each post type extends the envelope
with its own fields, and each has its own facade method, so the variant is
chosen by which method is called rather than by a runtime tag.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, ClassVar, Dict, Literal, Optional, Sequence, Union

from utils.helpers import compact, format_post_date, join_tags

PostType = Literal["text", "photo", "quote", "link", "chat", "audio", "video"]
PostState = Literal["published", "draft", "queue", "private"]
PostFormat = Literal["html", "markdown"]

Tags = Union[str, Sequence[str]]
PostDate = Union[str, datetime]


@dataclass(kw_only=True)
class PostEnvelope:
    """Optional fields shared by every post-writing call."""

    #: The type of post
    type: Optional[PostType] = None
    #: Lifecycle state of the post
    state: Optional[PostState] = None
    #: Tags, as a list or an already comma-separated string
    tags: Optional[Tags] = None
    #: Auto-share control: "off" for no tweet, or text to override the default
    tweet: Optional[str] = None
    #: GMT date and time of the post
    date: Optional[PostDate] = None
    #: Format of the post body
    format: Optional[PostFormat] = None
    #: Short text summary appended to the post URL
    slug: Optional[str] = None
    #: Convert external image URLs to Tumblr-hosted ones
    native_inline_images: Optional[bool] = None

    def to_params(self) -> Dict[str, Any]:
        """
        Build the request parameters.

        Returns:
            Dict: Field values without None entries, tags comma-joined and
            dates formatted as GMT strings.
        """
        params = {f.name: getattr(self, f.name) for f in fields(self)}
        params["tags"] = join_tags(self.tags)
        params["date"] = format_post_date(self.date)
        return compact(params)


@dataclass(kw_only=True)
class _MediaPostParams(PostEnvelope):
    """Envelope for post types that need at least one media source."""

    media_fields: ClassVar[Sequence[str]] = ()

    def __post_init__(self):
        if not any(getattr(self, name) for name in self.media_fields):
            raise ValueError(f"{type(self).__name__} requires one of: {', '.join(self.media_fields)}")


@dataclass(kw_only=True)
class TextPostParams(PostEnvelope):
    """Parameters for a text post."""

    body: str
    title: Optional[str] = None


@dataclass(kw_only=True)
class PhotoPostParams(_MediaPostParams):
    """
    Parameters for a photo post.

    One of source (image URL), data (file path or list of paths) or data64
    (base64-encoded image) must be given.

    pytumblr's create_photo does not accept data64; sending it needs a direct
    send_api_request call with its own option list, as edit_post does.
    """

    media_fields: ClassVar[Sequence[str]] = ("source", "data", "data64")

    source: Optional[str] = None
    data: Optional[Union[str, Sequence[str]]] = None
    data64: Optional[str] = None
    caption: Optional[str] = None
    link: Optional[str] = None


@dataclass(kw_only=True)
class QuotePostParams(PostEnvelope):
    """Parameters for a quote post."""

    quote: str
    source: Optional[str] = None


@dataclass(kw_only=True)
class LinkPostParams(PostEnvelope):
    """
    Parameters for a link post.

    pytumblr's create_link only accepts title, url and description; thumbnail,
    excerpt and author need a direct send_api_request call with their own
    option list, as edit_post does.
    """

    url: str
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None


@dataclass(kw_only=True)
class ChatPostParams(PostEnvelope):
    """Parameters for a chat post."""

    conversation: str
    title: Optional[str] = None


@dataclass(kw_only=True)
class AudioPostParams(_MediaPostParams):
    """Parameters for an audio post: external_url or data (an audio file path)."""

    media_fields: ClassVar[Sequence[str]] = ("external_url", "data")

    external_url: Optional[str] = None
    data: Optional[str] = None
    caption: Optional[str] = None


@dataclass(kw_only=True)
class VideoPostParams(_MediaPostParams):
    """Parameters for a video post: embed (code or URL) or data (a video file path)."""

    media_fields: ClassVar[Sequence[str]] = ("embed", "data")

    embed: Optional[str] = None
    data: Optional[str] = None
    caption: Optional[str] = None


@dataclass(kw_only=True)
class EditPostParams(PostEnvelope):
    """Parameters for editing an existing post. Only the fields given are changed."""

    id: int
    title: Optional[str] = None
    body: Optional[str] = None


@dataclass
class DeletePostParams:
    """Parameters for deleting a post."""

    id: int

    def to_params(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass(kw_only=True)
class PostsQuery:
    """Filters and paging for a blog's post listing."""

    id: Optional[int] = None
    tag: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    before: Optional[int] = None
    reblog_info: Optional[bool] = None
    notes_info: Optional[bool] = None
    #: "text" for plain text bodies, "raw" for the body as entered
    filter: Optional[Literal["text", "raw"]] = None

    def to_params(self) -> Dict[str, Any]:
        return compact({f.name: getattr(self, f.name) for f in fields(self)})
