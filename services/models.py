"""
Response Contracts

TypedDict shapes for payloads returned by the Tumblr API. Payloads are passed
through as the remote client produced them; these types only describe them.
"""

from typing import Any, Dict, List, Literal, TypedDict

ResponsePostType = Literal["text", "quote", "link", "answer", "video", "audio", "photo", "chat"]
ResponsePostState = Literal["published", "queued", "draft", "private"]


class SubmissionTerms(TypedDict, total=False):
    accepted_types: List[str]
    tags: List[str]
    title: str
    guidelines: str


class BlogDetails(TypedDict, total=False):
    """The `blog` object of /info."""
    admin: bool
    ask: bool
    ask_anon: bool
    ask_page_title: str
    can_send_fan_mail: bool
    can_submit: bool
    can_subscribe: bool
    description: str
    drafts: int
    facebook: str
    facebook_opengraph_enabled: str
    followed: bool
    followers: int
    is_adult: bool
    is_blocked_from_primary: bool
    is_nsfw: bool
    likes: int
    messages: int
    name: str
    posts: int
    primary: bool
    queue: int
    reply_conditions: str
    share_likes: bool
    submission_page_title: str
    submission_terms: SubmissionTerms
    subscribed: bool
    title: str
    total_posts: int
    tweet: str
    twitter_enabled: bool
    twitter_send: bool
    type: str
    updated: int
    url: str


class BlogInfo(TypedDict):
    blog: BlogDetails


class BlogAvatar(TypedDict):
    avatar_url: str


class Post(TypedDict, total=False):
    """A published, queued or drafted post as listed by /posts."""
    blog_name: str
    id: int
    id_string: str
    post_url: str
    type: ResponsePostType
    timestamp: int
    date: str
    format: Literal["html", "markdown"]
    reblog_key: str
    tags: List[str]
    bookmarklet: bool
    mobile: bool
    source_url: str
    title: str
    liked: bool
    state: ResponsePostState
    total_posts: int


class BlogPosts(TypedDict, total=False):
    blog: Dict[str, Any]
    posts: List[Post]
    total_posts: int


class PostId(TypedDict):
    """Returned by create, edit and delete."""
    id: Any
