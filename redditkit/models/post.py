"""Data models for posts, comments and comment-tree stubs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from redditkit.models.fields import (
    read_bool,
    read_float,
    read_int,
    read_optional_bool,
    read_str,
    read_str_list,
    read_timestamp,
    require_object,
    timestamp_to_wire,
)


@dataclass
class Post:
    """A link or self post (kind ``t3``).

    Attributes:
        id: Base36 identifier.
        full_id: Kind-prefixed identifier, e.g. ``t3_agi5zf``.
        created: Creation time (UTC).
        edited: Last edit time, or None if never edited.
        permalink: Path of the comments page.
        url: Link target; equals the permalink URL for self posts.
        title: Post title.
        body: Self text, empty for link posts.
        likes: True/False for an up/down vote by the user, None if no vote.
        score: Net score.
        upvote_ratio: Fraction of upvotes.
        number_of_comments: Comment count.
        subreddit_name: Subreddit name without prefix.
        subreddit_name_prefixed: Subreddit name with ``r/``.
        subreddit_id: Full ID of the subreddit.
        author: Username of the author.
        author_id: Full ID of the author.
        spoiler: Marked as spoiler.
        locked: Comments are locked.
        nsfw: Marked over 18.
        is_self_post: Text post rather than a link.
        saved: Saved by the user.
        stickied: Stickied in its subreddit.
    """
    id: str
    full_id: str = ""
    created: Optional[datetime] = None
    edited: Optional[datetime] = None
    permalink: str = ""
    url: str = ""
    title: str = ""
    body: str = ""
    likes: Optional[bool] = None
    score: int = 0
    upvote_ratio: float = 0.0
    number_of_comments: int = 0
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    author: str = ""
    author_id: str = ""
    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Post":
        """Create a Post from a ``t3`` payload.

        Raises:
            ItemDecodeError: If the payload is malformed.
        """
        data = require_object(data, "Post")
        return cls(
            id=read_str(data, "id"),
            full_id=read_str(data, "name"),
            created=read_timestamp(data, "created_utc"),
            edited=read_timestamp(data, "edited"),
            permalink=read_str(data, "permalink"),
            url=read_str(data, "url"),
            title=read_str(data, "title"),
            body=read_str(data, "selftext"),
            likes=read_optional_bool(data, "likes"),
            score=read_int(data, "score"),
            upvote_ratio=read_float(data, "upvote_ratio"),
            number_of_comments=read_int(data, "num_comments"),
            subreddit_name=read_str(data, "subreddit"),
            subreddit_name_prefixed=read_str(data, "subreddit_name_prefixed"),
            subreddit_id=read_str(data, "subreddit_id"),
            author=read_str(data, "author"),
            author_id=read_str(data, "author_fullname"),
            spoiler=read_bool(data, "spoiler"),
            locked=read_bool(data, "locked"),
            nsfw=read_bool(data, "over_18"),
            is_self_post=read_bool(data, "is_self"),
            saved=read_bool(data, "saved"),
            stickied=read_bool(data, "stickied"),
        )

    def to_dict(self) -> dict:
        """Convert the post back to its wire payload shape."""
        return {
            "id": self.id,
            "name": self.full_id,
            "created_utc": timestamp_to_wire(self.created),
            "edited": timestamp_to_wire(self.edited) or False,
            "permalink": self.permalink,
            "url": self.url,
            "title": self.title,
            "selftext": self.body,
            "likes": self.likes,
            "score": self.score,
            "upvote_ratio": self.upvote_ratio,
            "num_comments": self.number_of_comments,
            "subreddit": self.subreddit_name,
            "subreddit_name_prefixed": self.subreddit_name_prefixed,
            "subreddit_id": self.subreddit_id,
            "author": self.author,
            "author_fullname": self.author_id,
            "spoiler": self.spoiler,
            "locked": self.locked,
            "over_18": self.nsfw,
            "is_self": self.is_self_post,
            "saved": self.saved,
            "stickied": self.stickied,
        }


@dataclass
class More:
    """Placeholder for comments that were not included in a response.

    Attributes:
        id: Base36 identifier of the stub.
        full_id: Kind-prefixed identifier.
        parent_id: Full ID of the item the hidden comments reply to.
        count: Total number of hidden descendants.
        depth: Depth of the stub in the tree.
        children: Base36 IDs of the hidden direct children.
    """
    id: str
    full_id: str = ""
    parent_id: str = ""
    count: int = 0
    depth: int = 0
    children: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "More":
        data = require_object(data, "More")
        return cls(
            id=read_str(data, "id"),
            full_id=read_str(data, "name"),
            parent_id=read_str(data, "parent_id"),
            count=read_int(data, "count"),
            depth=read_int(data, "depth"),
            children=read_str_list(data, "children"),
        )


@dataclass
class Comment:
    """A comment (kind ``t1``) and, once decoded as a tree, its replies.

    ``from_dict`` reads only the comment's own fields; the nested ``replies``
    listing is decoded by ``redditkit.decoding.listing``.
    """
    id: str
    full_id: str = ""
    created: Optional[datetime] = None
    edited: Optional[datetime] = None
    parent_id: str = ""
    permalink: str = ""
    body: str = ""
    author: str = ""
    author_id: str = ""
    author_flair_text: str = ""
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    likes: Optional[bool] = None
    score: int = 0
    controversiality: int = 0
    post_id: str = ""
    post_title: str = ""
    post_permalink: str = ""
    post_author: str = ""
    post_number_of_comments: int = 0
    is_submitter: bool = False
    score_hidden: bool = False
    saved: bool = False
    stickied: bool = False
    locked: bool = False
    can_gild: bool = False
    nsfw: bool = False
    replies: List["Comment"] = field(default_factory=list)
    more: Optional[More] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Comment":
        """Create a Comment from a ``t1`` payload, without its replies.

        Raises:
            ItemDecodeError: If the payload is malformed.
        """
        data = require_object(data, "Comment")
        return cls(
            id=read_str(data, "id"),
            full_id=read_str(data, "name"),
            created=read_timestamp(data, "created_utc"),
            edited=read_timestamp(data, "edited"),
            parent_id=read_str(data, "parent_id"),
            permalink=read_str(data, "permalink"),
            body=read_str(data, "body"),
            author=read_str(data, "author"),
            author_id=read_str(data, "author_fullname"),
            author_flair_text=read_str(data, "author_flair_text"),
            subreddit_name=read_str(data, "subreddit"),
            subreddit_name_prefixed=read_str(data, "subreddit_name_prefixed"),
            subreddit_id=read_str(data, "subreddit_id"),
            likes=read_optional_bool(data, "likes"),
            score=read_int(data, "score"),
            controversiality=read_int(data, "controversiality"),
            post_id=read_str(data, "link_id"),
            post_title=read_str(data, "link_title"),
            post_permalink=read_str(data, "link_permalink"),
            post_author=read_str(data, "link_author"),
            post_number_of_comments=read_int(data, "num_comments"),
            is_submitter=read_bool(data, "is_submitter"),
            score_hidden=read_bool(data, "score_hidden"),
            saved=read_bool(data, "saved"),
            stickied=read_bool(data, "stickied"),
            locked=read_bool(data, "locked"),
            can_gild=read_bool(data, "can_gild"),
            nsfw=read_bool(data, "over_18"),
        )

    def has_more(self) -> bool:
        """Whether some of this comment's replies were left out."""
        return self.more is not None and bool(self.more.children)


@dataclass
class PostAndComments:
    """A post together with its top-level comment tree.

    Attributes:
        post: The post.
        comments: Top-level comments, each with nested replies.
        more: Stub for top-level comments not included in the response.
    """
    post: Post
    comments: List[Comment] = field(default_factory=list)
    more: Optional[More] = None

    def has_more(self) -> bool:
        """Whether some top-level comments were left out."""
        return self.more is not None and bool(self.more.children)
