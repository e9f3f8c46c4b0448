"""Decoding of listing envelopes into typed, paginated results.

Listing responses look like::

    {"kind": "Listing",
     "data": {"children": [<Thing>, ...], "after": "t3_x", "before": null}}

The outer envelope must be well formed; if it is not, the whole call fails
with ``EnvelopeDecodeError``. Children go through a ``ThingDecoder`` and are
dropped one by one when they cannot be decoded.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar, Union

from redditkit.decoding.things import DEFAULT_BUCKET, Route, ThingDecoder
from redditkit.errors import EnvelopeDecodeError, ItemDecodeError
from redditkit.kinds import KIND_COMMENT, KIND_MESSAGE, KIND_MORE, KIND_POST
from redditkit.models import (
    Comment,
    Listing,
    Message,
    More,
    Post,
    PostAndComments,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Raw bytes from a transport, or a body some other layer already parsed.
RawResponse = Union[bytes, bytearray, str, Mapping[str, Any], List[Any]]

COMMENTS = "comments"
MESSAGES = "messages"
MORE = "more"


@dataclass(frozen=True)
class Envelope:
    """The validated outer shape of a listing response.

    Attributes:
        kind: Envelope kind, usually ``Listing`` or ``UserList``.
        children: Raw children, not yet decoded.
        after: Cursor for the next page, ``""`` if none.
        before: Cursor for the previous page, ``""`` if none.
    """
    kind: str
    children: List[Any]
    after: str = ""
    before: str = ""


@dataclass
class ThingBuckets:
    """A decoded listing page sorted into one list per bucket.

    Every bucket of the decoder is present, empty if nothing matched. The
    cursors belong to the page, not to a bucket, so every view carries the
    same ones.
    """
    buckets: Dict[str, List[Any]] = field(default_factory=dict)
    after: str = ""
    before: str = ""

    def view(self, bucket: str) -> Listing:
        """Return one bucket as a Listing with the page's cursors.

        Raises:
            KeyError: If the decoder that built this result has no such bucket.
        """
        return Listing(
            items=list(self.buckets[bucket]),
            after=self.after,
            before=self.before,
        )


class InboxListing(ThingBuckets):
    """An inbox page split into comment replies and private messages."""

    def comments(self) -> Listing:
        """Items that arrived as ``t1`` comment replies."""
        return self.view(COMMENTS)

    def messages(self) -> Listing:
        """Items that arrived as ``t4`` private messages."""
        return self.view(MESSAGES)


def load_json(raw: RawResponse) -> Any:
    """Parse a raw response body, passing already-parsed values through.

    Raises:
        EnvelopeDecodeError: If the body is not valid UTF-8 JSON.
    """
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            return json.loads(raw)
        except (UnicodeDecodeError, ValueError) as e:
            raise EnvelopeDecodeError(f"response is not valid JSON: {e}") from e
    return raw


def _read_cursor(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise EnvelopeDecodeError(
            f"listing: {key} must be a string or null, got {type(value).__name__}"
        )
    return value


def parse_envelope(raw: RawResponse) -> Envelope:
    """Validate the outer listing envelope.

    Args:
        raw: Response body (bytes or text) or an already-parsed object.

    Returns:
        Envelope: The validated envelope with its raw children.

    Raises:
        EnvelopeDecodeError: If the body is not JSON, is not an object, has
            no ``data`` object, has a non-array ``children``, or carries a
            cursor that is neither a string nor null.
    """
    root = load_json(raw)
    if not isinstance(root, Mapping):
        raise EnvelopeDecodeError(
            f"listing: expected an object, got {type(root).__name__}"
        )

    kind = root.get("kind")
    if kind is not None and not isinstance(kind, str):
        raise EnvelopeDecodeError(f"listing: kind must be a string, got {type(kind).__name__}")

    data = root.get("data")
    if not isinstance(data, Mapping):
        raise EnvelopeDecodeError("listing: missing data object")

    children = data.get("children")
    if not isinstance(children, list):
        raise EnvelopeDecodeError("listing: children must be an array")

    return Envelope(
        kind=kind or "",
        children=list(children),
        after=_read_cursor(data, "after"),
        before=_read_cursor(data, "before"),
    )


def decode_things_listing(raw: RawResponse, decoder: ThingDecoder) -> ThingBuckets:
    """Decode a listing with any routing table.

    Raises:
        EnvelopeDecodeError: If the outer envelope is malformed.
    """
    envelope = parse_envelope(raw)
    return ThingBuckets(
        buckets=decoder.decode(envelope.children),
        after=envelope.after,
        before=envelope.before,
    )


def decode_listing(
    raw: RawResponse,
    kind: str,
    decode: Callable[[Any], T]
) -> Listing:
    """Decode a listing whose children are all of one kind.

    Args:
        raw: Response body or parsed object.
        kind: Kind code to keep, e.g. ``t3``. Other kinds are dropped.
        decode: Payload decode function for that kind.

    Returns:
        Listing: The decoded items and the page cursors.

    Raises:
        EnvelopeDecodeError: If the outer envelope is malformed.
    """
    return decode_things_listing(raw, ThingDecoder.single(kind, decode)).view(DEFAULT_BUCKET)


INBOX_DECODER = ThingDecoder({
    KIND_COMMENT: Route(COMMENTS, partial(Message.from_dict, kind=KIND_COMMENT)),
    KIND_MESSAGE: Route(MESSAGES, partial(Message.from_dict, kind=KIND_MESSAGE)),
})


def decode_heterogeneous_listing(raw: RawResponse) -> InboxListing:
    """Decode an inbox page that mixes comment replies and messages.

    Returns:
        InboxListing: ``comments()`` and ``messages()`` views sharing the
            page's ``after``/``before``.

    Raises:
        EnvelopeDecodeError: If the outer envelope is malformed.
    """
    page = decode_things_listing(raw, INBOX_DECODER)
    return InboxListing(buckets=page.buckets, after=page.after, before=page.before)


def decode_user_list(raw: RawResponse, decode: Callable[[Any], T]) -> Listing:
    """Decode a ``UserList`` listing, whose children are plain objects.

    Children that ``decode`` rejects are dropped, as with Things.

    Raises:
        EnvelopeDecodeError: If the outer envelope is malformed.
    """
    envelope = parse_envelope(raw)
    items = []
    for index, child in enumerate(envelope.children):
        try:
            items.append(decode(child))
        except ItemDecodeError as e:
            logger.debug(f"Dropping user list child {index}: {e}")
    return Listing(items=items, after=envelope.after, before=envelope.before)


def decode_thing(raw: RawResponse, kind: str, decode: Callable[[Any], T]) -> T:
    """Decode a response that is a single Thing, e.g. ``/r/{name}/about``.

    Here the Thing is the whole response, so a bad one is fatal.

    Raises:
        EnvelopeDecodeError: If the response is not a Thing of ``kind`` or
            its payload cannot be decoded.
    """
    root = load_json(raw)
    if not isinstance(root, Mapping):
        raise EnvelopeDecodeError(f"thing: expected an object, got {type(root).__name__}")
    if root.get("kind") != kind:
        raise EnvelopeDecodeError(f"thing: expected kind {kind!r}, got {root.get('kind')!r}")
    try:
        return decode(root.get("data"))
    except ItemDecodeError as e:
        raise EnvelopeDecodeError(f"thing: {e}") from e


def _decode_comment_tree(data: Any) -> Comment:
    comment = Comment.from_dict(data)
    replies = data.get("replies")
    # comments without replies carry "" instead of a listing
    if replies is None or replies == "":
        return comment
    try:
        tree = decode_things_listing(replies, COMMENT_TREE_DECODER)
    except EnvelopeDecodeError as e:
        raise ItemDecodeError(f"replies: {e}") from e
    comment.replies = tree.buckets[COMMENTS]
    comment.more = tree.buckets[MORE][-1] if tree.buckets[MORE] else None
    return comment


COMMENT_TREE_DECODER = ThingDecoder({
    KIND_COMMENT: Route(COMMENTS, _decode_comment_tree),
    KIND_MORE: Route(MORE, More.from_dict),
})


def decode_comment_tree(raw: RawResponse) -> ThingBuckets:
    """Decode a comment listing, including nested replies and ``more`` stubs.

    Raises:
        EnvelopeDecodeError: If the outer envelope is malformed.
    """
    return decode_things_listing(raw, COMMENT_TREE_DECODER)


def decode_post_and_comments(raw: RawResponse) -> PostAndComments:
    """Decode the two-listing array returned for a post's comments page.

    The first listing holds the post, the second its comment tree.

    Raises:
        EnvelopeDecodeError: If the response is not an array of two
            listings or the first listing holds no decodable post.
    """
    root = load_json(raw)
    if not isinstance(root, list) or len(root) != 2:
        raise EnvelopeDecodeError("post and comments: expected an array of two listings")

    posts = decode_listing(root[0], KIND_POST, Post.from_dict)
    if not posts.items:
        raise EnvelopeDecodeError("post and comments: response holds no post")

    tree = decode_comment_tree(root[1])
    more: Optional[More] = tree.buckets[MORE][-1] if tree.buckets[MORE] else None
    return PostAndComments(post=posts.items[0], comments=tree.buckets[COMMENTS], more=more)
