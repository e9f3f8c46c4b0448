"""Tests for listing envelopes, the inbox demultiplexer and comment trees."""

import json
from datetime import datetime, timezone

import pytest

from redditkit.decoding.listing import (
    InboxListing,
    decode_comment_tree,
    decode_heterogeneous_listing,
    decode_listing,
    decode_post_and_comments,
    decode_thing,
    decode_user_list,
    parse_envelope,
)
from redditkit.errors import EnvelopeDecodeError
from redditkit.models import Ban, Listing, Post, Subreddit


def _listing(children, after="", before=""):
    return {"kind": "Listing", "data": {"children": children, "after": after, "before": before}}


class TestParseEnvelope:
    """Tests for validating the outer listing shape."""

    def test_accepts_bytes_text_and_objects(self):
        """Test all three input forms give the same envelope."""
        obj = _listing([{"kind": "t1", "data": {}}], after="t1_x")

        from_bytes = parse_envelope(json.dumps(obj).encode("utf-8"))
        from_text = parse_envelope(json.dumps(obj))
        from_obj = parse_envelope(obj)

        assert from_bytes == from_text == from_obj
        assert from_obj.kind == "Listing"
        assert from_obj.after == "t1_x"

    def test_null_cursors_read_as_empty(self):
        """Test that null and absent cursors mean no page."""
        envelope = parse_envelope({"kind": "Listing", "data": {"children": [], "after": None}})

        assert envelope.after == ""
        assert envelope.before == ""

    def test_cursors_kept_verbatim(self):
        """Test that cursors are not trimmed or normalized."""
        envelope = parse_envelope(_listing([], after=" t3_a ", before="t3_b"))

        assert envelope.after == " t3_a "
        assert envelope.before == "t3_b"

    @pytest.mark.parametrize("raw", [
        b"not json",
        b"\xff\xfe",
        b"[]",
        b'"Listing"',
        b'{"kind": "Listing"}',
        b'{"kind": "Listing", "data": "oops"}',
        b'{"kind": "Listing", "data": {}}',
        b'{"kind": "Listing", "data": {"children": {}}}',
        b'{"kind": "Listing", "data": {"children": [], "after": 5}}',
        b'{"kind": 3, "data": {"children": []}}',
    ])
    def test_malformed_envelope_raises(self, raw):
        """Test that structural problems are fatal."""
        with pytest.raises(EnvelopeDecodeError):
            parse_envelope(raw)


class TestDecodeListing:
    """Tests for homogeneous listings."""

    def test_posts_page(self, posts_blob):
        """Test decoding a recorded page of posts."""
        posts = decode_listing(posts_blob, "t3", Post.from_dict)

        assert isinstance(posts, Listing)
        assert [p.id for p in posts] == ["agi5zf", "hyhquk"]
        assert posts.after == "t3_hyhquk"
        assert posts.before == ""

        first = posts.items[0]
        assert first.full_id == "t3_agi5zf"
        assert first.created == datetime(2019, 1, 16, 5, 57, 51, tzinfo=timezone.utc)
        assert first.edited is None
        assert first.is_self_post is True
        assert first.stickied is True
        assert first.likes is None
        assert posts.items[1].likes is True
        assert posts.items[1].upvote_ratio == 1.0

    def test_subreddits_page(self, subreddits_blob):
        """Test decoding a recorded page of subreddits."""
        subreddits = decode_listing(subreddits_blob, "t5", Subreddit.from_dict)

        assert [s.name for s in subreddits] == ["Home", "AskReddit", "pics"]
        assert subreddits.items[1].favorite is True
        assert subreddits.after == "t5_2qh0u"

    def test_other_kinds_dropped(self):
        """Test that a homogeneous listing keeps only its kind."""
        raw = _listing([
            {"kind": "t3", "data": {"id": "p1"}},
            {"kind": "t5", "data": {"id": "s1"}},
        ])

        assert [p.id for p in decode_listing(raw, "t3", Post.from_dict)] == ["p1"]

    def test_empty_page(self):
        """Test that an empty page has an empty, non-null item list."""
        posts = decode_listing(_listing([]), "t3", Post.from_dict)

        assert posts.items == []
        assert posts.after == ""


class TestDecodeHeterogeneousListing:
    """Tests for demultiplexing inbox pages."""

    def test_mixed_kinds_scenario(self, mixed_kinds_blob):
        """Test the comment/message split with an unknown kind present."""
        page = decode_heterogeneous_listing(mixed_kinds_blob)
        comments = page.comments()
        messages = page.messages()

        assert [c.id for c in comments] == ["c1"]
        assert comments.items[0].is_comment is True
        assert comments.items[0].kind == "t1"
        assert [m.id for m in messages] == ["m1"]
        assert messages.items[0].is_comment is False
        assert messages.items[0].kind == "t4"

        for view in (comments, messages):
            assert view.after == "next1"
            assert view.before == ""

    def test_malformed_child_scenario(self):
        """Test that a malformed child next to a valid one is skipped."""
        raw = _listing([
            {"kind": "t1", "data": "not-an-object"},
            {"kind": "t1", "data": {"id": "c2", "body": "fine"}},
        ])

        page = decode_heterogeneous_listing(raw)

        assert [c.id for c in page.comments()] == ["c2"]
        assert page.messages().items == []

    def test_mistyped_was_comment_dropped(self):
        """Test that a message with a non-boolean was_comment is skipped."""
        raw = _listing([
            {"kind": "t4", "data": {"id": "w", "was_comment": "yes"}},
            {"kind": "t4", "data": {"id": "ok", "was_comment": False}},
        ])

        page = decode_heterogeneous_listing(raw)

        assert [m.id for m in page.messages()] == ["ok"]

    def test_recorded_inbox(self, inbox_blob):
        """Test decoding a recorded inbox page."""
        page = decode_heterogeneous_listing(inbox_blob)

        assert isinstance(page, InboxListing)
        comments = page.comments()
        messages = page.messages()

        assert len(comments) == 1
        assert comments.items[0].text == "u/testuser2 hello"
        assert comments.items[0].parent_id == "t3_hs03f3"
        assert [m.full_id for m in messages] == ["t4_qwki97", "t4_qwki98"]
        assert messages.items[0].to == "testuser2"
        assert messages.items[1].created is None
        assert comments.after == messages.after == "t4_qwki98"
        assert comments.before == messages.before == ""

    def test_empty_inbox(self):
        """Test both views exist and are empty for an empty page."""
        page = decode_heterogeneous_listing(_listing([]))

        assert page.buckets == {"comments": [], "messages": []}
        assert page.comments().items == []
        assert page.messages().items == []

    def test_decoding_is_repeatable(self, inbox_blob):
        """Test that decoding the same bytes twice gives equal results."""
        first = decode_heterogeneous_listing(inbox_blob)
        second = decode_heterogeneous_listing(inbox_blob)

        assert first == second
        assert first.comments() == second.comments()
        assert first.buckets["messages"] is not second.buckets["messages"]

    def test_views_do_not_share_lists(self, inbox_blob):
        """Test that mutating one view leaves the page untouched."""
        page = decode_heterogeneous_listing(inbox_blob)

        page.messages().items.clear()

        assert len(page.messages()) == 2

    def test_malformed_envelope_raises(self):
        """Test that no partial result is returned for a bad envelope."""
        with pytest.raises(EnvelopeDecodeError):
            decode_heterogeneous_listing(b'{"kind": "Listing", "data": {"children": "x"}}')


class TestDecodeUserList:
    """Tests for UserList listings of plain objects."""

    def test_bans(self):
        """Test decoding bans, including a permanent one."""
        raw = {
            "kind": "UserList",
            "data": {
                "children": [
                    {"rel_id": "rb_1", "name": "u1", "id": "t2_1", "days_left": 3, "note": "Spam"},
                    {"rel_id": "rb_2", "name": "u2", "id": "t2_2", "days_left": None, "note": ""},
                ],
                "after": None,
                "before": None,
            },
        }

        bans = decode_user_list(raw, Ban.from_dict)

        assert [b.relationship.id for b in bans] == ["rb_1", "rb_2"]
        assert bans.items[0].days_left == 3
        assert bans.items[1].days_left is None

    def test_bad_child_dropped(self):
        """Test that one bad object does not fail the page."""
        raw = {"kind": "UserList", "data": {"children": ["x", {"rel_id": "rb_1"}]}}

        assert [b.relationship.id for b in decode_user_list(raw, Ban.from_dict)] == ["rb_1"]


class TestDecodeThing:
    """Tests for single-Thing responses."""

    def test_subreddit_about(self):
        """Test decoding a single subreddit."""
        raw = {"kind": "t5", "data": {"id": "2rc7j", "display_name": "golang"}}

        assert decode_thing(raw, "t5", Subreddit.from_dict).name == "golang"

    def test_wrong_kind_raises(self):
        """Test that a different kind is fatal."""
        with pytest.raises(EnvelopeDecodeError, match="expected kind"):
            decode_thing({"kind": "t3", "data": {}}, "t5", Subreddit.from_dict)

    def test_bad_payload_raises(self):
        """Test that a bad payload is fatal when it is the whole response."""
        with pytest.raises(EnvelopeDecodeError):
            decode_thing({"kind": "t5", "data": []}, "t5", Subreddit.from_dict)


class TestPostAndComments:
    """Tests for post pages with comment trees."""

    def test_recorded_post(self, post_and_comments_blob):
        """Test decoding a post, its comments, replies and stubs."""
        result = decode_post_and_comments(post_and_comments_blob)

        assert result.post.id == "testpost"
        assert result.post.body == "Hello"
        assert len(result.comments) == 1

        comment = result.comments[0]
        assert comment.body == "Hello, test"
        assert comment.is_submitter is True
        assert comment.edited == datetime.fromtimestamp(1595808500, tz=timezone.utc)
        assert [r.id for r in comment.replies] == ["reply1"]
        assert comment.replies[0].replies == []
        assert comment.has_more()
        assert comment.more.children == ["reply2"]

        assert result.has_more()
        assert result.more.count == 3
        assert result.more.children == ["comment2", "comment3"]

    def test_bad_replies_drop_only_that_comment(self):
        """Test that a comment with a broken replies listing is dropped alone."""
        raw = _listing([
            {"kind": "t1", "data": {"id": "bad", "replies": {"kind": "Listing"}}},
            {"kind": "t1", "data": {"id": "good", "replies": ""}},
        ])

        tree = decode_comment_tree(raw)

        assert [c.id for c in tree.buckets["comments"]] == ["good"]
        assert tree.buckets["more"] == []

    @pytest.mark.parametrize("raw", [
        b"{}",
        b"[]",
        json.dumps([_listing([])]).encode("utf-8"),
        json.dumps([_listing([]), _listing([])]).encode("utf-8"),
    ])
    def test_malformed_response_raises(self, raw):
        """Test that a missing post or wrong shape is fatal."""
        with pytest.raises(EnvelopeDecodeError):
            decode_post_and_comments(raw)
