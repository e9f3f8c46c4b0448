"""Tests for the message service."""

import pytest

from redditkit.errors import APIError, EnvelopeDecodeError, TransportError
from redditkit.options import ListOptions
from redditkit.services.message import SendMessageRequest


class TestInbox:
    """Tests for the inbox listings."""

    def test_inbox(self, client, mock_transport, inbox_blob):
        """Test that the inbox is split into comments and messages."""
        mock_transport.add_response("GET", "message/inbox", inbox_blob)

        comments, messages = client.message.inbox()

        assert mock_transport.last_call() == ("GET", "message/inbox", None)
        assert [c.id for c in comments] == ["g1xi2m9"]
        assert all(c.is_comment for c in comments)
        assert [m.id for m in messages] == ["qwki97", "qwki98"]
        assert comments.after == messages.after == "t4_qwki98"

    def test_inbox_unread_with_options(self, client, mock_transport, inbox_blob):
        """Test that options end up in the query string."""
        mock_transport.add_response("GET", "message/unread?after=t4_prev&limit=2", inbox_blob)

        comments, messages = client.message.inbox_unread(ListOptions(limit=2, after="t4_prev"))

        assert len(comments) == 1
        assert len(messages) == 2

    def test_sent(self, client, mock_transport, mixed_kinds_blob):
        """Test that sent returns only the message bucket."""
        mock_transport.add_response("GET", "message/sent", mixed_kinds_blob)

        messages = client.message.sent()

        assert [m.id for m in messages] == ["m1"]
        assert messages.after == "next1"
        assert messages.before == ""

    def test_paging_through_inbox(self, client, mock_transport):
        """Test following after cursors until the last page."""
        page1 = {"kind": "Listing", "data": {
            "children": [{"kind": "t4", "data": {"id": "m1"}}], "after": "t4_m1", "before": None}}
        page2 = {"kind": "Listing", "data": {
            "children": [{"kind": "t1", "data": {"id": "c2"}}], "after": None, "before": "t1_c2"}}
        mock_transport.add_response("GET", "message/inbox?limit=1", page1)
        mock_transport.add_response("GET", "message/inbox?after=t4_m1&limit=1", page2)

        seen = []
        opts = ListOptions(limit=1)
        while opts is not None:
            comments, messages = client.message.inbox(opts)
            seen.extend(item.id for item in comments.items + messages.items)
            opts = messages.next_page(opts)

        assert seen == ["m1", "c2"]

    def test_transport_error_propagates(self, client, mock_transport):
        """Test that transport errors surface unchanged."""
        error = TransportError("connection reset")
        mock_transport.add_error("GET", "message/inbox", error)

        with pytest.raises(TransportError) as exc_info:
            client.message.inbox()

        assert exc_info.value is error

    def test_api_error_propagates(self, client):
        """Test that an unknown path is a 404 from the mock."""
        with pytest.raises(APIError) as exc_info:
            client.message.inbox()

        assert exc_info.value.status_code == 404

    def test_bad_envelope_raises(self, client, mock_transport):
        """Test that a malformed response is a decode error."""
        mock_transport.add_response("GET", "message/inbox", b"<html>")

        with pytest.raises(EnvelopeDecodeError):
            client.message.inbox()


class TestMessageActions:
    """Tests for the form-based message endpoints."""

    def test_read_all(self, client, mock_transport):
        """Test marking everything read."""
        client.message.read_all()

        assert mock_transport.last_call() == ("POST", "api/read_all_messages", None)

    @pytest.mark.parametrize("method,path", [
        ("read", "api/read_message"),
        ("unread", "api/unread_message"),
        ("collapse", "api/collapse_message"),
        ("uncollapse", "api/uncollapse_message"),
    ])
    def test_id_list_endpoints(self, client, mock_transport, method, path):
        """Test endpoints taking a comma-separated id list."""
        getattr(client.message, method)("t4_a", "t1_b")

        assert mock_transport.last_call() == ("POST", path, {"id": "t4_a,t1_b"})

    @pytest.mark.parametrize("method", ["read", "unread", "collapse", "uncollapse"])
    def test_id_list_requires_ids(self, client, mock_transport, method):
        """Test that at least one id is required."""
        with pytest.raises(ValueError, match="must provide at least 1 id"):
            getattr(client.message, method)()

        assert mock_transport.calls == []

    def test_block_and_delete(self, client, mock_transport):
        """Test single-id endpoints."""
        client.message.block("t4_a")
        client.message.delete("t4_b")

        assert mock_transport.calls == [
            ("POST", "api/block", {"id": "t4_a"}),
            ("POST", "api/del_msg", {"id": "t4_b"}),
        ]

    def test_send(self, client, mock_transport):
        """Test composing a message."""
        client.message.send(SendMessageRequest(to="test", subject="hi", text="hello"))

        assert mock_transport.last_call() == ("POST", "api/compose", {
            "to": "test",
            "subject": "hi",
            "text": "hello",
            "api_type": "json",
        })

    def test_send_from_subreddit(self):
        """Test that from_sr is only sent when set."""
        form = SendMessageRequest("test", "hi", "hello", from_subreddit="golang").to_form()

        assert form["from_sr"] == "golang"

    def test_send_requires_request(self, client):
        """Test that a request is required."""
        with pytest.raises(ValueError):
            client.message.send(None)
