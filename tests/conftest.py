"""Pytest fixtures and shared test utilities."""

import pytest
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from redditkit.client import RedditClient
from redditkit.models import Message
from redditkit.request_logging.request_logger import RequestLogger
from redditkit.testing.mocks import MockTransport

TESTDATA_DIR = Path(__file__).parent / "testdata"


def read_testdata(name: str) -> bytes:
    """Read a recorded response body from tests/testdata.

    Args:
        name: Path relative to the testdata directory.

    Returns:
        The raw file contents.
    """
    return (TESTDATA_DIR / name).read_bytes()

# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def inbox_blob() -> bytes:
    """An inbox page with one comment reply and two messages."""
    return read_testdata("message/inbox.json")

@pytest.fixture
def posts_blob() -> bytes:
    """A page of two posts."""
    return read_testdata("subreddit/posts.json")

@pytest.fixture
def subreddits_blob() -> bytes:
    """A page of three subreddits."""
    return read_testdata("subreddit/list.json")

@pytest.fixture
def post_and_comments_blob() -> bytes:
    """A post with a comment tree."""
    return read_testdata("post/post.json")

@pytest.fixture
def mixed_kinds_blob() -> bytes:
    """A page mixing a comment, a message and an unrecognized kind."""
    return (
        b'{"kind":"Listing","data":{"children":['
        b'{"kind":"t1","data":{"id":"c1","was_comment":true}},'
        b'{"kind":"t4","data":{"id":"m1","was_comment":false}},'
        b'{"kind":"t9","data":{}}],'
        b'"after":"next1","before":""}}'
    )

@pytest.fixture
def sample_message() -> Message:
    """Create a sample private message."""
    return Message(
        id="qwki97",
        full_id="t4_qwki97",
        created=datetime(2020, 8, 11, 2, 35, 0, tzinfo=timezone.utc),
        subject="test subject",
        text="test body",
        parent_id="",
        author="testuser1",
        to="testuser2",
        kind="t4",
        is_comment=False,
    )

# ============================================================
# Fixture Instances
# ============================================================

@pytest.fixture
def mock_transport() -> MockTransport:
    """Create an empty mock transport."""
    return MockTransport()

@pytest.fixture
def client(mock_transport) -> RedditClient:
    """Create a client backed by the mock transport."""
    return RedditClient(mock_transport)

@pytest.fixture
def temp_log_dir() -> str:
    """Create a temporary directory for logs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir

@pytest.fixture
def request_logger(temp_log_dir) -> RequestLogger:
    """Create a request logger with temporary storage."""
    return RequestLogger(log_dir=temp_log_dir, log_to_console=False)
