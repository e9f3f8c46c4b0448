"""Entry point tying the transport to the API services."""

import logging
from typing import Mapping, Optional

from redditkit.config import Config, load_config
from redditkit.interfaces.transport import ITransport
from redditkit.options import ListOptions, add_options
from redditkit.request_logging.request_logger import RequestLogger
from redditkit.services.message import MessageService
from redditkit.services.subreddit import SubredditService
from redditkit.transport.http_transport import RequestsTransport


class RedditClient:
    """Client for the Reddit API.

    Services group the endpoints by resource and share one transport::

        client = RedditClient(RequestsTransport(access_token=token))
        comments, messages = client.message.inbox(ListOptions(limit=25))

    Attributes:
        transport: Collaborator that performs the HTTP requests.
        message: Inbox and private-message endpoints.
        subreddit: Subreddit, listing and moderation endpoints.
    """

    def __init__(self, transport: ITransport):
        """Initialize the client.

        Args:
            transport: Transport used for every request.
        """
        self.transport = transport
        self.message = MessageService(self)
        self.subreddit = SubredditService(self)

    def get(self, path: str, opts: Optional[ListOptions] = None) -> bytes:
        """Send a GET request with ``opts`` encoded in the query string."""
        return self.transport.send("GET", add_options(path, opts))

    def post(self, path: str, form: Optional[Mapping[str, str]] = None) -> bytes:
        """Send a POST request with a form-encoded body."""
        return self.transport.send("POST", path, form)


def build_client(config: Optional[Config] = None) -> RedditClient:
    """Create a client backed by ``RequestsTransport``.

    Args:
        config: Configuration; loaded from the environment if omitted.

    Returns:
        RedditClient: A ready client.

    Raises:
        ValueError: If the configuration is invalid.
    """
    config = config or load_config()
    errors = config.validate()
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))

    request_logger = None
    if config.logging.log_requests:
        request_logger = RequestLogger(
            log_dir=config.logging.log_dir,
            log_to_console=config.logging.log_to_console,
            console_level=logging.getLevelName(config.logging.log_level.upper()),
        )

    transport = RequestsTransport(
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        access_token=config.api.access_token or None,
        timeout_seconds=config.api.timeout_seconds,
        request_logger=request_logger,
    )
    return RedditClient(transport)
