"""Exception types raised by the Reddit client."""

from typing import Optional


class RedditError(Exception):
    """Base class for every error raised by redditkit."""


class TransportError(RedditError):
    """The request could not be completed by the transport.

    Raised for network failures (connection refused, timeouts, etc.).
    The response body, if any, is never decoded.
    """


class APIError(TransportError):
    """The API answered with a non-2xx status code.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body, decoded as text.
        method: HTTP method of the failed request.
        url: Full URL of the failed request.
    """

    def __init__(
        self,
        status_code: int,
        body: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"{method} {url}: {status_code} {body[:200]}".strip())


class EnvelopeDecodeError(RedditError):
    """The outer listing envelope is structurally invalid."""


class ItemDecodeError(RedditError):
    """A single Thing payload could not be converted into its target type.

    Only raised inside the decoding layer; listing decoders drop the
    offending item and keep going.
    """
