"""Transport implementations."""

from redditkit.transport.http_transport import RequestsTransport

__all__ = ["RequestsTransport"]
