"""Abstract interfaces for the client's collaborators."""

from redditkit.interfaces.transport import ITransport

__all__ = [
    "ITransport",
]
