"""Abstract interface for sending requests to the Reddit API."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional


class ITransport(ABC):
    """Abstract interface for the HTTP layer under the client.

    This interface defines the contract the services depend on.
    Implementations could include:
    - requests-based transport for live API access
    - Mock transport for testing
    - File-based transport for replaying saved responses

    Authentication, rate limiting and retries are the transport's own
    business; the services only see response bodies or errors.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        path: str,
        form: Optional[Mapping[str, str]] = None
    ) -> bytes:
        """Send a request and return the raw response body.

        Args:
            method: HTTP method, ``GET`` or ``POST``.
            path: Path relative to the API base URL, including any query
                string, e.g. ``message/inbox?limit=10``.
            form: Form fields to send url-encoded in a POST body.

        Returns:
            The raw response body.

        Raises:
            TransportError: If the request could not be completed.
            APIError: If the API answered with a non-2xx status.
        """
        pass
