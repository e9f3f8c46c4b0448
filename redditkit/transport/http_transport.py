"""requests-based implementation of the transport interface."""

import logging
import time
from typing import Mapping, Optional

import requests

from redditkit.errors import APIError, TransportError
from redditkit.interfaces.transport import ITransport
from redditkit.request_logging.request_logger import RequestLogger

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://oauth.reddit.com"
DEFAULT_USER_AGENT = "python:redditkit:v0.1.0"


class RequestsTransport(ITransport):
    """Sends API requests with a ``requests.Session``.

    The transport sends each request once. It does not obtain or refresh
    tokens: pass a bearer token obtained elsewhere, or none for the public
    endpoints of ``https://www.reddit.com``.

    Attributes:
        base_url: API root every path is resolved against.
        timeout_seconds: Per-request timeout.
        session: The underlying requests session.
        headers: User-Agent and Authorization headers added to each request.
        request_logger: Optional JSONL logger for API traffic.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        access_token: Optional[str] = None,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
        request_logger: Optional[RequestLogger] = None
    ):
        """Initialize the transport.

        Args:
            base_url: API root URL.
            user_agent: User-Agent header; Reddit throttles generic ones.
            access_token: OAuth bearer token, if any.
            timeout_seconds: Per-request timeout.
            session: Session to use instead of a new one.
            request_logger: Logger recording each request and response.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        # sent per request so a caller-supplied session is left untouched
        self.headers = {"User-Agent": user_agent}
        if access_token:
            self.headers["Authorization"] = f"Bearer {access_token}"
        self.request_logger = request_logger

    def url_for(self, path: str) -> str:
        """Resolve a relative API path against the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def send(
        self,
        method: str,
        path: str,
        form: Optional[Mapping[str, str]] = None
    ) -> bytes:
        """Send a request and return the raw response body."""
        url = self.url_for(path)
        request_id = ""
        if self.request_logger:
            request_id = self.request_logger.generate_request_id()
            self.request_logger.log_request(request_id, method, url, form)

        start_time = time.time()
        try:
            response = self.session.request(
                method,
                url,
                data=dict(form) if form else None,
                headers=self.headers,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            if self.request_logger:
                self.request_logger.log_error(request_id, e, {"method": method, "url": url})
            raise TransportError(f"{method} {url}: {e}") from e

        latency_ms = (time.time() - start_time) * 1000
        if self.request_logger:
            self.request_logger.log_response(
                request_id, response.status_code, response.content, latency_ms
            )
        logger.debug(f"{method} {url} -> {response.status_code} in {latency_ms:.0f}ms")

        if not 200 <= response.status_code < 300:
            raise APIError(response.status_code, response.text, method=method, url=url)

        return response.content

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Exit context manager and close resources."""
        self.close()
        return False
