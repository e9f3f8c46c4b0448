"""API request/response logging functionality."""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

class RequestLogger:
    """Logger for Reddit API requests and responses.

    Logs every API call to JSON Lines files for debugging and replaying
    responses. Authorization headers are never written.

    Attributes:
        log_dir: Directory where log files are stored.
        logger: Standard Python logger for console output.
        max_body_length: Response bodies are truncated to this many characters.
    """

    def __init__(
        self,
        log_dir: str = "logs",
        log_to_console: bool = True,
        console_level: int = logging.INFO,
        max_body_length: int = 10000
    ):
        """Initialize the request logger.

        Args:
            log_dir: Directory for storing log files.
            log_to_console: Whether to also log to console.
            console_level: Logging level for console output.
            max_body_length: Maximum number of body characters to store.
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.max_body_length = max_body_length

        self.logger = logging.getLogger("redditkit.requests")
        self.logger.setLevel(logging.DEBUG)

        if log_to_console and not self.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(console_level)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def _get_log_file_path(self, date: Optional[datetime] = None) -> Path:
        """Get the path to the log file for a date (one file per UTC day)."""
        day = (date or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
        return self.log_dir / f"requests_{day}.jsonl"

    def _write_log_entry(self, entry: Dict[str, Any]) -> None:
        """Append a log entry to the current log file."""
        with open(self._get_log_file_path(), "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")

    def generate_request_id(self) -> str:
        """Generate a unique request ID for tracking.

        Returns:
            Unique request ID string.
        """
        return str(uuid.uuid4())

    def log_request(
        self,
        request_id: str,
        method: str,
        url: str,
        form: Optional[Mapping[str, str]] = None
    ) -> None:
        """Log an outgoing request.

        Args:
            request_id: Unique identifier for this request.
            method: HTTP method.
            url: Full request URL.
            form: Form fields of a POST body, if any.
        """
        entry = {
            "type": "request",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": method,
            "url": url,
            "form": dict(form) if form else {},
        }

        self._write_log_entry(entry)
        self.logger.info(f"Request [{request_id[:8]}]: {method} {url}")

    def log_response(
        self,
        request_id: str,
        status_code: int,
        body: bytes,
        latency_ms: Optional[float] = None
    ) -> None:
        """Log a received response.

        Args:
            request_id: Unique identifier matching the request.
            status_code: HTTP status code.
            body: Raw response body.
            latency_ms: Time taken for the request in milliseconds.
        """
        text = body.decode("utf-8", errors="replace")
        entry = {
            "type": "response",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status_code": status_code,
            "body": text[:self.max_body_length],
            "body_length": len(body),
            "latency_ms": latency_ms,
        }

        self._write_log_entry(entry)
        self.logger.info(
            f"Response [{request_id[:8]}]: status={status_code}, "
            f"body_length={len(body)}, latency_ms={latency_ms}"
        )

    def log_error(
        self,
        request_id: str,
        error: Exception,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log an error raised while sending a request.

        Args:
            request_id: Unique identifier matching the request.
            error: The exception that occurred.
            context: Additional context about the error.
        """
        entry = {
            "type": "error",
            "request_id": request_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error_type": type(error).__name__,
            "error_message": str(error),
            "context": context or {},
        }

        self._write_log_entry(entry)
        self.logger.error(
            f"Request Error [{request_id[:8]}]: {type(error).__name__}: {error}"
        )

    def get_logs_for_date(self, date: datetime) -> list:
        """Retrieve all log entries for a specific date.

        Args:
            date: The date to retrieve logs for.

        Returns:
            List of log entry dictionaries.
        """
        log_path = self._get_log_file_path(date)

        if not log_path.exists():
            return []

        entries = []
        with open(log_path, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    entries.append(json.loads(line))

        return entries

    def get_request_chain(self, request_id: str, date: datetime) -> list:
        """Get all log entries for a specific request ID.

        Args:
            request_id: The request ID to look up.
            date: The date the request was made.

        Returns:
            List of log entries for this request.
        """
        return [
            entry for entry in self.get_logs_for_date(date)
            if entry.get("request_id") == request_id
        ]
