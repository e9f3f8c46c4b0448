"""JSON Lines logging of API traffic."""

from redditkit.request_logging.request_logger import RequestLogger

__all__ = ["RequestLogger"]
