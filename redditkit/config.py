"""Configuration management for the Reddit client."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

@dataclass
class RedditAPIConfig:
    """Configuration for reaching the Reddit API.

    Attributes:
        base_url: API root URL; ``https://www.reddit.com`` for anonymous use.
        user_agent: User-Agent sent with every request.
        access_token: OAuth bearer token obtained outside this library.
        timeout_seconds: Per-request timeout.
    """
    base_url: str = "https://oauth.reddit.com"
    user_agent: str = "python:redditkit:v0.1.0"
    access_token: str = ""
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> "RedditAPIConfig":
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("REDDIT_BASE_URL", "https://oauth.reddit.com"),
            user_agent=os.getenv("REDDIT_USER_AGENT", "python:redditkit:v0.1.0"),
            access_token=os.getenv("REDDIT_ACCESS_TOKEN", ""),
            timeout_seconds=float(os.getenv("REDDIT_TIMEOUT_SECONDS", "30")),
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of validation error messages, empty if valid.
        """
        errors = []
        if not self.base_url.startswith(("http://", "https://")):
            errors.append("Reddit base URL must start with http:// or https://")
        if not self.user_agent:
            errors.append("Reddit user agent is required")
        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")
        if self.base_url.startswith("https://oauth.") and not self.access_token:
            errors.append("An access token is required for the OAuth API host")
        return errors

@dataclass
class LoggingConfig:
    """Configuration for request logging.

    Attributes:
        log_dir: Directory for request log files.
        log_requests: Whether to write API traffic to JSONL files.
        log_to_console: Whether to echo request logs to the console.
        log_level: Logging level for console output.
    """
    log_dir: str = "logs"
    log_requests: bool = False
    log_to_console: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create config from environment variables."""
        return cls(
            log_dir=os.getenv("REDDIT_LOG_DIR", "logs"),
            log_requests=os.getenv("REDDIT_LOG_REQUESTS", "false").lower() == "true",
            log_to_console=os.getenv("REDDIT_LOG_TO_CONSOLE", "true").lower() == "true",
            log_level=os.getenv("REDDIT_LOG_LEVEL", "INFO"),
        )

@dataclass
class Config:
    """Main configuration container.

    Attributes:
        api: Reddit API configuration.
        logging: Request logging configuration.
    """
    api: RedditAPIConfig = field(default_factory=RedditAPIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        return cls(
            api=RedditAPIConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    def validate(self) -> List[str]:
        """Validate the entire configuration.

        Returns:
            List of validation error messages, empty if valid.
        """
        errors = []
        errors.extend(self.api.validate())

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging.log_level.upper() not in valid_levels:
            errors.append(f"log_level must be one of: {valid_levels}")

        return errors


def load_config(env_file: Optional[str] = None) -> Config:
    """Load configuration from environment variables.

    Variables already set in the environment win over the ``.env`` file.

    Args:
        env_file: Path to a ``.env`` file; defaults to searching for one.

    Returns:
        Configured Config instance.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()
    return Config.from_env()


def get_sample_env_file() -> str:
    """Get a sample .env file content for reference.

    Returns:
        Sample .env file content as a string.
    """
    return """# Reddit API
REDDIT_BASE_URL=https://oauth.reddit.com
REDDIT_USER_AGENT=python:myapp:v1.0 (by /u/yourname)
REDDIT_ACCESS_TOKEN=your-bearer-token-here
REDDIT_TIMEOUT_SECONDS=30

# Logging
REDDIT_LOG_DIR=logs
REDDIT_LOG_REQUESTS=false
REDDIT_LOG_TO_CONSOLE=true
REDDIT_LOG_LEVEL=INFO
"""
