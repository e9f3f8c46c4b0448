"""Testing utilities and mock implementations.

This module provides mock implementations of the core interfaces
for use in testing, local development, and demo scenarios.
"""

from redditkit.testing.mocks import MockTransport

__all__ = [
    "MockTransport",
]
