"""
Custom exceptions for the Discourse API client.
"""

from typing import Any, Optional


class DiscourseError(Exception):
    """Base exception for all Discourse API client errors."""

    def __init__(self, message: str = "", details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(DiscourseError):
    """Missing or invalid client configuration."""
    pass


class TransportError(DiscourseError):
    """
    Network-level failure (DNS, refused connection, timeout, TLS).

    Never retried. Carries the attempted method and path and the
    underlying cause.
    """

    def __init__(self, method: str, path: str, cause: BaseException):
        super().__init__(
            f"{method} {path} failed: {cause}",
            details=type(cause).__name__,
        )
        self.method = method
        self.path = path
        self.cause = cause


class DomainError(DiscourseError):
    """A response could not be interpreted, or a dependent call failed."""

    def __init__(
        self,
        message: str = "",
        identifier: Any = None,
        details: Optional[str] = None,
    ):
        super().__init__(message, details=details)
        self.identifier = identifier


class InvalidArgumentError(DomainError):
    """An operation failed for the given identifier (user id, username)."""
    pass
