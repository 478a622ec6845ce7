"""
Shared plumbing for the domain-specific API modules.
"""

from typing import Any

from ._http import HTTPClient
from ..exceptions import TransportError, InvalidArgumentError


class BaseAPI:
    """Base class for domain APIs bound to a shared HTTP client."""

    def __init__(self, http: HTTPClient):
        """
        Initialize the API module.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def _send(self, method: str, endpoint: str, failure: str, identifier: Any, **kwargs) -> str:
        """
        Send a request, re-raising transport failures as InvalidArgumentError.

        Args:
            method: HTTP method
            endpoint: API endpoint
            failure: Message prefix, e.g. "Could not approve user id"
            identifier: The offending identifier (user id, username, ...)
            **kwargs: Passed through to HTTPClient.request
        """
        try:
            return self._http.request(method, endpoint, **kwargs)
        except TransportError as e:
            raise InvalidArgumentError(
                f"{failure}: {identifier} ({e.message})",
                identifier=identifier,
                details=str(e.cause),
            ) from e
