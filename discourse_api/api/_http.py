"""
Base HTTP client for the Discourse API.

Handles session management, credential query parameters, and transport
error handling.
"""

import logging
from typing import Optional, Dict, Any, Union
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .. import __version__
from ..config import DiscourseConfig
from ..exceptions import TransportError

logger = logging.getLogger(__name__)

RequestBody = Union[str, Dict[str, Any], None]


class HTTPClient:
    """
    Base HTTP client for the Discourse API.

    Handles:
    - Session management (no retries)
    - api_key / api_username query parameters on every request
    - Conversion of network failures into TransportError

    Error statuses are not raised: the platform encodes error details
    as JSON on 4xx/5xx, so the body is always returned to the caller.
    """

    ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")

    def __init__(self, config: DiscourseConfig):
        """
        Initialize the HTTP client.

        Args:
            config: Endpoint target and credentials
        """
        self.config = config
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()

            adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

            self._session.headers.update({
                "User-Agent": f"discourse-api/{__version__}",
                "Accept": "application/json",
            })

        return self._session

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self.config.base_url

    def _get_auth_params(self, api_username: Optional[str] = None) -> Dict[str, str]:
        """Get the credential pair sent with every request."""
        return {
            "api_key": self.config.api_key,
            "api_username": api_username or self.config.api_username,
        }

    def url_for(self, endpoint: str) -> str:
        """Build an absolute URL for an endpoint relative to the base URL."""
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: RequestBody = None,
        api_username: Optional[str] = None,
    ) -> str:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (relative to base URL)
            params: Query parameters
            data: Pre-encoded string body or form fields
            api_username: Act as this user instead of the configured one

        Returns:
            Response body text, whatever the status code

        Raises:
            ValueError: If the method is not supported
            TransportError: On network-level failure
        """
        method = method.upper()
        if method not in self.ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.url_for(endpoint)

        query: Dict[str, Any] = {}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        query.update(self._get_auth_params(api_username))

        logger.debug(f"Request: {method} {url} (api_username={query['api_username']})")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=query,
                data=data,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Transport failure: {method} {endpoint}: {e}")
            raise TransportError(method, endpoint, e) from e

        logger.debug(f"Response: {response.status_code}")

        return response.text

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        """GET request."""
        return self.request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        data: RequestBody = None,
        api_username: Optional[str] = None,
    ) -> str:
        """POST request."""
        return self.request("POST", endpoint, data=data, api_username=api_username)

    def put(self, endpoint: str, data: RequestBody = None) -> str:
        """PUT request."""
        return self.request("PUT", endpoint, data=data)

    def delete(self, endpoint: str, data: RequestBody = None) -> str:
        """DELETE request."""
        return self.request("DELETE", endpoint, data=data)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
