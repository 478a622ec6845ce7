"""
Configuration for the Discourse API client.

Host and credentials are supplied by the embedding application, either
directly, from a dictionary, or from environment variables.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .exceptions import ConfigurationError

DEFAULT_API_USERNAME = "system"
DEFAULT_TIMEOUT = 30

_TRUE_VALUES = ("1", "true", "yes", "on")


def _parse_bool(value: Any, default: bool) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class DiscourseConfig:
    """
    Immutable endpoint target and credentials for one client instance.

    Attributes:
        host: Forum host name, without scheme (e.g. forum.example.com)
        api_key: Admin API key, sent on every request
        api_username: Acting username the API key operates as
        secure: Use https (True) or http (False)
        verify_ssl: Verify TLS certificates
        timeout: Request timeout in seconds
    """

    host: str
    api_key: str
    api_username: str = DEFAULT_API_USERNAME
    secure: bool = True
    verify_ssl: bool = True
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self):
        host = (self.host or "").strip()
        for prefix in ("https://", "http://"):
            if host.lower().startswith(prefix):
                host = host[len(prefix):]
        host = host.rstrip("/")

        if not host:
            raise ConfigurationError("Discourse host is required")
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("Discourse API key is required")

        # frozen dataclass: normalized host has to be set through object
        object.__setattr__(self, "host", host)
        if not self.api_username:
            object.__setattr__(self, "api_username", DEFAULT_API_USERNAME)

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return f"{self.scheme}://{self.host}/"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiscourseConfig":
        """
        Create config from dictionary.

        Raises:
            ConfigurationError: If timeout is not an integer
        """
        try:
            timeout = int(data.get("timeout") or DEFAULT_TIMEOUT)
        except (TypeError, ValueError):
            raise ConfigurationError("timeout must be an integer")

        return cls(
            host=data.get("host", ""),
            api_key=data.get("api_key", ""),
            api_username=data.get("api_username") or DEFAULT_API_USERNAME,
            secure=_parse_bool(data.get("secure"), True),
            verify_ssl=_parse_bool(data.get("verify_ssl"), True),
            timeout=timeout,
        )


    @classmethod
    def from_env(cls) -> "DiscourseConfig":
        """
        Create config from environment variables.

        Reads DISCOURSE_HOST, DISCOURSE_API_KEY, DISCOURSE_API_USERNAME,
        DISCOURSE_SECURE, DISCOURSE_VERIFY_SSL and DISCOURSE_TIMEOUT.

        Raises:
            ConfigurationError: If host or API key is missing
        """
        host = os.getenv("DISCOURSE_HOST")
        if not host:
            raise ConfigurationError("DISCOURSE_HOST environment variable is required")

        api_key = os.getenv("DISCOURSE_API_KEY")
        if not api_key:
            raise ConfigurationError("DISCOURSE_API_KEY environment variable is required")

        try:
            timeout = int(os.getenv("DISCOURSE_TIMEOUT", str(DEFAULT_TIMEOUT)))
        except ValueError:
            raise ConfigurationError("DISCOURSE_TIMEOUT must be an integer")

        return cls(
            host=host,
            api_key=api_key,
            api_username=os.getenv("DISCOURSE_API_USERNAME", DEFAULT_API_USERNAME),
            secure=_parse_bool(os.getenv("DISCOURSE_SECURE"), True),
            verify_ssl=_parse_bool(os.getenv("DISCOURSE_VERIFY_SSL"), True),
            timeout=timeout,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def __repr__(self) -> str:
        masked = self.api_key[:4] + "..." if len(self.api_key) > 8 else "***"
        return (
            f"DiscourseConfig(host={self.host!r}, api_key={masked!r}, "
            f"api_username={self.api_username!r}, secure={self.secure}, "
            f"verify_ssl={self.verify_ssl}, timeout={self.timeout})"
        )
