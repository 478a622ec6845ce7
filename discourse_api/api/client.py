"""
Discourse API Client - Main facade for all API operations.

This module provides flat access to every endpoint while organizing the
bindings into domain-specific modules.
"""

from typing import Any, Optional

from ..config import DiscourseConfig, DEFAULT_API_USERNAME, DEFAULT_TIMEOUT
from ._http import HTTPClient
from .users import UsersAPI, DEFAULT_SUSPEND_UNTIL, DEFAULT_SUSPEND_REASON, SuspendUntil
from .topics import TopicsAPI
from .categories import CategoriesAPI
from .admin import AdminAPI
from .models import Result


class DiscourseAPIClient:
    """
    Client for the Discourse administrative API.

    This is a facade that provides both:
    - Domain-specific sub-clients (client.users, client.topics, etc.)
    - Flat methods (client.approve_user_by_id(), etc.)

    Every operation returns a Result envelope. Network failures surface as
    InvalidArgumentError naming the offending identifier.

    Usage:
        with DiscourseAPIClient("forum.example.com", api_key) as client:
            result = client.lookup_user_id_by_username("johndoe")
            if result.success:
                client.approve_user_by_id(result.data)
    """

    def __init__(
        self,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        api_username: str = DEFAULT_API_USERNAME,
        secure: bool = True,
        verify_ssl: bool = True,
        timeout: int = DEFAULT_TIMEOUT,
        config: Optional[DiscourseConfig] = None,
    ):
        """
        Initialize the API client.

        Args:
            host: Forum host name (scheme is taken from `secure`)
            api_key: Admin API key
            api_username: Acting username for all requests
            secure: Use https
            verify_ssl: Verify TLS certificates
            timeout: Request timeout in seconds
            config: Ready-made configuration; other arguments are ignored
        """
        if config is None:
            config = DiscourseConfig(
                host=host or "",
                api_key=api_key or "",
                api_username=api_username,
                secure=secure,
                verify_ssl=verify_ssl,
                timeout=timeout,
            )

        self._http = HTTPClient(config)

        # Domain-specific API modules
        self.users = UsersAPI(self._http)
        self.topics = TopicsAPI(self._http)
        self.categories = CategoriesAPI(self._http)
        self.admin = AdminAPI(self._http)

    @property
    def config(self) -> DiscourseConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    # ========== User Methods ==========

    def lookup_user_id_by_username(self, username: str) -> Result:
        """Translate a username into its numeric id."""
        return self.users.lookup_id(username)

    def get_user_by_username(self, username: str) -> Result:
        """Get the full user record for a username."""
        return self.users.get_by_username(username)

    def get_honeypot(self) -> Result:
        """Fetch a honeypot challenge/value pair as Result[Honeypot]."""
        return self.users.get_honeypot()

    def create_user(
        self,
        name: str,
        username: str,
        email: str,
        password: str,
        fail_on_unsuspend_error: bool = False,
    ) -> Result:
        """Create a user, or unsuspend it if the username already exists."""
        return self.users.create(name, username, email, password, fail_on_unsuspend_error)

    def activate_user_by_id(self, user_id: int) -> Result:
        """Activate user account (admin only)."""
        return self.users.activate(user_id)

    def approve_user_by_id(self, user_id: int) -> Result:
        """Approve user account (admin only)."""
        return self.users.approve(user_id)

    def suspend_user_by_id(
        self,
        user_id: int,
        suspend_until: SuspendUntil = DEFAULT_SUSPEND_UNTIL,
        reason: str = DEFAULT_SUSPEND_REASON,
    ) -> Result:
        """Suspend user account (admin only)."""
        return self.users.suspend(user_id, suspend_until, reason)

    def unsuspend_user_by_id(self, user_id: int) -> Result:
        """Lift a suspension (admin only)."""
        return self.users.unsuspend(user_id)

    def delete_user_by_id(self, user_id: int) -> Result:
        """Delete user account (admin only)."""
        return self.users.delete(user_id)

    # ========== Content Methods ==========

    def create_category(self, name: str, color: str, text_color: str = "FFFFFF") -> Result:
        """Create a category (admin only)."""
        return self.categories.create(name, color, text_color)

    def create_topic(
        self,
        title: str,
        raw: str,
        category_id: int,
        username: Optional[str] = None,
    ) -> Result:
        """Create a new topic, optionally as another user."""
        return self.topics.create(title, raw, category_id, username)

    def create_post(
        self,
        raw: str,
        topic_id: int,
        category_id: int,
        username: Optional[str] = None,
    ) -> Result:
        """Reply to a topic, optionally as another user."""
        return self.topics.create_post(raw, topic_id, category_id, username)

    def get_latest_topics(self) -> Result:
        """Get latest topics ordered by creation."""
        return self.topics.latest()

    # ========== Admin Methods ==========

    def change_site_setting(self, name: str, value: Any) -> Result:
        """Change a site setting (admin only)."""
        return self.admin.change_site_setting(name, value)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "DiscourseAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(config: Optional[DiscourseConfig] = None) -> DiscourseAPIClient:
    """
    Get an API client instance.

    Args:
        config: Optional configuration. Read from the environment if not provided.

    Returns:
        DiscourseAPIClient instance
    """
    return DiscourseAPIClient(config=config or DiscourseConfig.from_env())
