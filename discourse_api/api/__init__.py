"""
Discourse API Client Package.

This package provides a modular API client for the Discourse admin API.

Structure:
    - client.py: Main DiscourseAPIClient facade
    - _http.py: Base HTTP client with session, credentials, and transport errors
    - _decode.py: Response decoding (platform JSON schema)
    - models.py: Result envelope and honeypot
    - users.py: User lifecycle management
    - topics.py: Topics, posts, latest listing
    - categories.py: Category management
    - admin.py: Site settings

Usage:
    from discourse_api.api import DiscourseAPIClient, get_client

    client = DiscourseAPIClient("forum.example.com", "api-key", "system")

    # Domain-specific
    result = client.users.lookup_id("johndoe")

    # Flat methods
    result = client.lookup_user_id_by_username("johndoe")
"""

from .client import DiscourseAPIClient, get_client
from ._http import HTTPClient
from .models import Result, Honeypot
from .users import UsersAPI
from .topics import TopicsAPI
from .categories import CategoriesAPI
from .admin import AdminAPI

__all__ = [
    # Main client
    "DiscourseAPIClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Envelope
    "Result",
    "Honeypot",
    # Domain APIs
    "UsersAPI",
    "TopicsAPI",
    "CategoriesAPI",
    "AdminAPI",
]
