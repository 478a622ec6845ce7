"""
Discourse API - Client library for the Discourse administrative HTTP API.

Wraps user lifecycle management (create, activate, approve, suspend,
unsuspend, lookup) and basic content operations (topics, posts, categories,
site settings). Every operation returns a uniform result envelope.
"""

import logging

__version__ = "1.0.0"
__author__ = "Discourse API Client Contributors"

from .config import DiscourseConfig
from .exceptions import (
    DiscourseError,
    ConfigurationError,
    TransportError,
    DomainError,
    InvalidArgumentError,
)
from .api import DiscourseAPIClient, Result, Honeypot, get_client
from .service import UserService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "DiscourseConfig",
    "DiscourseAPIClient",
    "get_client",
    "UserService",
    "Result",
    "Honeypot",
    "DiscourseError",
    "ConfigurationError",
    "TransportError",
    "DomainError",
    "InvalidArgumentError",
]
