"""
Tests for client configuration.
"""

import dataclasses

import pytest

from discourse_api.config import DiscourseConfig
from discourse_api.exceptions import ConfigurationError


class TestDiscourseConfig:
    """Tests for DiscourseConfig."""

    def test_defaults(self):
        """Test default acting username and transport flags."""
        config = DiscourseConfig(host="forum.example.com", api_key="key")
        assert config.api_username == "system"
        assert config.secure is True
        assert config.verify_ssl is True
        assert config.timeout == 30

    def test_base_url_secure(self):
        """Test https base URL."""
        config = DiscourseConfig(host="forum.example.com", api_key="key")
        assert config.base_url == "https://forum.example.com/"

    def test_base_url_insecure(self):
        """Test http base URL."""
        config = DiscourseConfig(host="forum.example.com", api_key="key", secure=False)
        assert config.base_url == "http://forum.example.com/"

    def test_host_normalized(self):
        """Test scheme and trailing slash are stripped from host."""
        config = DiscourseConfig(host="https://forum.example.com/", api_key="key")
        assert config.host == "forum.example.com"
        assert config.base_url == "https://forum.example.com/"

    def test_missing_host(self):
        """Test empty host is rejected."""
        with pytest.raises(ConfigurationError):
            DiscourseConfig(host="", api_key="key")

    def test_missing_api_key(self):
        """Test empty API key is rejected."""
        with pytest.raises(ConfigurationError):
            DiscourseConfig(host="forum.example.com", api_key="  ")

    def test_immutable(self):
        """Test credentials cannot change after construction."""
        config = DiscourseConfig(host="forum.example.com", api_key="key")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"  # type: ignore[misc]

    def test_repr_masks_api_key(self):
        """Test the API key never appears in repr."""
        config = DiscourseConfig(host="forum.example.com", api_key="supersecretkey123")
        assert "supersecretkey123" not in repr(config)
        assert "forum.example.com" in repr(config)


class TestFromDict:
    """Tests for DiscourseConfig.from_dict."""

    def test_from_dict(self):
        """Test loading all fields from a dictionary."""
        config = DiscourseConfig.from_dict({
            "host": "forum.example.com",
            "api_key": "key",
            "api_username": "admin",
            "secure": "false",
            "verify_ssl": False,
            "timeout": "10",
        })
        assert config.api_username == "admin"
        assert config.secure is False
        assert config.verify_ssl is False
        assert config.timeout == 10

    def test_from_dict_defaults(self):
        """Test missing optional fields fall back to defaults."""
        config = DiscourseConfig.from_dict({"host": "forum.example.com", "api_key": "key"})
        assert config.api_username == "system"
        assert config.secure is True

    def test_from_dict_bad_timeout(self):
        """Test non-integer timeout raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            DiscourseConfig.from_dict({"host": "forum.example.com", "api_key": "key", "timeout": "soon"})

        assert "timeout" in str(exc_info.value)



class TestFromEnv:
    """Tests for DiscourseConfig.from_env."""

    def test_from_env(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("DISCOURSE_HOST", "forum.example.com")
        monkeypatch.setenv("DISCOURSE_API_KEY", "key")
        monkeypatch.setenv("DISCOURSE_API_USERNAME", "admin")
        monkeypatch.setenv("DISCOURSE_SECURE", "0")
        monkeypatch.setenv("DISCOURSE_TIMEOUT", "5")

        config = DiscourseConfig.from_env()

        assert config.host == "forum.example.com"
        assert config.api_username == "admin"
        assert config.secure is False
        assert config.timeout == 5

    def test_from_env_missing_host(self, monkeypatch):
        """Test missing DISCOURSE_HOST."""
        monkeypatch.delenv("DISCOURSE_HOST", raising=False)
        monkeypatch.setenv("DISCOURSE_API_KEY", "key")

        with pytest.raises(ConfigurationError) as exc_info:
            DiscourseConfig.from_env()

        assert "DISCOURSE_HOST" in str(exc_info.value)

    def test_from_env_missing_key(self, monkeypatch):
        """Test missing DISCOURSE_API_KEY."""
        monkeypatch.setenv("DISCOURSE_HOST", "forum.example.com")
        monkeypatch.delenv("DISCOURSE_API_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            DiscourseConfig.from_env()

    def test_from_env_bad_timeout(self, monkeypatch):
        """Test non-numeric timeout."""
        monkeypatch.setenv("DISCOURSE_HOST", "forum.example.com")
        monkeypatch.setenv("DISCOURSE_API_KEY", "key")
        monkeypatch.setenv("DISCOURSE_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError):
            DiscourseConfig.from_env()
