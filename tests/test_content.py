"""
Tests for topics, posts, categories, and site settings.
"""

import pytest
import requests

from discourse_api.api import Result
from discourse_api.exceptions import InvalidArgumentError


class TestCategories:
    """Tests for create_category."""

    def test_create(self, client, session, make_response):
        """Test category creation."""
        category = {"id": 5, "name": "a new category", "color": "cc2222"}
        session.request.return_value = make_response({"category": category})

        result = client.create_category("a new category", "#cc2222")

        assert result == Result.ok(category)
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "https://forum.example.com/categories.json"
        assert kwargs["data"] == {"name": "a new category", "color": "cc2222", "text_color": "FFFFFF"}

    def test_duplicate_name(self, client, session, make_response):
        """Test platform rejection."""
        session.request.return_value = make_response(
            {"errors": ["Category Name has already been taken"]}, status_code=422
        )

        result = client.create_category("dup", "cc2222")

        assert result.success is False
        assert result.errors == ["Category Name has already been taken"]


class TestTopics:
    """Tests for create_topic and create_post."""

    def test_create_topic_as_user(self, client, session, make_response):
        """Test topic is posted as the given username."""
        session.request.return_value = make_response({"id": 10, "topic_id": 99})

        result = client.create_topic("Title of a topic", "Body text", 5, "johndoe")

        assert result.data["topic_id"] == 99
        kwargs = session.request.call_args.kwargs
        assert kwargs["url"] == "https://forum.example.com/posts.json"
        assert kwargs["params"]["api_username"] == "johndoe"
        assert kwargs["data"] == {"title": "Title of a topic", "raw": "Body text", "category": 5}

    def test_create_topic_default_user(self, client, session, make_response):
        """Test acting username is used when none is given."""
        session.request.return_value = make_response({"id": 10, "topic_id": 99})

        client.create_topic("Title of a topic", "Body text", 5)

        assert session.request.call_args.kwargs["params"]["api_username"] == "system"

    def test_create_post(self, client, session, make_response):
        """Test reply in an existing topic."""
        session.request.return_value = make_response({"id": 11, "topic_id": 99})

        result = client.create_post("A reply", 99, 5, "johndoe")

        assert result.success is True
        kwargs = session.request.call_args.kwargs
        assert kwargs["data"] == {"raw": "A reply", "topic_id": 99, "category": 5}
        assert kwargs["params"]["api_username"] == "johndoe"

    def test_create_topic_rejected(self, client, session, make_response):
        """Test validation errors from the platform."""
        session.request.return_value = make_response(
            {"action": "create_post", "errors": ["Title is too short"]}, status_code=422
        )

        result = client.create_topic("x", "y", 5)

        assert result == Result.fail("Title is too short")

    def test_create_post_transport_failure(self, client, session):
        """Test transport failure names the topic id."""
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(InvalidArgumentError) as exc_info:
            client.create_post("A reply", 99, 5)

        assert "99" in str(exc_info.value)


class TestLatestTopics:
    """Tests for get_latest_topics."""

    def test_latest(self, client, session, make_response):
        """Test topics come back verbatim and in order."""
        topics = [
            {"id": 9, "title": "newest"},
            {"id": 4, "title": "older", "pinned": True},
            {"id": 7, "title": "oldest"},
        ]
        session.request.return_value = make_response({"topic_list": {"topics": topics}})

        result = client.get_latest_topics()

        assert result.data == topics
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://forum.example.com/latest.json"
        assert kwargs["params"]["order"] == "created"


class TestSiteSettings:
    """Tests for change_site_setting."""

    def test_change(self, client, session, make_response):
        """Test setting change with an empty 200 body."""
        session.request.return_value = make_response(text="")

        result = client.change_site_setting("invite_expiry_days", 29)

        assert result.success is True
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "https://forum.example.com/admin/site_settings/invite_expiry_days"
        assert kwargs["data"] == {"invite_expiry_days": 29}

    def test_boolean_value(self, client, session, make_response):
        """Test booleans are sent lowercase."""
        session.request.return_value = make_response(text="")

        client.change_site_setting("login_required", True)

        assert session.request.call_args.kwargs["data"] == {"login_required": "true"}

    def test_unknown_setting(self, client, session, make_response):
        """Test platform rejection of an unknown setting."""
        session.request.return_value = make_response(
            {"errors": ["No setting named 'bogus' exists"], "error_type": "invalid_parameters"},
            status_code=400,
        )

        result = client.change_site_setting("bogus", 1)

        assert result.success is False
