"""
Topics API - Topic and post operations.
"""

from typing import Optional

from ._base import BaseAPI
from ._decode import decode_latest_topics, decode_post
from .models import Result


class TopicsAPI(BaseAPI):
    """
    API for content operations.

    Handles:
    - Topic creation
    - Replies to existing topics
    - Latest topics listing
    """

    def create(
        self,
        title: str,
        raw: str,
        category_id: int,
        username: Optional[str] = None
    ) -> Result:
        """
        Create a new topic.

        Args:
            title: Topic title
            raw: Body of the first post (markdown)
            category_id: Category the topic belongs to
            username: Post as this user (defaults to the acting username)

        Returns:
            Result with the created first post (includes topic_id)
        """
        body = self._send(
            "POST",
            "posts.json",
            "Could not create topic",
            title,
            data={"title": title, "raw": raw, "category": category_id},
            api_username=username,
        )
        return decode_post(body, f"create topic '{title}'")

    def create_post(
        self,
        raw: str,
        topic_id: int,
        category_id: int,
        username: Optional[str] = None
    ) -> Result:
        """
        Reply to an existing topic.

        Args:
            raw: Post body (markdown)
            topic_id: Topic to reply to
            category_id: Category of the topic
            username: Post as this user (defaults to the acting username)
        """
        body = self._send(
            "POST",
            "posts.json",
            "Could not create post in topic id",
            topic_id,
            data={"raw": raw, "topic_id": topic_id, "category": category_id},
            api_username=username,
        )
        return decode_post(body, f"create post in topic {topic_id}")

    def latest(self) -> Result:
        """Get latest topics, newest created first, in platform order."""
        body = self._send(
            "GET",
            "latest.json",
            "Could not get latest topics",
            "latest.json",
            params={"order": "created"},
        )
        return decode_latest_topics(body)
