"""
Categories API - Category management.
"""

from ._base import BaseAPI
from ._decode import decode_category
from .models import Result


class CategoriesAPI(BaseAPI):
    """API for category management (admin only)."""

    def create(self, name: str, color: str, text_color: str = "FFFFFF") -> Result:
        """
        Create a category.

        Args:
            name: Category name
            color: Background color as hex without '#', e.g. "cc2222"
            text_color: Text color as hex without '#'

        Returns:
            Result with the created category record
        """
        body = self._send(
            "POST",
            "categories.json",
            "Could not create category",
            name,
            data={
                "name": name,
                "color": color.lstrip("#"),
                "text_color": text_color.lstrip("#"),
            },
        )
        return decode_category(body, name)
