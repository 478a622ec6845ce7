"""
Admin API - Administrative operations.
"""

from typing import Any
from urllib.parse import quote

from ._base import BaseAPI
from ._decode import decode_status
from .models import Result


class AdminAPI(BaseAPI):
    """
    API for administrative operations.

    Handles:
    - Site settings
    """

    def change_site_setting(self, name: str, value: Any) -> Result:
        """
        Change a site setting (admin only).

        Args:
            name: Setting name, e.g. "invite_expiry_days"
            value: New value; booleans are sent as "true"/"false"

        Returns:
            Result with an empty payload on success
        """
        if isinstance(value, bool):
            value = str(value).lower()

        body = self._send(
            "PUT",
            f"admin/site_settings/{quote(name)}",
            "Could not change site setting",
            name,
            data={name: value},
        )
        return decode_status(body, f"change site setting {name}")
