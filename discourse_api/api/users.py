"""
Users API - User lifecycle operations.
"""

import logging
from datetime import date, datetime
from typing import Union
from urllib.parse import quote

from ..exceptions import InvalidArgumentError
from ._base import BaseAPI
from ._decode import (
    decode_created_user,
    decode_honeypot,
    decode_status,
    decode_user,
    decode_user_id,
)
from .models import Result

logger = logging.getLogger(__name__)

DEFAULT_SUSPEND_UNTIL = "3017-01-01"
DEFAULT_SUSPEND_REASON = "Suspended via API"
UNSUSPENDED_ON_CREATE = "unsuspended via account creation"

SuspendUntil = Union[str, date, datetime]


class UsersAPI(BaseAPI):
    """
    API for user management operations.

    Handles:
    - Lookup by username
    - Account creation (honeypot, create-or-unsuspend)
    - Activation and approval (admin)
    - Suspension and unsuspension (admin)
    - Deletion (admin)
    """

    def get_by_username(self, username: str) -> Result:
        """Get the full user record for a username."""
        body = self._send(
            "GET",
            f"users/{quote(username, safe='')}.json",
            "Could not get user for username",
            username,
        )
        return decode_user(body, username)

    def lookup_id(self, username: str) -> Result:
        """
        Translate a username into its numeric id.

        Returns:
            Result with the int id, or a failure result when the user does
            not exist. Never raises for a missing user.
        """
        body = self._send(
            "GET",
            f"users/{quote(username, safe='')}.json",
            "Could not get user id for username",
            username,
        )
        return decode_user_id(body, username)

    def get_honeypot(self) -> Result:
        """
        Fetch a fresh honeypot challenge/value pair.

        Returns:
            Result with a Honeypot, or a failure result when the response
            cannot be decoded
        """
        body = self._send("GET", "users/hp.json", "Could not fetch honeypot", "users/hp.json")
        return decode_honeypot(body)

    def create(
        self,
        name: str,
        username: str,
        email: str,
        password: str,
        fail_on_unsuspend_error: bool = False,
    ) -> Result:
        """
        Create a user, or unsuspend it if the username already exists.

        Args:
            name: Display name
            username: Username
            email: Email address
            password: Password
            fail_on_unsuspend_error: Report a failed unsuspend of an existing
                user as a failure instead of a success with a warning

        Returns:
            Result with {user_active, user_id, message}

        Raises:
            InvalidArgumentError: If the existence check fails for any reason
                other than a missing user, or no honeypot can be fetched
        """
        existing = self.lookup_id(username)
        if existing.success:
            return self._unsuspend_existing(username, existing.data, fail_on_unsuspend_error)

        if not existing.not_found:
            raise InvalidArgumentError(
                f"Could not check for existing user with username: {username}",
                identifier=username,
                details="; ".join(existing.errors),
            )

        honeypot = self.get_honeypot()
        if not honeypot.success:
            raise InvalidArgumentError(
                f"Could not fetch honeypot for username: {username}",
                identifier=username,
                details="; ".join(honeypot.errors),
            )

        data = {
            "name": name,
            "username": username,
            "email": email,
            "password": password,
            "challenge": honeypot.data.answer,
            "password_confirmation": honeypot.data.value,
            "active": "true",
            "approved": "true",
        }

        body = self._send("POST", "users", "Could not create user for username", username, data=data)
        result = decode_created_user(body, username)

        if result.success:
            logger.info(f"Created user {username} (id={result.data['user_id']})")
        else:
            logger.warning(f"User creation failed for {username}: {'; '.join(result.errors)}")

        return result

    def _unsuspend_existing(self, username: str, user_id: int, fail_on_error: bool) -> Result:
        logger.info(f"User {username} already exists (id={user_id}), unsuspending")

        unsuspended = self.unsuspend(user_id)
        if unsuspended.success:
            return Result.ok({
                "user_active": True,
                "user_id": user_id,
                "message": UNSUSPENDED_ON_CREATE,
            })

        message = f"User {username} already exists and could not be unsuspended"
        logger.warning(message)
        if fail_on_error:
            return Result.fail(message, *unsuspended.errors)
        return Result.warning(message, *unsuspended.errors)

    def activate(self, user_id: int) -> Result:
        """Activate user account (admin only)."""
        body = self._send(
            "PUT",
            f"admin/users/{user_id}/activate",
            "Could not activate user id",
            user_id,
        )
        return decode_status(body, f"activate user {user_id}")

    def approve(self, user_id: int) -> Result:
        """Approve user account (admin only)."""
        body = self._send(
            "PUT",
            f"admin/users/{user_id}/approve",
            "Could not approve user id",
            user_id,
        )
        return decode_status(body, f"approve user {user_id}")

    def suspend(
        self,
        user_id: int,
        suspend_until: SuspendUntil = DEFAULT_SUSPEND_UNTIL,
        reason: str = DEFAULT_SUSPEND_REASON,
    ) -> Result:
        """
        Suspend user account (admin only).

        Args:
            user_id: Numeric user id
            suspend_until: End of the suspension (date, datetime or ISO string)
            reason: Reason shown to the user
        """
        if isinstance(suspend_until, (date, datetime)):
            suspend_until = suspend_until.isoformat()

        body = self._send(
            "PUT",
            f"admin/users/{user_id}/suspend",
            "Could not suspend user id",
            user_id,
            data={"suspend_until": suspend_until, "reason": reason},
        )
        return decode_status(body, f"suspend user {user_id}")

    def unsuspend(self, user_id: int) -> Result:
        """Lift a suspension (admin only)."""
        body = self._send(
            "PUT",
            f"admin/users/{user_id}/unsuspend",
            "Could not unsuspend user id",
            user_id,
        )
        return decode_status(body, f"unsuspend user {user_id}")

    def delete(self, user_id: int) -> Result:
        """Delete user account (admin only)."""
        body = self._send(
            "DELETE",
            f"admin/users/{user_id}.json",
            "Could not delete user id",
            user_id,
        )
        return decode_status(body, f"delete user {user_id}")
