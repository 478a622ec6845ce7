"""
Higher-level user actions composed from several API calls.

Each action returns a Result envelope; a failed step short-circuits the
rest of the action.
"""

import logging
from typing import Optional

from .api import DiscourseAPIClient, Result
from .api.users import DEFAULT_SUSPEND_UNTIL, DEFAULT_SUSPEND_REASON, SuspendUntil
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class UserService:
    """
    User administration actions by username.

    Handles:
    - Adding a user (create, locate, activate, approve)
    - Suspending a user
    - Unsuspending a user
    """

    def __init__(self, client: DiscourseAPIClient):
        self.client = client

    def add_new_user(self, name: str, username: str, email: str, password: str) -> Result:
        """
        Create a user and make it immediately usable.

        Returns:
            Result with {user_id, message}
        """
        try:
            created = self.client.create_user(name, username, email, password)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                f"Could not create user for username: {username}",
                identifier=username,
                details=e.message,
            ) from e

        if not created.success:
            return Result.fail("User was not created successfully.", *created.errors)

        user_id = (created.data or {}).get("user_id")
        if user_id is None:
            located = self._get_user_id(username)
            if not located.success:
                return Result.fail("User was not created successfully.", *located.errors)
            user_id = located.data

        steps = (
            ("activate", self.client.activate_user_by_id),
            ("approve", self.client.approve_user_by_id),
        )
        for action, step in steps:
            result = step(user_id)
            if not result.success:
                logger.warning(f"Could not {action} {username}: {'; '.join(result.errors)}")
                return Result.fail("User was not created successfully.", *result.errors)

        return Result.ok({
            "user_id": user_id,
            "message": "User was created, activated, and approved successfully",
        })

    def suspend_user(
        self,
        username: str,
        suspend_until: SuspendUntil = DEFAULT_SUSPEND_UNTIL,
        reason: str = DEFAULT_SUSPEND_REASON,
    ) -> Result:
        """Suspend a user by username."""
        user_id = self._get_user_id(username)
        if not user_id.success:
            return user_id

        try:
            response = self.client.suspend_user_by_id(user_id.data, suspend_until, reason)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                f"Could not suspend user with id: {user_id.data}",
                identifier=user_id.data,
                details=e.message,
            ) from e

        if not response.success:
            return Result.fail("User was not suspended successfully.", *response.errors)

        return Result.ok({"user_id": user_id.data, "message": "User was suspended successfully"})

    def unsuspend_user(self, username: str) -> Result:
        """Unsuspend a user by username."""
        user_id = self._get_user_id(username)
        if not user_id.success:
            return user_id

        try:
            response = self.client.unsuspend_user_by_id(user_id.data)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                f"Could not unsuspend user with id: {user_id.data}",
                identifier=user_id.data,
                details=e.message,
            ) from e

        if not response.success:
            return Result.fail("User was not unsuspended successfully.", *response.errors)

        return Result.ok({"user_id": user_id.data, "message": "User was unsuspended successfully"})

    def _get_user_id(self, username: Optional[str]) -> Result:
        if not username:
            return Result.fail("A username is required")

        try:
            return self.client.lookup_user_id_by_username(username)
        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                f"Could not get User Id for username: {username}",
                identifier=username,
                details=e.message,
            ) from e
