"""
Business logic for users.

``UserService`` is a thin façade over the process‑wide
:class:`~user_directory_api.app.core.store.UserStore`.  It converts
between API schemas and store records and logs mutations.  Absence is
reported as ``None`` or ``False``, never as an exception; turning that
into a 404 is the job of the API handlers.
"""

import logging
from typing import List, Optional

from ..core.store import get_store
from ..schemas.user import UserCreate, UserRead, UserStats


logger = logging.getLogger(__name__)


class UserService:
    """Operations on users exposed to the API layer.

    Stateless: all data lives in the store returned by ``get_store``.
    """

    @classmethod
    async def get_all_users(cls) -> List[UserRead]:
        """Return every user in insertion order."""
        return [UserRead.from_record(user) for user in get_store().list()]

    @classmethod
    async def get_active_users(cls) -> List[UserRead]:
        return [UserRead.from_record(user) for user in get_store().list_active()]

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> Optional[UserRead]:
        user = get_store().get(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            return None
        return UserRead.from_record(user)

    @classmethod
    async def get_user_by_username(cls, username: str) -> Optional[UserRead]:
        user = get_store().get_by_username(username)
        if user is None:
            logger.debug("User with username %s not found", username)
            return None
        return UserRead.from_record(user)

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user.

        The store assigns the id and marks the user active whatever
        the payload says.
        """
        user = get_store().create(data.to_record())
        logger.info("Created user %s with id %s", user.username, user.id)
        return UserRead.from_record(user)

    @classmethod
    async def update_user(cls, user_id: int, data: UserCreate) -> Optional[UserRead]:
        """Replace all fields of an existing user except its id.

        Returns ``None`` if the user does not exist; nothing is
        created in that case.
        """
        user = get_store().update(user_id, data.to_record())
        if user is None:
            logger.debug("Cannot update user %s: not found", user_id)
            return None
        logger.info("Updated user %s", user_id)
        return UserRead.from_record(user)

    @classmethod
    async def delete_user(cls, user_id: int) -> bool:
        """Remove a user.  Returns ``True`` if a user was removed."""
        deleted = get_store().delete(user_id)
        if deleted:
            logger.info("Deleted user %s", user_id)
        else:
            logger.debug("Cannot delete user %s: not found", user_id)
        return deleted

    @classmethod
    async def deactivate_user(cls, user_id: int) -> Optional[UserRead]:
        """Soft delete: mark a user inactive but keep it in the store."""
        user = get_store().deactivate(user_id)
        if user is None:
            logger.debug("Cannot deactivate user %s: not found", user_id)
            return None
        logger.info("Deactivated user %s", user_id)
        return UserRead.from_record(user)

    @classmethod
    async def search_users_by_name(cls, term: str) -> List[UserRead]:
        """Match ``term`` against first and last names, ignoring case."""
        return [UserRead.from_record(user) for user in get_store().search_by_name(term)]

    @classmethod
    async def get_user_count(cls) -> int:
        return get_store().count()

    @classmethod
    async def get_active_user_count(cls) -> int:
        return get_store().active_count()

    @classmethod
    async def get_user_stats(cls) -> UserStats:
        """Return total, active and inactive user counts."""
        total, active = get_store().stats()
        return UserStats(total_users=total, active_users=active, inactive_users=total - active)
