"""User record held by :class:`~user_directory_api.app.core.store.UserStore`."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A single user.

    ``id`` is ``None`` until the store assigns one on creation.  Any
    value set by the caller before that is discarded.
    """

    username: str
    email: str
    first_name: str
    last_name: str
    active: bool = True
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
