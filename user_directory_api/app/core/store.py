"""
In‑memory user storage.

This module plays the role a database module would in a persistent
deployment: it owns the authoritative collection of users and the
identifier sequence, and exposes module‑level helpers for obtaining
the process‑wide store (``get_store``) and resetting it on
application start (``init_store``).

``UserStore`` keeps records in an insertion‑ordered ``dict`` keyed by
id.  Every operation runs under a single re‑entrant lock, so id
assignment is atomic and readers never see a half‑applied update when
the app is served by a threaded or concurrent dispatcher.  Records
handed out are always copies; callers cannot mutate stored state
except through the store's own operations.
"""

import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .config import settings
from ..models.user import User


logger = logging.getLogger(__name__)


# Sample users created on start‑up when seeding is enabled.
SEED_USERS = (
    ("johndoe", "john.doe@example.com", "John", "Doe"),
    ("janedoe", "jane.doe@example.com", "Jane", "Doe"),
    ("bobsmith", "bob.smith@example.com", "Bob", "Smith"),
)


class UserStore:
    """Authoritative collection of users plus the id counter.

    Not‑found is never an error here: lookups return ``None``,
    ``delete`` returns ``False`` and searches return an empty list.
    """

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._next_id = 1
        if seed:
            for username, email, first_name, last_name in SEED_USERS:
                self.create(User(username, email, first_name, last_name))

    def list(self) -> List[User]:
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def list_active(self) -> List[User]:
        with self._lock:
            return [replace(user) for user in self._users.values() if user.active]

    def get(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    def get_by_username(self, username: str) -> Optional[User]:
        """Return the first user whose username equals ``username`` exactly."""
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
            return None

    def create(self, candidate: User) -> User:
        """Store a copy of ``candidate`` under the next id.

        The candidate's own ``id`` and ``active`` values are ignored:
        new users always start active.
        """
        with self._lock:
            user = replace(candidate, id=self._next_id, active=True)
            self._next_id += 1
            self._users[user.id] = user
            return replace(user)

    def update(self, user_id: int, candidate: User) -> Optional[User]:
        """Overwrite every field except ``id`` from ``candidate``.

        Returns ``None`` without creating anything if ``user_id`` is
        unknown.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.username = candidate.username
            user.email = candidate.email
            user.first_name = candidate.first_name
            user.last_name = candidate.last_name
            user.active = candidate.active
            return replace(user)

    def delete(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def deactivate(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.active = False
            return replace(user)

    def search_by_name(self, term: str) -> List[User]:
        """Case‑insensitive substring match on first or last name.

        An empty term is a substring of every name and therefore
        matches all users.
        """
        needle = term.lower()
        with self._lock:
            return [
                replace(user)
                for user in self._users.values()
                if needle in user.first_name.lower() or needle in user.last_name.lower()
            ]

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def active_count(self) -> int:
        with self._lock:
            return sum(1 for user in self._users.values() if user.active)

    def stats(self) -> Tuple[int, int]:
        """Return ``(total, active)`` counted under one lock acquisition."""
        with self._lock:
            return len(self._users), self.active_count()


_store: Optional[UserStore] = None
_store_lock = threading.Lock()


def init_store(seed: Optional[bool] = None) -> UserStore:
    """Replace the process‑wide store with a fresh one and return it.

    ``seed`` defaults to ``settings.seed_users``.  Called once on
    application start‑up; any users held by a previous store are
    discarded.
    """
    global _store
    if seed is None:
        seed = settings.seed_users
    with _store_lock:
        _store = UserStore(seed=seed)
        logger.info("Initialised user store with %d users", _store.count())
        return _store


def get_store() -> UserStore:
    """Return the process‑wide store, creating it on first use."""
    if _store is None:
        return init_store()
    return _store
