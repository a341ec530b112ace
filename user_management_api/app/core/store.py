"""
In-memory user storage.

This module replaces a database with a dictionary keyed by user ID.
Nothing survives a restart.  Identifiers are handed out by a
monotonic counter and are never reused, even after the user that held
one has been deleted.

All methods take the store's re-entrant lock.  A caller that needs to
check something and then write (for example an email uniqueness check
followed by ``save``) should wrap the sequence in ``transaction()``.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass
class User:
    """A stored user record.  ``id`` is 0 until the store assigns one."""

    id: int
    name: str
    email: str
    age: int


class InMemoryUserStore:
    """Key-value map from user ID to ``User`` with ID assignment."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        # Dicts keep insertion order, which is the order ``find_all`` returns.
        self._users: Dict[int, User] = {}
        self._next_id = 1

    @contextmanager
    def transaction(self) -> Iterator["InMemoryUserStore"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self

    def find_all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str, exclude_id: Optional[int] = None) -> Optional[User]:
        """Return the first user with ``email``, skipping ``exclude_id``.

        This is a linear scan over all stored users.
        """
        with self._lock:
            for user in self._users.values():
                if user.id != exclude_id and user.email == email:
                    return user
            return None

    def save(self, user: User) -> User:
        """Insert or replace ``user``.

        A user with ``id == 0`` receives the next identifier from the
        counter.  The stored object is returned.
        """
        with self._lock:
            if user.id == 0:
                user.id = self._next_id
                self._next_id += 1
            elif user.id >= self._next_id:
                # Explicit IDs must not be handed out again later.
                self._next_id = user.id + 1
            self._users[user.id] = user
            return user

    def delete_by_id(self, user_id: int) -> None:
        """Remove a user.  Missing IDs are ignored."""
        with self._lock:
            self._users.pop(user_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def __len__(self) -> int:
        return self.count()
