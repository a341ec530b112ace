"""
Business logic for users.

``UserService`` enforces the two business rules of the API: every
email belongs to at most one user, and operations on a specific user
require that user to exist.  It works on the ``InMemoryUserStore`` it
is given; there is no module-level store.

Expected failures are returned, not raised.  Each method returns
either its result or a ``ServiceError`` variant (``UserNotFound`` or
``EmailAlreadyExists``), and callers check with ``isinstance``.
"""

import logging
from typing import List, Optional, Union

from user_management_api.app.core.errors import EmailAlreadyExists, UserNotFound
from user_management_api.app.core.store import InMemoryUserStore, User
from user_management_api.app.schemas.user import UserCreate, UserPartialUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users on top of an in-memory store."""

    def __init__(self, store: InMemoryUserStore) -> None:
        self.store = store

    def _email_taken(self, email: Optional[str], user_id: Optional[int] = None) -> Optional[EmailAlreadyExists]:
        """Return ``EmailAlreadyExists`` if another user owns ``email``.

        ``user_id`` is the user being updated; its own current email
        does not count as a collision.
        """
        if email is None:
            return None
        if self.store.find_by_email(email, exclude_id=user_id) is not None:
            logger.warning("Email %s is already registered", email)
            return EmailAlreadyExists(email)
        return None

    def get_all_users(self) -> List[User]:
        return self.store.find_all()

    def get_user_by_id(self, user_id: int) -> Union[User, UserNotFound]:
        user = self.store.find_by_id(user_id)
        if user is None:
            return UserNotFound(user_id)
        return user

    def create_user(self, data: UserCreate) -> Union[User, EmailAlreadyExists]:
        """Register a new user.

        The store assigns the ID.  Fails with ``EmailAlreadyExists`` if
        any stored user already has the requested email.
        """
        with self.store.transaction():
            conflict = self._email_taken(data.email)
            if conflict is not None:
                return conflict
            user = self.store.save(User(id=0, name=data.name, email=data.email, age=data.age))
        logger.info("Created user %s (%s)", user.id, user.email)
        return user

    def update_user(self, user_id: int, data: UserCreate) -> Union[User, UserNotFound, EmailAlreadyExists]:
        """Replace name, email and age of an existing user.

        The email check runs before the existence check, so a request
        for a missing user with a taken email reports the email.
        """
        with self.store.transaction():
            conflict = self._email_taken(data.email, user_id)
            if conflict is not None:
                return conflict
            user = self.store.find_by_id(user_id)
            if user is None:
                return UserNotFound(user_id)
            user.name = data.name
            user.email = data.email
            user.age = data.age
            user = self.store.save(user)
        logger.info("Updated user %s", user_id)
        return user

    def partial_update_user(
        self, user_id: int, data: UserPartialUpdate
    ) -> Union[User, UserNotFound, EmailAlreadyExists]:
        """Apply only the fields present in ``data``.

        Fields that were not supplied keep their current values.
        """
        changes = data.changes()
        with self.store.transaction():
            conflict = self._email_taken(changes.get("email"), user_id)
            if conflict is not None:
                return conflict
            user = self.store.find_by_id(user_id)
            if user is None:
                return UserNotFound(user_id)
            for field, value in changes.items():
                setattr(user, field, value)
            user = self.store.save(user)
        logger.info("Partially updated user %s: %s", user_id, sorted(changes))
        return user

    def delete_user(self, user_id: int) -> Optional[UserNotFound]:
        """Delete a user.  Returns ``UserNotFound`` if there is no such user."""
        with self.store.transaction():
            if self.store.find_by_id(user_id) is None:
                return UserNotFound(user_id)
            self.store.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
        return None
