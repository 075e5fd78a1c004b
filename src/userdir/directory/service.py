"""Directory service: validation and orchestration over a user store."""

from __future__ import annotations

import logging

from .errors import RepositoryError, StorageError, UserAlreadyExists, UserNotFound
from .models import User
from .store import UserStore
from .validators import validate_age, validate_email, validate_phone, validate_username

logger = logging.getLogger(__name__)


class UserService:
    """Create, update, fetch, list and delete users.

    All validation happens here, before the store is touched. The service
    keeps no state of its own; every call goes back to the store.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def _find(self, email: str) -> User | None:
        try:
            return self.store.find_by_email(email)
        except StorageError as e:
            raise RepositoryError(str(e)) from e

    def _save(self, user: User) -> None:
        try:
            self.store.save(user)
        except StorageError as e:
            raise RepositoryError(str(e)) from e

    def create_user(self, email: str, username: str, phone: str, age: int) -> User:
        """Create a new user.

        Fields are checked in the order email, username, phone, age and the
        first failure is raised. Raises UserAlreadyExists if the email is
        taken and RepositoryError if the store fails.
        """
        validate_email(email)
        validate_username(username)
        validate_phone(phone)
        validate_age(age)

        if self._find(email) is not None:
            raise UserAlreadyExists(f"User with email {email} already exists")

        user = User(email=email, username=username, phone=phone, age=age)
        self._save(user)
        logger.info("Created user %s", email)
        return user

    def update_user(self, email: str, username: str, phone: str, age: int) -> User:
        """Replace every field of an existing user.

        The email is the lookup key and is not validated again. Raises
        UserNotFound if no user has that email.
        """
        validate_username(username)
        validate_phone(phone)
        validate_age(age)

        if self._find(email) is None:
            raise UserNotFound(f"User with email {email} not found")

        user = User(email=email, username=username, phone=phone, age=age)
        self._save(user)
        logger.info("Updated user %s", email)
        return user

    def get_user(self, email: str) -> User:
        logger.debug("Looking up user %s", email)
        user = self._find(email)
        if user is None:
            raise UserNotFound(f"User with email {email} not found")
        return user

    def list_users(self) -> list[User]:
        try:
            return self.store.find_all()
        except StorageError as e:
            raise RepositoryError(str(e)) from e

    def delete_user(self, email: str) -> None:
        try:
            existed = self.store.delete(email)
        except StorageError as e:
            raise RepositoryError(str(e)) from e
        if not existed:
            raise UserNotFound(f"User with email {email} not found")
        logger.info("Deleted user %s", email)
