"""User directory core: records, validation, persistence and the service."""

from .errors import (
    InvalidAge,
    InvalidAgeFormat,
    InvalidEmail,
    InvalidPhone,
    InvalidUsername,
    RepositoryError,
    StorageError,
    UserAlreadyExists,
    UserDirectoryError,
    UserNotFound,
    ValidationError,
)
from .models import User
from .service import UserService
from .store import InMemoryUserStore, JsonFileUserStore, UserStore

__all__ = [
    "User",
    "UserService",
    "UserStore",
    "JsonFileUserStore",
    "InMemoryUserStore",
    "UserDirectoryError",
    "ValidationError",
    "InvalidEmail",
    "InvalidUsername",
    "InvalidPhone",
    "InvalidAge",
    "InvalidAgeFormat",
    "UserNotFound",
    "UserAlreadyExists",
    "RepositoryError",
    "StorageError",
]
