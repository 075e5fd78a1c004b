"""Exceptions raised by the user directory."""

from __future__ import annotations


class UserDirectoryError(Exception):
    """Base class for every error the directory service reports."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UserDirectoryError):
    """Input rejected before any storage access."""


class InvalidEmail(ValidationError):
    pass


class InvalidUsername(ValidationError):
    pass


class InvalidPhone(ValidationError):
    pass


class InvalidAge(ValidationError):
    pass


class InvalidAgeFormat(ValidationError):
    """The age argument could not be parsed as an unsigned integer."""


class UserNotFound(UserDirectoryError):
    pass


class UserAlreadyExists(UserDirectoryError):
    pass


class RepositoryError(UserDirectoryError):
    """A storage failure surfaced by the service."""


class StorageError(Exception):
    """File I/O or JSON (de)serialization failure inside a store."""
