"""Persistence of user records.

The JSON store keeps every record in a single document mapping email to
record. Each mutation reads the whole document, changes one entry and writes
the whole document back. Writes replace the file atomically through a
temporary file in the same directory, but nothing is locked: two processes
mutating the same file concurrently can race and the later write wins.
Run one process at a time against a given file.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from .errors import StorageError
from .models import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Key-value persistence of users keyed by email."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Insert or overwrite the record stored under ``user.email``."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the record stored under ``email``, or None."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored record, in no particular order."""

    @abstractmethod
    def delete(self, email: str) -> bool:
        """Remove the record under ``email``; return whether it existed."""


class JsonFileUserStore(UserStore):
    """User store backed by one pretty-printed JSON file.

    A missing or zero-byte file reads as an empty directory. Any other
    content that is not a JSON object of valid records raises StorageError.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def _read_users(self) -> dict[str, User]:
        """Load the full record set from disk."""
        if not self.path.exists():
            logger.debug("Data file %s does not exist, starting empty", self.path)
            return {}

        try:
            with self.path.open(encoding="utf-8") as fh:
                content = fh.read()
        except UnicodeDecodeError as e:
            raise StorageError(f"Failed to parse JSON: file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read file: {e}") from e

        if not content:
            return {}

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to parse JSON: {e}") from e

        if not isinstance(raw, dict):
            raise StorageError(
                f"Failed to parse JSON: expected an object, got {type(raw).__name__}"
            )

        users = {}
        for email, entry in raw.items():
            if not isinstance(entry, dict):
                raise StorageError(f"Failed to parse JSON: entry for {email} is not an object")
            try:
                users[email] = User.from_dict(entry)
            except (KeyError, ValueError) as e:
                raise StorageError(f"Failed to parse JSON: invalid entry for {email}: {e}") from e
        return users

    def _write_users(self, users: dict[str, User]) -> None:
        """Serialize the full record set and atomically replace the file."""
        try:
            content = json.dumps(
                {email: user.to_dict() for email, user in users.items()},
                ensure_ascii=False,
                indent=2,
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to serialize JSON: {e}") from e

        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                delete=False,
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as fh:
                tmp = Path(fh.name)
                fh.write(content)
            # Temp files are created 0600; keep the existing file's permissions
            if self.path.exists():
                os.chmod(tmp, stat.S_IMODE(self.path.stat().st_mode))
            tmp.replace(self.path)
        except OSError as e:
            raise StorageError(f"Failed to write file: {e}") from e
        finally:
            if tmp is not None and tmp.exists():
                tmp.unlink(missing_ok=True)
        logger.debug("Wrote %d user(s) to %s", len(users), self.path)

    def save(self, user: User) -> None:
        users = self._read_users()
        users[user.email] = user
        self._write_users(users)

    def find_by_email(self, email: str) -> User | None:
        return self._read_users().get(email)

    def find_all(self) -> list[User]:
        return list(self._read_users().values())

    def delete(self, email: str) -> bool:
        users = self._read_users()
        existed = users.pop(email, None) is not None
        self._write_users(users)
        return existed


class InMemoryUserStore(UserStore):
    """Dict-backed store with the same semantics, for tests and dry runs."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[str, dict] = {}
        for user in users or []:
            self._users[user.email] = user.to_dict()

    def save(self, user: User) -> None:
        self._users[user.email] = user.to_dict()

    def find_by_email(self, email: str) -> User | None:
        data = self._users.get(email)
        return User.from_dict(data) if data is not None else None

    def find_all(self) -> list[User]:
        return [User.from_dict(data) for data in self._users.values()]

    def delete(self, email: str) -> bool:
        return self._users.pop(email, None) is not None
