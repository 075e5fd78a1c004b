"""Data models for the user directory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A single user record, keyed by email."""

    email: str
    username: str
    phone: str
    age: int

    @classmethod
    def from_dict(cls, data: dict) -> User:
        """Create a User from a stored JSON object.

        Raises KeyError for a missing field and ValueError for a field of the
        wrong type, so callers can report the entry as malformed.
        """
        age = data["age"]
        if isinstance(age, bool) or not isinstance(age, int) or age < 0:
            raise ValueError(f"age must be a non-negative integer, got {age!r}")
        for name in ("email", "username", "phone"):
            if not isinstance(data[name], str):
                raise ValueError(f"{name} must be a string, got {data[name]!r}")
        return cls(
            email=data["email"],
            username=data["username"],
            phone=data["phone"],
            age=age,
        )

    def to_dict(self) -> dict:
        """Convert User to a dictionary."""
        return {
            "email": self.email,
            "username": self.username,
            "phone": self.phone,
            "age": self.age,
        }
