"""Validation functions for user records."""

from __future__ import annotations

import re

from .errors import InvalidAge, InvalidAgeFormat, InvalidEmail, InvalidPhone, InvalidUsername

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"[0-9]{10,}")
AGE_PATTERN = re.compile(r"\+?[0-9]+")

MIN_USERNAME_LENGTH = 3
MAX_AGE = 150
# Largest value the age argument may hold (unsigned 32-bit)
MAX_AGE_INPUT = 2**32 - 1


def validate_email(email: str) -> None:
    """Validate email address syntax.

    Rules:
    - Local part of letters, digits and ``._%+-``
    - A single '@' followed by a domain of letters, digits, dots and hyphens
    - Top-level label of at least two letters

    No DNS or deliverability check is made.
    """
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidEmail(f"Invalid email format: {email}")


def validate_username(username: str) -> None:
    """Validate that the username, trimmed, has at least 3 characters."""
    if len(username.strip()) < MIN_USERNAME_LENGTH:
        raise InvalidUsername(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
        )


def validate_phone(phone: str) -> None:
    """Validate phone number format.

    Rules:
    - ASCII digits only, no separators or '+' prefix
    - At least 10 digits, no upper bound
    """
    if not PHONE_PATTERN.fullmatch(phone):
        raise InvalidPhone("Phone number must be at least 10 digits")


def validate_age(age: int) -> None:
    """Validate that age is an integer between 0 and 150."""
    if isinstance(age, bool) or not isinstance(age, int) or not 0 <= age <= MAX_AGE:
        raise InvalidAge(f"Age must be between 0 and {MAX_AGE}")


def parse_age(text: str) -> int:
    """Parse a command-line age argument as an unsigned integer.

    This only checks the format; range checks belong to validate_age.
    """
    if not AGE_PATTERN.fullmatch(text):
        raise InvalidAgeFormat("Invalid age format")
    age = int(text)
    if age > MAX_AGE_INPUT:
        raise InvalidAgeFormat("Invalid age format")
    return age
