"""Environment configuration for userdir."""

from __future__ import annotations

import os
from pathlib import Path

DATA_FILE_ENV = "USER_DATA_FILE"
DEFAULT_DATA_FILE = "userdata.json"

LOG_LEVEL_ENV = "USERDIR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def data_file() -> Path:
    """Return the JSON data file path, honouring USER_DATA_FILE."""
    return Path(os.environ.get(DATA_FILE_ENV) or DEFAULT_DATA_FILE)


def log_level() -> str:
    """Return the configured log level name."""
    return (os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()


def dotenv_path() -> Path:
    """Path of the optional .env file read at startup."""
    return Path.cwd() / ".env"
