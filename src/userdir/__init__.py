"""userdir - a JSON-backed user directory on the command line."""

__version__ = "0.1.0"
