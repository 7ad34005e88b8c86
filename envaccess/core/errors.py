"""Common exceptions for envaccess library."""
from __future__ import annotations


class EnvAccessError(Exception):
    pass


class MissingVariableError(EnvAccessError, KeyError):
    """A variable the caller requires is not bound."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"environment variable {self.key!r} is not set"


class InvalidValueError(EnvAccessError, ValueError):
    """A bound value is not valid text in the platform encoding."""

    def __init__(self, key: str, reason: str = "") -> None:
        super().__init__(key, reason)
        self.key = key
        self.reason = reason

    def __str__(self) -> str:
        msg = f"environment variable {self.key!r} is not valid text"
        return f"{msg}: {self.reason}" if self.reason else msg
