"""Process environment accessors.

Typed, default-safe helpers over environment variables. Every read
distinguishes "unbound" from "bound to an empty/falsy value" by returning
``None`` or requiring an explicit default.

Module-level functions operate on the real process environment through a
shared default accessor; construct an ``EnvironmentAccessor`` with another
backend (e.g. ``MemoryBackend``) for isolated use.

No locking is done. ``get_set`` and ``get_remove`` are read-then-write and
may interleave with concurrent writers of the same key; ``vars`` snapshots
have no isolation from concurrent mutation.
"""
from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Tuple

from .backends import EnvBackend, OsEnvironBackend
from .core.errors import InvalidValueError, MissingVariableError
from .telemetry.logging import get_logger
from .utils.boolcodec import bool_to_string, string_to_bool

DEFAULT_SEPARATOR = ";"


class EnvironmentAccessor:
    def __init__(self, backend: EnvBackend | None = None) -> None:
        self.backend: EnvBackend = backend if backend is not None else OsEnvironBackend()
        self._logger = None

    @property
    def _log(self):  # noqa: ANN202
        # Resolved on first log call so importing or constructing never configures logging.
        if self._logger is None:
            self._logger = get_logger(__name__, {"backend": self.backend})
        return self._logger

    def __repr__(self) -> str:
        return f"EnvironmentAccessor({self.backend!r})"

    # -- presence / removal -------------------------------------------------

    def exists(self, key: str) -> bool:
        return self.backend.get(key) is not None

    def remove(self, key: str) -> None:
        self.backend.remove(key)
        self._log.debug("removed %s", key)

    def get_remove(self, key: str) -> Optional[str]:
        """Return the current value (or None), then unbind ``key``."""
        pre_value = self.backend.get(key)
        self.remove(key)
        return pre_value

    # -- reads ---------------------------------------------------------------

    def get_or(self, key: str, default: str) -> str:
        value = self.backend.get(key)
        return default if value is None else value

    def get_or_panic(self, key: str) -> str:
        """Return the value of a variable the caller requires.

        Raises:
            MissingVariableError: ``key`` is unbound.
            InvalidValueError: the value holds bytes that are not valid in the
                filesystem encoding (surrogate-escaped by ``os.environ``).

        Neither is meant to be caught; absence here is a misconfiguration.
        """
        value = self.backend.get(key)
        if value is None:
            self._log.error("required variable %s is not set", key)
            raise MissingVariableError(key)
        try:
            value.encode(sys.getfilesystemencoding())
        except UnicodeEncodeError as exc:
            self._log.error("required variable %s is not valid text", key)
            raise InvalidValueError(key, exc.reason) from exc
        return value

    def is_or(self, key: str, default: bool) -> bool:
        value = self.backend.get(key)
        if value is None:
            return default
        return string_to_bool(value)

    def is_(self, key: str) -> bool:
        return self.is_or(key, False)

    def is_equal(self, key: str, value: str) -> bool:
        current = self.backend.get(key)
        return current is not None and current == value

    def vars(self) -> List[Tuple[str, str]]:
        """Snapshot of all bound (key, value) pairs, in backend order."""
        return list(self.backend.items())

    # -- writes --------------------------------------------------------------

    def set(self, key: str, value: str) -> None:
        self.backend.set(key, value)
        self._log.debug("set %s", key)

    def set_bool(self, key: str, value: bool) -> None:
        self.set(key, bool_to_string(value))

    def set_optional(self, key: str, value: Optional[str]) -> bool:
        """Bind ``value`` if given; report whether a write happened."""
        if value is None:
            return False
        self.set(key, value)
        return True

    def get_set(self, key: str, value: str) -> Optional[str]:
        """Swap: return the prior value (or None) and bind the new one."""
        pre_value = self.backend.get(key)
        self.set(key, value)
        return pre_value

    # -- lists ---------------------------------------------------------------

    def set_list(self, key: str, values: Iterable[str]) -> None:
        self.set_list_with_separator(key, values, DEFAULT_SEPARATOR)

    def get_list(self, key: str) -> Optional[List[str]]:
        return self.get_list_with_separator(key, DEFAULT_SEPARATOR)

    def set_list_with_separator(self, key: str, values: Iterable[str], separator: str) -> None:
        # Empty input leaves any existing binding untouched.
        items = list(values)
        if not items:
            return
        self.set(key, separator.join(items))

    def get_list_with_separator(self, key: str, separator: str) -> Optional[List[str]]:
        value = self.backend.get(key)
        if value is None:
            return None
        if not separator:
            # Empty separator splits between every character, bounded by empty ends.
            return ["", *value, ""]
        return value.split(separator)


_DEFAULT: Optional[EnvironmentAccessor] = None


def default_accessor() -> EnvironmentAccessor:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = EnvironmentAccessor()
    return _DEFAULT


def exists(key: str) -> bool:
    return default_accessor().exists(key)


def remove(key: str) -> None:
    default_accessor().remove(key)


def get_remove(key: str) -> Optional[str]:
    return default_accessor().get_remove(key)


def get_or(key: str, default: str) -> str:
    return default_accessor().get_or(key, default)


def get_or_panic(key: str) -> str:
    return default_accessor().get_or_panic(key)


def is_or(key: str, default: bool) -> bool:
    return default_accessor().is_or(key, default)


def is_(key: str) -> bool:
    return default_accessor().is_(key)


def set(key: str, value: str) -> None:  # noqa: A001
    default_accessor().set(key, value)


def set_bool(key: str, value: bool) -> None:
    default_accessor().set_bool(key, value)


def set_optional(key: str, value: Optional[str]) -> bool:
    return default_accessor().set_optional(key, value)


def get_set(key: str, value: str) -> Optional[str]:
    return default_accessor().get_set(key, value)


def vars() -> List[Tuple[str, str]]:  # noqa: A001
    return default_accessor().vars()


def is_equal(key: str, value: str) -> bool:
    return default_accessor().is_equal(key, value)


def set_list(key: str, values: Iterable[str]) -> None:
    default_accessor().set_list(key, values)


def get_list(key: str) -> Optional[List[str]]:
    return default_accessor().get_list(key)


def set_list_with_separator(key: str, values: Iterable[str], separator: str) -> None:
    default_accessor().set_list_with_separator(key, values, separator)


def get_list_with_separator(key: str, separator: str) -> Optional[List[str]]:
    return default_accessor().get_list_with_separator(key, separator)
