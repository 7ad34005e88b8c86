"""Environment storage backends.

All accessor operations go through a narrow ``EnvBackend`` interface so that
call sites never touch ``os.environ`` directly, and tests can swap in an
in-memory store instead of mutating the real process environment.

- ``OsEnvironBackend``: the live process environment block (process-global,
  inherited by child processes, no locking).
- ``MemoryBackend``: a private dict; each instance is independent.
"""
from __future__ import annotations

import os
from typing import Mapping, Protocol


class EnvBackend(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def items(self) -> list[tuple[str, str]]: ...


class OsEnvironBackend:
    """Backend over ``os.environ``.

    Invalid keys or values (embedded NUL, ``=`` in a key on POSIX) raise
    whatever ``os.environ`` raises; nothing is wrapped here.
    """

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def remove(self, key: str) -> None:
        os.environ.pop(key, None)

    def items(self) -> list[tuple[str, str]]:
        return list(os.environ.items())

    def __repr__(self) -> str:
        return "OsEnvironBackend()"


class MemoryBackend:
    """In-memory backend for tests and sandboxed lookups."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str) -> str | None:
        return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        # Same contract as os.environ: str keys and values only.
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"str expected, not {type(key).__name__}/{type(value).__name__}"
            )
        self._vars[key] = value

    def remove(self, key: str) -> None:
        self._vars.pop(key, None)

    def items(self) -> list[tuple[str, str]]:
        return list(self._vars.items())

    def copy(self) -> "MemoryBackend":
        return MemoryBackend(initial=self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"MemoryBackend({len(self._vars)} vars)"
