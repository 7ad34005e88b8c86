"""Scoped environment changes with guaranteed restore.

The process environment has no lifecycle of its own, so code that needs a
temporary binding (tests in particular) records the prior state of the
affected keys and puts it back on exit, whether or not the block raised.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from .environment import EnvironmentAccessor, default_accessor


@contextmanager
def preserved(*keys: str, accessor: EnvironmentAccessor | None = None) -> Iterator[EnvironmentAccessor]:
    """Restore ``keys`` to their entry state (bound value or unbound) on exit."""
    acc = accessor if accessor is not None else default_accessor()
    original: Dict[str, Optional[str]] = {key: acc.backend.get(key) for key in keys}
    try:
        yield acc
    finally:
        for key, value in original.items():
            if value is None:
                acc.remove(key)
            else:
                acc.set(key, value)


@contextmanager
def patched(
    overrides: Mapping[str, Optional[str]],
    accessor: EnvironmentAccessor | None = None,
) -> Iterator[EnvironmentAccessor]:
    """Apply ``overrides`` for the duration of the block.

    A ``str`` value binds the key, ``None`` unbinds it.
    """
    with preserved(*overrides, accessor=accessor) as acc:
        for key, value in overrides.items():
            if value is None:
                acc.remove(key)
            else:
                acc.set(key, value)
        yield acc
