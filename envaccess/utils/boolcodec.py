"""Boolean string codec.

Canonical encoding is ``"true"``/``"false"``. Decoding accepts a small set of
truthy spellings (case and surrounding whitespace ignored); anything else,
including unrecognized text, decodes to ``False``.
"""
from __future__ import annotations

TRUE_STRING = "true"
FALSE_STRING = "false"
TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})


def bool_to_string(value: bool) -> str:
    return TRUE_STRING if value else FALSE_STRING


def string_to_bool(value: str) -> bool:
    return value.strip().lower() in TRUTHY_STRINGS
