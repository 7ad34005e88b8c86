"""Telemetry subpackage (lightweight).

Exposes the shared logger factory used across envaccess.
"""

from .logging import get_logger

__all__ = [
    "get_logger",
]
