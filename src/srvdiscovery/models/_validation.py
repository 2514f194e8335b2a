"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by the ``__post_init__``
methods of sibling model modules to enforce runtime type constraints.
"""

from __future__ import annotations

from typing import Any

from .constants import MAX_PORT


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def validate_str_not_empty(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str`` without null bytes."""
    validate_str_no_null(value, name)
    if not value:
        raise ValueError(f"{name} must not be empty")


def validate_uint(value: Any, name: str, maximum: int) -> None:
    """Raise if *value* is not an ``int`` in ``[0, maximum]`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


def validate_port(value: Any, name: str = "port") -> None:
    """Raise if *value* is not a valid 16-bit port number."""
    validate_uint(value, name, MAX_PORT)
