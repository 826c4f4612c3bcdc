"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used exclusively by
``__post_init__`` methods in sibling model modules to enforce runtime
type constraints before an instance escapes its constructor.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def validate_timestamp(value: Any, name: str) -> None:
    """Raise if *value* is not a non-negative ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def validate_kind(value: Any, name: str, maximum: int) -> None:
    """Raise if *value* is not an ``int`` in ``[0, maximum]``."""
    validate_timestamp(value, name)
    if value > maximum:
        raise ValueError(f"{name} must be <= {maximum}, got {value}")


def validate_str_no_null(value: Any, name: str) -> None:
    """Raise if *value* is not a ``str`` or contains null bytes."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")


def freeze_tags(value: Any, name: str) -> tuple[tuple[str, ...], ...]:
    """Convert an iterable of tag sequences into a tuple of string tuples.

    Raises:
        TypeError: If *value* or any tag is a bare string, or a tag value
            is not a string.
    """
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise TypeError(f"{name} must be a sequence of tags, got {type(value).__name__}")

    frozen: list[tuple[str, ...]] = []
    for tag in value:
        if isinstance(tag, str) or not isinstance(tag, Iterable):
            raise TypeError(f"{name} entries must be sequences, got {type(tag).__name__}")
        items = tuple(tag)
        for item in items:
            validate_str_no_null(item, name)
        frozen.append(items)
    return tuple(frozen)
