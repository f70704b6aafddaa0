"""Permissive boolean parsing for frontmatter values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

DEFAULT_TRUTHY: tuple[str, ...] = ("true", "1", "yes", "on")
DEFAULT_FALSY: tuple[str, ...] = ("false", "0", "no", "off")


def parse_boolean_value(
    value: Any,
    *,
    truthy: Iterable[str] = DEFAULT_TRUTHY,
    falsy: Iterable[str] = DEFAULT_FALSY,
) -> bool | None:
    """Interpret common truthy/falsy tokens.

    Booleans pass through unchanged. Strings are trimmed and lower-cased
    before matching. Anything else, including unknown tokens, yields None.
    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    if not normalized:
        return None
    if normalized in set(truthy):
        return True
    if normalized in set(falsy):
        return False
    return None
