"""Shared validation helpers for frozen dataclass models.

Private module -- not part of the public API. Used by ``__post_init__``
methods in sibling model modules to enforce runtime type constraints and
the NIP-29 group id alphabet.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from relaygroups.core.exceptions import InvalidGroupIdError

from .constants import GROUP_ID_PATTERN


_GROUP_ID_RE = re.compile(GROUP_ID_PATTERN)


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_optional_instance(value: Any, expected: type, name: str) -> None:
    """Like [validate_instance][relaygroups.models._validation.validate_instance], allowing ``None``."""
    if value is not None:
        validate_instance(value, expected, name)


def validate_group_id(value: Any) -> str:
    """Check a bare group id against ``^[a-z0-9_-]+$`` and return it.

    Raises:
        TypeError: If *value* is not a ``str``.
        InvalidGroupIdError: If *value* is empty or has a disallowed character.
    """
    validate_instance(value, str, "id")
    if not value:
        raise InvalidGroupIdError("Group ID cannot be empty")
    if _GROUP_ID_RE.fullmatch(value) is None:
        raise InvalidGroupIdError("Group ID must contain only: a-z, 0-9, -, _")
    return value


def freeze_items(items: Iterable[Any], expected: type, name: str) -> tuple[Any, ...]:
    """Copy *items* into a tuple, checking each element's type.

    Strings are rejected as the iterable itself, since iterating one would
    silently split it into characters.
    """
    if isinstance(items, (str, bytes)):
        raise TypeError(f"{name} must be an iterable of {expected.__name__}, got {type(items).__name__}")
    frozen = tuple(items)
    for index, item in enumerate(frozen):
        validate_instance(item, expected, f"{name}[{index}]")
    return frozen
