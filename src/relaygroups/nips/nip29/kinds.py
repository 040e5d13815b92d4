"""NIP-29 event kind classification.

Predicates over the sorted kind tables in
[relaygroups.models.constants][]. Membership is tested with binary search
over discrete codes; the moderation range has reserved gaps (9003, 9004,
9006), so a numeric range check would misclassify them.

Kinds may be passed as plain ``int`` codes or as ``nostr_sdk.Kind``.

Examples:
    ```python
    is_group_moderation(9005)          # True
    is_group_moderation(9006)          # False (reserved)
    is_group_metadata(Kind(39002))     # True
    is_group_event(9021)               # True
    ```
"""

from __future__ import annotations

from bisect import bisect_left

from nostr_sdk import Kind

from relaygroups.models.constants import (
    EVENT_KIND_MAX,
    NIP29_METADATA_KINDS,
    NIP29_MODERATION_KINDS,
    NIP29_USER_KINDS,
)


def _kind_code(kind: int | Kind) -> int | None:
    """Return the numeric code of *kind*, or ``None`` if it cannot be a kind."""
    if isinstance(kind, Kind):
        return kind.as_u16()
    if isinstance(kind, bool):
        return None
    if not isinstance(kind, int):
        raise TypeError(f"kind must be an int or Kind, got {type(kind).__name__}")
    if not 0 <= kind <= EVENT_KIND_MAX:
        return None
    return kind


def _in_table(table: tuple[int, ...], kind: int | Kind) -> bool:
    code = _kind_code(kind)
    if code is None:
        return False
    index = bisect_left(table, code)
    return index < len(table) and table[index] == code


def is_group_moderation(kind: int | Kind) -> bool:
    """Return ``True`` for moderation kinds 9000-9009, except reserved 9003, 9004, 9006."""
    return _in_table(NIP29_MODERATION_KINDS, kind)


def is_group_metadata(kind: int | Kind) -> bool:
    """Return ``True`` for the addressable metadata kinds 39000-39003."""
    return _in_table(NIP29_METADATA_KINDS, kind)


def is_group_user_request(kind: int | Kind) -> bool:
    """Return ``True`` for the user-initiated join (9021) and leave (9022) requests."""
    return _in_table(NIP29_USER_KINDS, kind)


def is_group_event(kind: int | Kind) -> bool:
    """Return ``True`` for any NIP-29 moderation, metadata, or user request kind."""
    return is_group_moderation(kind) or is_group_metadata(kind) or is_group_user_request(kind)
