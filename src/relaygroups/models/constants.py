"""Shared constants for the models layer.

Defines the NIP-29 event kind catalog, the sorted kind tables consulted by
[relaygroups.nips.nip29.kinds][], and the group id rules.

The kind tables are tuples checked at import time: they must be strictly
ascending because membership is tested with binary search. An unsorted
table would silently misclassify kinds, so it fails the import instead.

See Also:
    [relaygroups.nips.nip29.kinds][]: Classification predicates over these tables.
    [GroupId][relaygroups.models.group_id.GroupId]: Enforces ``GROUP_ID_PATTERN``.
"""

from __future__ import annotations

from enum import IntEnum


class GroupEventKind(IntEnum):
    """NIP-29 event kinds.

    Attributes:
        CHAT_MESSAGE: Kind 9 -- group chat message. Not a group control event,
            so it is absent from every classification table.
        PUT_USER: Kind 9000 -- add or update a user with roles (moderation).
        REMOVE_USER: Kind 9001 -- remove a user (moderation).
        EDIT_METADATA: Kind 9002 -- edit group metadata (moderation).
        DELETE_EVENT: Kind 9005 -- delete an event (moderation).
        CREATE_GROUP: Kind 9007 -- create a group (moderation).
        DELETE_GROUP: Kind 9008 -- delete a group (moderation).
        CREATE_INVITE: Kind 9009 -- create an invite code (moderation).
        JOIN_REQUEST: Kind 9021 -- user join request.
        LEAVE_REQUEST: Kind 9022 -- user leave request.
        GROUP_METADATA: Kind 39000 -- group metadata (addressable).
        GROUP_ADMINS: Kind 39001 -- admins list (addressable).
        GROUP_MEMBERS: Kind 39002 -- members list (addressable).
        GROUP_ROLES: Kind 39003 -- roles definition (addressable).

    Note:
        Kinds 9003, 9004 and 9006 are reserved and deliberately have no member.
    """

    CHAT_MESSAGE = 9
    PUT_USER = 9_000
    REMOVE_USER = 9_001
    EDIT_METADATA = 9_002
    DELETE_EVENT = 9_005
    CREATE_GROUP = 9_007
    DELETE_GROUP = 9_008
    CREATE_INVITE = 9_009
    JOIN_REQUEST = 9_021
    LEAVE_REQUEST = 9_022
    GROUP_METADATA = 39_000
    GROUP_ADMINS = 39_001
    GROUP_MEMBERS = 39_002
    GROUP_ROLES = 39_003


def _sorted_kinds(name: str, *kinds: int) -> tuple[int, ...]:
    """Return *kinds* as a tuple, raising if it is not strictly ascending."""
    for previous, current in zip(kinds, kinds[1:], strict=False):
        if previous >= current:
            raise ValueError(f"{name} must be strictly ascending: {previous} >= {current}")
    return tuple(int(kind) for kind in kinds)


NIP29_MODERATION_KINDS: tuple[int, ...] = _sorted_kinds(
    "NIP29_MODERATION_KINDS",
    GroupEventKind.PUT_USER,
    GroupEventKind.REMOVE_USER,
    GroupEventKind.EDIT_METADATA,
    GroupEventKind.DELETE_EVENT,
    GroupEventKind.CREATE_GROUP,
    GroupEventKind.DELETE_GROUP,
    GroupEventKind.CREATE_INVITE,
)

NIP29_METADATA_KINDS: tuple[int, ...] = _sorted_kinds(
    "NIP29_METADATA_KINDS",
    GroupEventKind.GROUP_METADATA,
    GroupEventKind.GROUP_ADMINS,
    GroupEventKind.GROUP_MEMBERS,
    GroupEventKind.GROUP_ROLES,
)

NIP29_USER_KINDS: tuple[int, ...] = _sorted_kinds(
    "NIP29_USER_KINDS",
    GroupEventKind.JOIN_REQUEST,
    GroupEventKind.LEAVE_REQUEST,
)

EVENT_KIND_MAX = 65_535

TOP_LEVEL_GROUP_ID = "_"
"""Group id reserved for relay-local, top-level discussion."""

GROUP_ID_PATTERN = r"[a-z0-9_-]+"
"""Allowed group id alphabet, matched against the whole id."""

GROUP_ID_DELIMITER = "'"
"""Separator between relay URL and group id in the canonical identifier."""
