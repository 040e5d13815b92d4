"""NIP-29 event builders for relay-based groups.

Standalone functions that wrap group facts in unsigned
``nostr_sdk.EventBuilder`` instances. Signing, ID computation, and relay
transport stay with the caller (``builder.sign_with_keys(keys)`` and a
``nostr_sdk.Client``).

Regular group events carry the bare group id in an ``h`` tag; the
addressable 39000-series events carry it in a ``d`` tag. The group's tag
comes first, followed by the codec output from
[relaygroups.nips.nip29.tags][] in codec order.

Examples:
    ```python
    group = GroupId(Url("wss://relay.example.com"), "rust-devs")
    metadata = GroupMetadata(name="Rust Developers", closed=AccessModel.CLOSED)

    event = build_group_create(group, metadata).sign_with_keys(keys)
    ```

See Also:
    [relaygroups.nips.nip29.kinds][]: Classifies the kinds produced here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from nostr_sdk import EventBuilder, Kind, Tag

from relaygroups.models.constants import GroupEventKind

from .tags import GroupTag, admins_tags, make_tag, members_tags, metadata_tags, roles_tags


if TYPE_CHECKING:
    from nostr_sdk import EventId, PublicKey

    from relaygroups.models.group import GroupAdmins, GroupMembers, GroupMetadata, GroupRoles
    from relaygroups.models.group_id import GroupId


logger = logging.getLogger("relaygroups.nips.nip29")

_PREVIOUS_ID_LENGTH = 8


# =============================================================================
# Helpers
# =============================================================================


def _group_tag(group: GroupId) -> Tag:
    return make_tag(GroupTag.GROUP, group.id)


def _build(
    kind: GroupEventKind,
    group: GroupId,
    tags: list[Tag],
    content: str = "",
) -> EventBuilder:
    logger.debug(
        "group_event_built kind=%s group=%s tags=%s", int(kind), group.to_canonical_string(), len(tags)
    )
    return EventBuilder(Kind(kind), content).tags(tags)


def _regular(
    kind: GroupEventKind,
    group: GroupId,
    extra: Iterable[Tag] = (),
    content: str = "",
) -> EventBuilder:
    return _build(kind, group, [_group_tag(group), *extra], content)


def _addressable(kind: GroupEventKind, group: GroupId, extra: Iterable[Tag]) -> EventBuilder:
    return _build(kind, group, [Tag.identifier(group.id), *extra])


# =============================================================================
# Moderation (9000-9009)
# =============================================================================


def build_group_put_user(
    group: GroupId, public_key: PublicKey, roles: Sequence[str] = ()
) -> EventBuilder:
    """Build a Kind 9000 event adding *public_key* with *roles* in one ``p`` tag."""
    return _regular(
        GroupEventKind.PUT_USER,
        group,
        [make_tag(GroupTag.PUBLIC_KEY, public_key.to_hex(), *roles)],
    )


def build_group_remove_user(group: GroupId, public_key: PublicKey) -> EventBuilder:
    """Build a Kind 9001 event removing *public_key* from the group."""
    return _regular(GroupEventKind.REMOVE_USER, group, [Tag.public_key(public_key)])


def build_group_edit_metadata(group: GroupId, metadata: GroupMetadata) -> EventBuilder:
    """Build a Kind 9002 event replacing the group's metadata."""
    return _regular(GroupEventKind.EDIT_METADATA, group, metadata_tags(metadata))


def build_group_delete_event(group: GroupId, event_id: EventId) -> EventBuilder:
    """Build a Kind 9005 event asking the relay to delete *event_id*."""
    return _regular(
        GroupEventKind.DELETE_EVENT, group, [make_tag(GroupTag.EVENT, event_id.to_hex())]
    )


def build_group_create(group: GroupId, metadata: GroupMetadata) -> EventBuilder:
    """Build a Kind 9007 event creating the group with initial *metadata*."""
    return _regular(GroupEventKind.CREATE_GROUP, group, metadata_tags(metadata))


def build_group_delete(group: GroupId) -> EventBuilder:
    """Build a Kind 9008 event deleting the group."""
    return _regular(GroupEventKind.DELETE_GROUP, group)


def build_group_create_invite(group: GroupId, code: str | None = None) -> EventBuilder:
    """Build a Kind 9009 invite event, with a ``code`` tag when *code* is given."""
    extra = [make_tag(GroupTag.CODE, code)] if code is not None else []
    return _regular(GroupEventKind.CREATE_INVITE, group, extra)


# =============================================================================
# User requests (9021-9022)
# =============================================================================


def build_group_join_request(
    group: GroupId, reason: str | None = None, code: str | None = None
) -> EventBuilder:
    """Build a Kind 9021 join request; *reason* becomes the content."""
    extra = [make_tag(GroupTag.CODE, code)] if code is not None else []
    return _regular(GroupEventKind.JOIN_REQUEST, group, extra, reason or "")


def build_group_leave_request(group: GroupId, reason: str | None = None) -> EventBuilder:
    """Build a Kind 9022 leave request; *reason* becomes the content."""
    return _regular(GroupEventKind.LEAVE_REQUEST, group, content=reason or "")


# =============================================================================
# Chat (9)
# =============================================================================


def build_group_message(
    group: GroupId, content: str, previous: Sequence[EventId] = ()
) -> EventBuilder:
    """Build a Kind 9 chat message.

    When *previous* is non-empty, a single ``previous`` tag lists the first
    eight hex characters of each referenced event id, in the given order.
    """
    extra: list[Tag] = []
    if previous:
        short_ids = [event_id.to_hex()[:_PREVIOUS_ID_LENGTH] for event_id in previous]
        extra.append(make_tag(GroupTag.PREVIOUS, *short_ids))
    return _regular(GroupEventKind.CHAT_MESSAGE, group, extra, content)


# =============================================================================
# Addressable metadata (39000-39003)
# =============================================================================


def build_group_metadata(group: GroupId, metadata: GroupMetadata) -> EventBuilder:
    """Build a Kind 39000 group metadata event."""
    return _addressable(GroupEventKind.GROUP_METADATA, group, metadata_tags(metadata))


def build_group_admins(group: GroupId, admins: GroupAdmins) -> EventBuilder:
    """Build a Kind 39001 admins list event."""
    return _addressable(GroupEventKind.GROUP_ADMINS, group, admins_tags(admins))


def build_group_members(group: GroupId, members: GroupMembers) -> EventBuilder:
    """Build a Kind 39002 members list event."""
    return _addressable(GroupEventKind.GROUP_MEMBERS, group, members_tags(members))


def build_group_roles(group: GroupId, roles: GroupRoles) -> EventBuilder:
    """Build a Kind 39003 roles definition event."""
    return _addressable(GroupEventKind.GROUP_ROLES, group, roles_tags(roles))


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "build_group_admins",
    "build_group_create",
    "build_group_create_invite",
    "build_group_delete",
    "build_group_delete_event",
    "build_group_edit_metadata",
    "build_group_join_request",
    "build_group_leave_request",
    "build_group_members",
    "build_group_message",
    "build_group_metadata",
    "build_group_put_user",
    "build_group_remove_user",
    "build_group_roles",
]
