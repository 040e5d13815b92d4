"""NIP-29 tag codecs: group facts to ordered ``nostr_sdk.Tag`` lists.

Each codec is a pure function of its record. Tag order is part of the
wire contract, since consumers may match tags by position:

* **metadata** -- ``name``, ``description``, ``image`` (each only when set),
  then ``privacy`` and ``closed`` (always). Two to five tags.
* **roles** -- one ``role`` tag per role: ``[name]`` or ``[name, description]``.
* **admins** -- per admin, a ``p`` tag immediately followed by one ``role``
  tag per assigned role, so each run of role tags belongs to the ``p`` tag
  before it.
* **members** -- one ``p`` tag per member, repeats included.

See Also:
    [relaygroups.models.group][]: The records encoded here.
    [relaygroups.nips.nip29.event_builders][]: Wraps these tag lists in events.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from nostr_sdk import Tag


if TYPE_CHECKING:
    from relaygroups.models.group import GroupAdmins, GroupMembers, GroupMetadata, GroupRoles


logger = logging.getLogger("relaygroups.nips.nip29")


class GroupTag(StrEnum):
    """Tag names used by NIP-29 group events.

    Attributes:
        NAME: Group display name.
        DESCRIPTION: Group description (the metadata ``about`` field).
        IMAGE: Group picture URL.
        PRIVACY: ``public`` or ``private``.
        CLOSED: ``open`` or ``closed``.
        ROLE: Role definition or role assignment.
        PUBLIC_KEY: Public key reference (``p``).
        GROUP: Group id on regular group events (``h``).
        IDENTIFIER: Group id on addressable metadata events (``d``).
        EVENT: Event reference (``e``).
        CODE: Invite code.
        PREVIOUS: Short ids of recently seen group events.
    """

    NAME = "name"
    DESCRIPTION = "description"
    IMAGE = "image"
    PRIVACY = "privacy"
    CLOSED = "closed"
    ROLE = "role"
    PUBLIC_KEY = "p"
    GROUP = "h"
    IDENTIFIER = "d"
    EVENT = "e"
    CODE = "code"
    PREVIOUS = "previous"


def make_tag(name: GroupTag, *values: str) -> Tag:
    """Build a tag from a [GroupTag][relaygroups.nips.nip29.tags.GroupTag] name and its values."""
    return Tag.parse([name.value, *values])


def metadata_tags(metadata: GroupMetadata) -> list[Tag]:
    """Encode group metadata as ``name``, ``description``, ``image``, ``privacy``, ``closed``."""
    tags: list[Tag] = []
    if metadata.name is not None:
        tags.append(make_tag(GroupTag.NAME, metadata.name))
    if metadata.about is not None:
        tags.append(make_tag(GroupTag.DESCRIPTION, metadata.about))
    if metadata.picture is not None:
        tags.append(make_tag(GroupTag.IMAGE, metadata.picture.url))
    tags.append(make_tag(GroupTag.PRIVACY, metadata.privacy.as_canonical_string()))
    tags.append(make_tag(GroupTag.CLOSED, metadata.closed.as_canonical_string()))

    logger.debug("metadata_tags_encoded count=%s", len(tags))
    return tags


def roles_tags(roles: GroupRoles) -> list[Tag]:
    """Encode role definitions, one ``role`` tag each, in list order."""
    tags = [
        make_tag(GroupTag.ROLE, role.name)
        if role.description is None
        else make_tag(GroupTag.ROLE, role.name, role.description)
        for role in roles.roles
    ]
    logger.debug("roles_tags_encoded count=%s", len(tags))
    return tags


def admins_tags(admins: GroupAdmins) -> list[Tag]:
    """Encode admins as interleaved ``p`` and ``role`` tags."""
    tags: list[Tag] = []
    for admin in admins.admins:
        tags.append(Tag.public_key(admin.public_key))
        tags.extend(make_tag(GroupTag.ROLE, role) for role in admin.roles)

    logger.debug("admins_tags_encoded admins=%s count=%s", len(admins.admins), len(tags))
    return tags


def members_tags(members: GroupMembers) -> list[Tag]:
    """Encode members, one ``p`` tag each, without deduplication."""
    tags = [Tag.public_key(public_key) for public_key in members.members]
    logger.debug("members_tags_encoded count=%s", len(tags))
    return tags
