"""Frozen dataclass value records for NIP-29 relay-based groups.

Every model uses ``@dataclass(frozen=True, slots=True)`` and validates in
``__post_init__``, so an invalid instance never escapes the constructor.
Sequence fields are stored as tuples; "adding" an element returns a new
record.

Attributes:
    Url: Normalized absolute URL (relay URLs and group pictures).
    GroupId: Relay URL plus group id, printed as ``<relay-url>'<group-id>``.
    Privacy, AccessModel: Group policy enums with case-insensitive parsing.
    GroupMetadata: Name, description, picture, privacy and access model.
    Role, GroupRoles: Ordered role definitions.
    GroupAdmin, GroupAdmins: Ordered admins with their role names.
    GroupMembers: Ordered member public keys.
    GroupEventKind: NIP-29 event kind catalog.

Note:
    Computed fields on frozen dataclasses are set with
    ``object.__setattr__`` inside ``__post_init__``, which runs before the
    instance is exposed to callers.

See Also:
    [relaygroups.nips.nip29][]: Kind classification, tag codecs and event builders.
"""

from .constants import (
    EVENT_KIND_MAX,
    GROUP_ID_PATTERN,
    NIP29_METADATA_KINDS,
    NIP29_MODERATION_KINDS,
    NIP29_USER_KINDS,
    TOP_LEVEL_GROUP_ID,
    GroupEventKind,
)
from .group import (
    AccessModel,
    GroupAdmin,
    GroupAdmins,
    GroupMembers,
    GroupMetadata,
    GroupRoles,
    Privacy,
    Role,
)
from .group_id import GroupId
from .url import Url


__all__ = [
    "EVENT_KIND_MAX",
    "GROUP_ID_PATTERN",
    "NIP29_METADATA_KINDS",
    "NIP29_MODERATION_KINDS",
    "NIP29_USER_KINDS",
    "TOP_LEVEL_GROUP_ID",
    "AccessModel",
    "GroupAdmin",
    "GroupAdmins",
    "GroupEventKind",
    "GroupId",
    "GroupMembers",
    "GroupMetadata",
    "GroupRoles",
    "Privacy",
    "Role",
    "Url",
]
