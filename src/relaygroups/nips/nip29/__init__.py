"""NIP-29: Relay-based Groups.

<https://github.com/nostr-protocol/nips/blob/master/29.md>

Closed-membership groups hosted on relays, with relay-enforced moderation,
roles, and permissions.

Event kinds:

* Moderation (9000-9009): ``9000`` put user, ``9001`` remove user,
  ``9002`` edit metadata, ``9005`` delete event, ``9007`` create group,
  ``9008`` delete group, ``9009`` create invite. 9003, 9004 and 9006 are
  reserved.
* User requests: ``9021`` join, ``9022`` leave.
* Addressable metadata (39000-39003): ``39000`` metadata, ``39001`` admins,
  ``39002`` members, ``39003`` roles.

Attributes:
    kinds: Classification predicates over the sorted kind tables.
    tags: Codecs turning group facts into ordered tag lists.
    event_builders: Unsigned ``EventBuilder`` factories for every kind.
    configs: Pydantic group definitions loadable from YAML.

Examples:
    ```python
    from nostr_sdk import Keys

    from relaygroups.models import AccessModel, GroupId, GroupMetadata, Url
    from relaygroups.nips.nip29 import build_group_create, build_group_message

    keys = Keys.generate()
    group = GroupId(Url("wss://relay.example.com"), "rust-devs")
    metadata = GroupMetadata(name="Rust Developers", closed=AccessModel.CLOSED)

    create = build_group_create(group, metadata).sign_with_keys(keys)
    hello = build_group_message(group, "Hello everyone!").sign_with_keys(keys)
    ```
"""

from .configs import AdminConfig, GroupConfig, GroupMetadataConfig, RoleConfig
from .event_builders import (
    build_group_admins,
    build_group_create,
    build_group_create_invite,
    build_group_delete,
    build_group_delete_event,
    build_group_edit_metadata,
    build_group_join_request,
    build_group_leave_request,
    build_group_members,
    build_group_message,
    build_group_metadata,
    build_group_put_user,
    build_group_remove_user,
    build_group_roles,
)
from .kinds import is_group_event, is_group_metadata, is_group_moderation, is_group_user_request
from .tags import GroupTag, admins_tags, members_tags, metadata_tags, roles_tags


__all__ = [
    "AdminConfig",
    "GroupConfig",
    "GroupMetadataConfig",
    "GroupTag",
    "RoleConfig",
    "admins_tags",
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
    "is_group_event",
    "is_group_metadata",
    "is_group_moderation",
    "is_group_user_request",
    "members_tags",
    "metadata_tags",
    "roles_tags",
]
