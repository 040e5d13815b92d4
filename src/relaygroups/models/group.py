"""
NIP-29 group facts: metadata, roles, admins, and members.

Every record is an immutable value. The list-valued records
([GroupRoles][relaygroups.models.group.GroupRoles],
[GroupAdmins][relaygroups.models.group.GroupAdmins],
[GroupMembers][relaygroups.models.group.GroupMembers]) store tuples and grow
through ``add_*`` methods that return a new record with one element
appended. Insertion order is preserved and nothing is deduplicated.

Records are scoped to a group by the caller: the
[GroupId][relaygroups.models.group_id.GroupId] travels alongside them to the
event builders rather than inside them.

See Also:
    [relaygroups.nips.nip29.tags][]: Encodes these records into tag lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from nostr_sdk import PublicKey

from relaygroups.core.exceptions import InvalidAccessModelError, InvalidPrivacyError

from ._validation import freeze_items, validate_instance, validate_optional_instance
from .url import Url


class Privacy(StrEnum):
    """Who can read a group.

    Attributes:
        PUBLIC: Readable by non-members (default).
        PRIVATE: Visible to members only.
    """

    PUBLIC = "public"
    PRIVATE = "private"

    def as_canonical_string(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Privacy:
        """Parse a privacy token case-insensitively.

        Surrounding whitespace is not trimmed, so ``" public"`` is rejected.

        Raises:
            InvalidPrivacyError: If the lowercased token is not ``public`` or ``private``.
        """
        validate_instance(value, str, "privacy")
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidPrivacyError(
                f"Expected 'public' or 'private', got: {value}"
            ) from None


class AccessModel(StrEnum):
    """How join requests are handled.

    Attributes:
        OPEN: Join requests are approved automatically (default).
        CLOSED: Join requests wait for an admin.
    """

    OPEN = "open"
    CLOSED = "closed"

    def as_canonical_string(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> AccessModel:
        """Parse an access-model token case-insensitively.

        Raises:
            InvalidAccessModelError: If the lowercased token is not ``open`` or ``closed``.
        """
        validate_instance(value, str, "closed")
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidAccessModelError(
                f"Expected 'open' or 'closed', got: {value}"
            ) from None


@dataclass(frozen=True, slots=True)
class GroupMetadata:
    """Descriptive and policy metadata of a group.

    Attributes:
        name: Display name.
        about: Description.
        picture: Group image URL.
        privacy: Read visibility, ``Privacy.PUBLIC`` by default.
        closed: Join policy, ``AccessModel.OPEN`` by default.

    Examples:
        ```python
        metadata = GroupMetadata(
            name="Rust Developers",
            about="A group for Rust enthusiasts",
            closed=AccessModel.CLOSED,
        )
        ```
    """

    name: str | None = None
    about: str | None = None
    picture: Url | None = None
    privacy: Privacy = Privacy.PUBLIC
    closed: AccessModel = AccessModel.OPEN

    def __post_init__(self) -> None:
        validate_optional_instance(self.name, str, "name")
        validate_optional_instance(self.about, str, "about")
        validate_optional_instance(self.picture, Url, "picture")
        validate_instance(self.privacy, Privacy, "privacy")
        validate_instance(self.closed, AccessModel, "closed")


@dataclass(frozen=True, slots=True)
class Role:
    """A named role a group may assign to its admins."""

    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        validate_instance(self.name, str, "name")
        validate_optional_instance(self.description, str, "description")


@dataclass(frozen=True, slots=True)
class GroupRoles:
    """Ordered role definitions of a group.

    Examples:
        ```python
        roles = GroupRoles().add_role(Role("admin", "Full access")).add_role(Role("member"))
        ```
    """

    roles: tuple[Role, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", freeze_items(self.roles, Role, "roles"))

    def add_role(self, role: Role) -> GroupRoles:
        """Return a copy with *role* appended."""
        return GroupRoles((*self.roles, role))

    def __len__(self) -> int:
        return len(self.roles)


@dataclass(frozen=True, slots=True)
class GroupAdmin:
    """An admin's public key and the role names assigned to it, in order."""

    public_key: PublicKey
    roles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_instance(self.public_key, PublicKey, "public_key")
        object.__setattr__(self, "roles", freeze_items(self.roles, str, "roles"))


@dataclass(frozen=True, slots=True)
class GroupAdmins:
    """Ordered admins of a group."""

    admins: tuple[GroupAdmin, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "admins", freeze_items(self.admins, GroupAdmin, "admins"))

    def add_admin(self, admin: GroupAdmin) -> GroupAdmins:
        """Return a copy with *admin* appended."""
        return GroupAdmins((*self.admins, admin))

    def __len__(self) -> int:
        return len(self.admins)


@dataclass(frozen=True, slots=True)
class GroupMembers:
    """Ordered member public keys of a group; repeats are kept."""

    members: tuple[PublicKey, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", freeze_items(self.members, PublicKey, "members"))

    def add_member(self, public_key: PublicKey) -> GroupMembers:
        """Return a copy with *public_key* appended."""
        return GroupMembers((*self.members, public_key))

    def __len__(self) -> int:
        return len(self.members)

