"""Declarative NIP-29 group definitions.

Pydantic models describing a group (identifier, metadata, roles, admins,
members) as plain data, so a group can be kept in a YAML file and turned
into the value records consumed by the tag codecs and event builders.

Validation reuses the model rules: group ids go through the same check as
[GroupId][relaygroups.models.group_id.GroupId], privacy and access tokens
are parsed case-insensitively, and public keys are parsed with
``nostr_sdk.PublicKey.parse`` (hex or ``npub1`` bech32).

Examples:
    ```yaml
    relay_url: wss://relay.example.com
    id: rust-devs
    metadata:
      name: Rust Developers
      about: A group for Rust enthusiasts
      privacy: public
      closed: closed
    roles:
      - name: admin
        description: Full access
      - name: member
    admins:
      - public_key: npub1...
        roles: [admin]
    members:
      - npub1...
    ```

    ```python
    config = GroupConfig.from_yaml("groups/rust-devs.yaml")
    builder = build_group_metadata(config.to_group_id(), config.to_metadata())
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nostr_sdk import NostrSdkError, PublicKey
from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from relaygroups.core.logger import Logger
from relaygroups.core.yaml import load_yaml
from relaygroups.models._validation import validate_group_id
from relaygroups.models.group import (
    AccessModel,
    GroupAdmin,
    GroupAdmins,
    GroupMembers,
    GroupMetadata,
    GroupRoles,
    Privacy,
    Role,
)
from relaygroups.models.group_id import GroupId
from relaygroups.models.url import Url


_logger = Logger("relaygroups.nips.nip29.configs")


def _parse_public_key(value: Any) -> Any:
    """Parse a hex or bech32 public key string; other values pass through."""
    if not isinstance(value, str):
        return value
    try:
        return PublicKey.parse(value)
    except NostrSdkError as e:
        raise ValueError(f"Invalid public key: {value}") from e


def _parse_url(value: Any) -> Any:
    return Url(value) if isinstance(value, str) else value


class GroupMetadataConfig(BaseModel):
    """Metadata section of a group definition."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str | None = None
    about: str | None = None
    picture: InstanceOf[Url] | None = None
    privacy: Privacy = Privacy.PUBLIC
    closed: AccessModel = AccessModel.OPEN

    @field_validator("picture", mode="before")
    @classmethod
    def _parse_picture(cls, value: Any) -> Any:
        return _parse_url(value)

    @field_validator("privacy", mode="before")
    @classmethod
    def _parse_privacy(cls, value: Any) -> Any:
        return Privacy.parse(value) if isinstance(value, str) else value

    @field_validator("closed", mode="before")
    @classmethod
    def _parse_access_model(cls, value: Any) -> Any:
        return AccessModel.parse(value) if isinstance(value, str) else value

    def to_metadata(self) -> GroupMetadata:
        return GroupMetadata(
            name=self.name,
            about=self.about,
            picture=self.picture,
            privacy=self.privacy,
            closed=self.closed,
        )


class RoleConfig(BaseModel):
    """One role definition."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str | None = None


class AdminConfig(BaseModel):
    """One admin: a public key and its role names, in order."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    public_key: PublicKey
    roles: list[str] = Field(default_factory=list)

    @field_validator("public_key", mode="before")
    @classmethod
    def _parse_key(cls, value: Any) -> Any:
        return _parse_public_key(value)


class GroupConfig(BaseModel):
    """Complete definition of one NIP-29 group.

    Attributes:
        relay_url: Relay hosting the group.
        id: Group id, limited to ``[a-z0-9_-]``.
        metadata: Name, description, picture, privacy and access model.
        roles: Role definitions, in order.
        admins: Admins with their role names, in order.
        members: Member public keys, in order, repeats kept.

    See Also:
        [load_yaml()][relaygroups.core.yaml.load_yaml]: Used by
            [from_yaml()][relaygroups.nips.nip29.configs.GroupConfig.from_yaml].
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    relay_url: InstanceOf[Url]
    id: str
    metadata: GroupMetadataConfig = Field(default_factory=GroupMetadataConfig)
    roles: list[RoleConfig] = Field(default_factory=list)
    admins: list[AdminConfig] = Field(default_factory=list)
    members: list[PublicKey] = Field(default_factory=list)

    @field_validator("relay_url", mode="before")
    @classmethod
    def _parse_relay_url(cls, value: Any) -> Any:
        return _parse_url(value)

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        return validate_group_id(value)

    @field_validator("members", mode="before")
    @classmethod
    def _parse_members(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_parse_public_key(item) for item in value]
        return value

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> GroupConfig:
        """Load and validate a group definition from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file does not contain a mapping.
            pydantic.ValidationError: If the definition is invalid.
        """
        config = cls.model_validate(load_yaml(config_path))
        _logger.info(
            "group_config_loaded",
            path=str(config_path),
            group=config.to_group_id(),
            roles=len(config.roles),
            admins=len(config.admins),
            members=len(config.members),
        )
        return config

    def to_group_id(self) -> GroupId:
        return GroupId(self.relay_url, self.id)

    def to_metadata(self) -> GroupMetadata:
        return self.metadata.to_metadata()

    def to_roles(self) -> GroupRoles:
        return GroupRoles(Role(role.name, role.description) for role in self.roles)

    def to_admins(self) -> GroupAdmins:
        return GroupAdmins(GroupAdmin(admin.public_key, admin.roles) for admin in self.admins)

    def to_members(self) -> GroupMembers:
        return GroupMembers(self.members)
