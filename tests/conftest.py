"""
Pytest configuration and shared fixtures for relaygroups tests.

Provides:
- Logging configuration for the test session
- Sample relay URL, group identifier, and key fixtures
- Sample group fact records
"""

import logging

import pytest
from nostr_sdk import Keys, PublicKey

from relaygroups.models import (
    AccessModel,
    GroupAdmin,
    GroupAdmins,
    GroupId,
    GroupMembers,
    GroupMetadata,
    GroupRoles,
    Privacy,
    Role,
    Url,
)


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Identifier Fixtures
# ============================================================================


@pytest.fixture
def relay_url() -> Url:
    """Relay URL without a path."""
    return Url("wss://relay.example.com")


@pytest.fixture
def group_id(relay_url: Url) -> GroupId:
    """The ``rust-devs`` group on the sample relay."""
    return GroupId(relay_url, "rust-devs")


# ============================================================================
# Key Fixtures
# ============================================================================


@pytest.fixture
def keys() -> Keys:
    """Freshly generated signing keys."""
    return Keys.generate()


@pytest.fixture
def pk1() -> PublicKey:
    return Keys.generate().public_key()


@pytest.fixture
def pk2() -> PublicKey:
    return Keys.generate().public_key()


# ============================================================================
# Group Fact Fixtures
# ============================================================================


@pytest.fixture
def full_metadata() -> GroupMetadata:
    """Metadata with every optional field set."""
    return GroupMetadata(
        name="Rust Developers",
        about="A group for Rust enthusiasts",
        picture=Url("https://example.com/image.png"),
        privacy=Privacy.PUBLIC,
        closed=AccessModel.CLOSED,
    )


@pytest.fixture
def sample_roles() -> GroupRoles:
    return (
        GroupRoles()
        .add_role(Role("admin", "Full access"))
        .add_role(Role("moderator", "Can moderate messages"))
        .add_role(Role("member"))
    )


@pytest.fixture
def sample_admins(pk1: PublicKey, pk2: PublicKey) -> GroupAdmins:
    """Two admins with one and two roles."""
    return (
        GroupAdmins()
        .add_admin(GroupAdmin(pk1, ["admin"]))
        .add_admin(GroupAdmin(pk2, ["moderator", "member"]))
    )


@pytest.fixture
def sample_members(pk1: PublicKey, pk2: PublicKey) -> GroupMembers:
    return GroupMembers().add_member(pk1).add_member(pk2)
