"""
Unit tests for models.group module.

Tests:
- Privacy / AccessModel canonical strings and case-insensitive parsing
- GroupMetadata defaults and type validation
- Value-copy-on-append for roles, admins and members
- Immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from relaygroups.core.exceptions import InvalidAccessModelError, InvalidPrivacyError
from relaygroups.models import (
    AccessModel,
    GroupAdmin,
    GroupAdmins,
    GroupMembers,
    GroupMetadata,
    GroupRoles,
    Privacy,
    Role,
    Url,
)


# ============================================================================
# Privacy / AccessModel
# ============================================================================


class TestPrivacy:
    def test_canonical_strings(self):
        assert Privacy.PUBLIC.as_canonical_string() == "public"
        assert Privacy.PRIVATE.as_canonical_string() == "private"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("public", Privacy.PUBLIC),
            ("PUBLIC", Privacy.PUBLIC),
            ("Public", Privacy.PUBLIC),
            ("private", Privacy.PRIVATE),
            ("pRiVaTe", Privacy.PRIVATE),
        ],
    )
    def test_parse_case_insensitive(self, raw, expected):
        assert Privacy.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["invalid", "", " public", "public ", "open"])
    def test_parse_rejects(self, raw):
        with pytest.raises(InvalidPrivacyError) as exc_info:
            Privacy.parse(raw)
        assert exc_info.value.message == f"Expected 'public' or 'private', got: {raw}"

    def test_str_is_canonical(self):
        assert str(Privacy.PRIVATE) == "private"


class TestAccessModel:
    def test_canonical_strings(self):
        assert AccessModel.OPEN.as_canonical_string() == "open"
        assert AccessModel.CLOSED.as_canonical_string() == "closed"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("open", AccessModel.OPEN),
            ("OPEN", AccessModel.OPEN),
            ("closed", AccessModel.CLOSED),
            ("Closed", AccessModel.CLOSED),
        ],
    )
    def test_parse_case_insensitive(self, raw, expected):
        assert AccessModel.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["invalid", "", "closed\n", "public"])
    def test_parse_rejects(self, raw):
        with pytest.raises(InvalidAccessModelError, match="Expected 'open' or 'closed'"):
            AccessModel.parse(raw)


# ============================================================================
# GroupMetadata
# ============================================================================


class TestGroupMetadata:
    def test_defaults(self):
        metadata = GroupMetadata()
        assert metadata.name is None
        assert metadata.about is None
        assert metadata.picture is None
        assert metadata.privacy is Privacy.PUBLIC
        assert metadata.closed is AccessModel.OPEN

    def test_all_fields(self, full_metadata):
        assert full_metadata.name == "Rust Developers"
        assert full_metadata.picture == Url("https://example.com/image.png")
        assert full_metadata.closed is AccessModel.CLOSED

    def test_privacy_must_be_enum(self):
        with pytest.raises(TypeError, match="privacy must be a Privacy"):
            GroupMetadata(privacy="public")  # type: ignore[arg-type]

    def test_picture_must_be_url(self):
        with pytest.raises(TypeError, match="picture must be an Url"):
            GroupMetadata(picture="https://example.com/a.png")  # type: ignore[arg-type]

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            GroupMetadata().name = "x"  # type: ignore[misc]


# ============================================================================
# Roles
# ============================================================================


class TestRole:
    def test_without_description(self):
        role = Role("admin")
        assert role.name == "admin"
        assert role.description is None

    def test_with_description(self):
        role = Role("moderator", "Can moderate messages")
        assert role.description == "Can moderate messages"

    def test_name_must_be_str(self):
        with pytest.raises(TypeError):
            Role(None)  # type: ignore[arg-type]


class TestGroupRoles:
    def test_empty(self):
        assert GroupRoles().roles == ()
        assert len(GroupRoles()) == 0

    def test_add_role_returns_new_value(self):
        empty = GroupRoles()
        one = empty.add_role(Role("admin"))
        assert empty.roles == ()
        assert one.roles == (Role("admin"),)

    def test_insertion_order_and_duplicates_kept(self):
        roles = GroupRoles().add_role(Role("b")).add_role(Role("a")).add_role(Role("b"))
        assert [r.name for r in roles.roles] == ["b", "a", "b"]

    def test_list_coerced_to_tuple(self):
        roles = GroupRoles([Role("a"), Role("b")])
        assert isinstance(roles.roles, tuple)

    def test_element_type_checked(self):
        with pytest.raises(TypeError, match=r"roles\[1\] must be a Role"):
            GroupRoles([Role("a"), "b"])  # type: ignore[list-item]


# ============================================================================
# Admins
# ============================================================================


class TestGroupAdmin:
    def test_roles_coerced_to_tuple(self, pk1):
        admin = GroupAdmin(pk1, ["admin", "moderator"])
        assert admin.roles == ("admin", "moderator")
        assert admin.public_key is pk1

    def test_default_roles_empty(self, pk1):
        assert GroupAdmin(pk1).roles == ()

    def test_public_key_type_checked(self):
        with pytest.raises(TypeError, match="public_key must be a PublicKey"):
            GroupAdmin("ab" * 32)  # type: ignore[arg-type]

    def test_string_roles_rejected(self, pk1):
        with pytest.raises(TypeError, match="roles must be an iterable of str"):
            GroupAdmin(pk1, "admin")  # type: ignore[arg-type]


class TestGroupAdmins:
    def test_add_admin_returns_new_value(self, pk1):
        empty = GroupAdmins()
        one = empty.add_admin(GroupAdmin(pk1, ["admin"]))
        assert len(empty) == 0
        assert len(one) == 1
        assert one.admins[0].public_key is pk1

    def test_order_kept(self, sample_admins, pk1, pk2):
        assert [a.public_key.to_hex() for a in sample_admins.admins] == [pk1.to_hex(), pk2.to_hex()]


# ============================================================================
# Members
# ============================================================================


class TestGroupMembers:
    def test_add_member_returns_new_value(self, pk1):
        empty = GroupMembers()
        one = empty.add_member(pk1)
        assert empty.members == ()
        assert one.members[0] is pk1

    def test_duplicates_kept(self, pk1, pk2):
        members = GroupMembers().add_member(pk1).add_member(pk2).add_member(pk1)
        assert len(members) == 3
        assert members.members[0] is members.members[2]

    def test_element_type_checked(self):
        with pytest.raises(TypeError, match=r"members\[0\] must be a PublicKey"):
            GroupMembers(["npub1..."])  # type: ignore[list-item]
