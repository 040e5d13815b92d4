"""Unit tests for the relaygroups exception hierarchy.

Tests verify:
- issubclass relationships match the documented tree
- except clauses catch the expected subclasses
- NIP-29 errors render a fixed prefix and keep the detail message
"""

import pytest

from relaygroups.core.exceptions import (
    ConfigurationError,
    InvalidAccessModelError,
    InvalidGroupIdentifierError,
    InvalidGroupIdError,
    InvalidPrivacyError,
    MissingRequiredTagError,
    Nip29Error,
    ProtocolError,
    RelayGroupsError,
)


NIP29_CONCRETE = (
    InvalidGroupIdError,
    InvalidPrivacyError,
    InvalidAccessModelError,
    InvalidGroupIdentifierError,
)


# =============================================================================
# Hierarchy Tests
# =============================================================================


class TestExceptionHierarchy:
    """Verify issubclass relationships match the documented tree."""

    @pytest.mark.parametrize("exc_cls", (*NIP29_CONCRETE, MissingRequiredTagError))
    def test_nip29_errors_inherit_from_nip29_error(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, Nip29Error)
        assert issubclass(exc_cls, ProtocolError)
        assert issubclass(exc_cls, RelayGroupsError)

    def test_nip29_error_is_value_error(self) -> None:
        assert issubclass(Nip29Error, ValueError)

    def test_configuration_error_is_not_protocol_error(self) -> None:
        assert issubclass(ConfigurationError, RelayGroupsError)
        assert not issubclass(ConfigurationError, ProtocolError)

    def test_siblings_unrelated(self) -> None:
        assert not issubclass(InvalidPrivacyError, InvalidAccessModelError)
        assert not issubclass(InvalidGroupIdError, InvalidGroupIdentifierError)


class TestExceptionCatching:
    """Verify except clauses catch the expected subclasses."""

    def test_catch_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid group ID"):
            raise InvalidGroupIdError("Group ID cannot be empty")

    def test_catch_as_base(self) -> None:
        with pytest.raises(RelayGroupsError):
            raise InvalidGroupIdentifierError("Expected format: relay-url'group-id")


# =============================================================================
# Message Tests
# =============================================================================


class TestMessages:
    @pytest.mark.parametrize(
        ("exc_cls", "prefix"),
        [
            (InvalidGroupIdError, "Invalid group ID: "),
            (InvalidPrivacyError, "Invalid privacy value: "),
            (InvalidAccessModelError, "Invalid access model value: "),
            (InvalidGroupIdentifierError, "Invalid group identifier format: "),
        ],
    )
    def test_prefix_and_detail(self, exc_cls: type[Nip29Error], prefix: str) -> None:
        exc = exc_cls("detail")
        assert str(exc) == f"{prefix}detail"
        assert exc.message == "detail"

    def test_missing_required_tag_keeps_tag_name(self) -> None:
        exc = MissingRequiredTagError("privacy")
        assert exc.tag_name == "privacy"
        assert str(exc) == "Missing required tag: privacy"

    def test_configuration_error_plain_message(self) -> None:
        assert str(ConfigurationError("bad yaml")) == "bad yaml"
