"""relaygroups exception hierarchy.

Every failure raised by this package derives from
[RelayGroupsError][relaygroups.core.exceptions.RelayGroupsError], so callers
can catch the whole family with one clause or target a single kind.

Exception hierarchy:

```text
RelayGroupsError (base -- never raised directly)
├── ConfigurationError                -- bad YAML, invalid group definition
└── ProtocolError                     -- NIP parsing/validation failures
    └── Nip29Error                    -- NIP-29 relay-based groups (also ValueError)
        ├── InvalidGroupIdError       -- empty id or disallowed character
        ├── InvalidPrivacyError       -- unrecognized privacy token
        ├── InvalidAccessModelError   -- unrecognized access-model token
        ├── InvalidGroupIdentifierError -- malformed ``relay'id`` string
        └── MissingRequiredTagError   -- required tag absent from a tag list
```

Note:
    [Nip29Error][relaygroups.core.exceptions.Nip29Error] also inherits from
    ``ValueError``. Pydantic turns a ``ValueError`` raised inside a validator
    into a ``ValidationError``, so the group config models reuse the model
    validators directly.

See Also:
    [GroupId][relaygroups.models.group_id.GroupId]: Raises
        [InvalidGroupIdError][relaygroups.core.exceptions.InvalidGroupIdError] and
        [InvalidGroupIdentifierError][relaygroups.core.exceptions.InvalidGroupIdentifierError].
    [Privacy][relaygroups.models.group.Privacy],
    [AccessModel][relaygroups.models.group.AccessModel]: Raise the token errors.
"""

from __future__ import annotations

from typing import ClassVar


class RelayGroupsError(Exception):
    """Base exception for all relaygroups errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(RelayGroupsError):
    """Invalid or missing configuration (YAML file, group definition).

    See Also:
        [load_yaml()][relaygroups.core.yaml.load_yaml]: YAML loading function.
        [GroupConfig][relaygroups.nips.nip29.configs.GroupConfig]: Group
            definition model.
    """


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


class ProtocolError(RelayGroupsError):
    """NIP parsing, validation, or compliance failure."""


class Nip29Error(ProtocolError, ValueError):
    """Base for NIP-29 relay-based group errors.

    Subclasses prefix the rendered message with a fixed description; the
    caller-supplied detail is kept on ``message``.

    Attributes:
        message: Detail describing the offending input.
    """

    _description: ClassVar[str] = "NIP-29 error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self._description}: {message}")


class InvalidGroupIdError(Nip29Error):
    """Group id is empty or contains a character outside ``[a-z0-9_-]``."""

    _description = "Invalid group ID"


class InvalidPrivacyError(Nip29Error):
    """Privacy token is neither ``public`` nor ``private``."""

    _description = "Invalid privacy value"


class InvalidAccessModelError(Nip29Error):
    """Access-model token is neither ``open`` nor ``closed``."""

    _description = "Invalid access model value"


class InvalidGroupIdentifierError(Nip29Error):
    """Combined ``<relay-url>'<group-id>`` string is malformed.

    Raised when the apostrophe delimiter count is not exactly one, or when the
    relay URL portion cannot be parsed.
    """

    _description = "Invalid group identifier format"


class MissingRequiredTagError(Nip29Error):
    """A tag required to rebuild a group fact is absent.

    Attributes:
        tag_name: Name of the missing tag.
    """

    _description = "Missing required tag"

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(tag_name)
