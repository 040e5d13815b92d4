"""
NIP-29 group identifier: a relay URL paired with a relay-local group id.

The canonical wire form is ``<relay-url>'<group-id>``, with exactly one
apostrophe delimiter. Group ids are restricted to ``[a-z0-9_-]``; the id
``_`` is reserved for the relay-wide top-level group.

See Also:
    [Url][relaygroups.models.url.Url]: Relay URL value type.
    [relaygroups.nips.nip29.event_builders][]: Consumes identifiers when
        building ``h``/``d``-tagged events.
"""

from __future__ import annotations

from dataclasses import dataclass

from relaygroups.core.exceptions import InvalidGroupIdentifierError

from ._validation import validate_group_id, validate_instance
from .constants import GROUP_ID_DELIMITER, TOP_LEVEL_GROUP_ID
from .url import Url


@dataclass(frozen=True, slots=True, order=True)
class GroupId:
    """Immutable, validated group identifier.

    Ordering is structural: first by relay URL, then by id, so identifiers
    sort deterministically and work as dict keys and set members.

    Attributes:
        relay_url: Relay hosting the group.
        id: Group id, non-empty and limited to ``[a-z0-9_-]``.

    Raises:
        TypeError: If ``relay_url`` is not a [Url][relaygroups.models.url.Url]
            or ``id`` is not a ``str``.
        InvalidGroupIdError: If ``id`` is empty or contains a disallowed character.

    Examples:
        ```python
        group = GroupId(Url("wss://relay.example.com"), "rust-devs")
        group.to_canonical_string()   # "wss://relay.example.com'rust-devs"
        group.is_top_level()          # False

        GroupId.parse("wss://relay.example.com'_").is_top_level()  # True
        ```
    """

    relay_url: Url
    id: str

    def __post_init__(self) -> None:
        validate_instance(self.relay_url, Url, "relay_url")
        validate_group_id(self.id)

    def is_top_level(self) -> bool:
        """Return ``True`` for the relay-local top-level group (id ``_``)."""
        return self.id == TOP_LEVEL_GROUP_ID

    def to_canonical_string(self) -> str:
        """Return the ``<relay-url>'<group-id>`` wire form.

        Exactly one trailing ``/`` is removed from the relay URL before the
        delimiter is appended. This is a formatting rule only; the stored
        URL is not altered.
        """
        return f"{self.relay_url.url.removesuffix('/')}{GROUP_ID_DELIMITER}{self.id}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, value: str) -> GroupId:
        """Parse a ``<relay-url>'<group-id>`` string.

        The relay URL is normalized on the way in, so a URL without a path
        gains a trailing ``/``. The result is equal to the identifier that
        produced the string, though not necessarily built from identical input.

        Args:
            value: Combined identifier string.

        Returns:
            A new [GroupId][relaygroups.models.group_id.GroupId].

        Raises:
            InvalidGroupIdentifierError: If the string does not split into
                exactly two parts on ``'`` or the relay URL does not parse.
            InvalidGroupIdError: If the id part fails group id validation.
        """
        validate_instance(value, str, "value")
        parts = value.split(GROUP_ID_DELIMITER)
        if len(parts) != 2:  # noqa: PLR2004
            raise InvalidGroupIdentifierError("Expected format: relay-url'group-id")

        try:
            relay_url = Url(parts[0])
        except ValueError as e:
            raise InvalidGroupIdentifierError(f"Invalid relay URL: {e}") from e

        return cls(relay_url, parts[1])
