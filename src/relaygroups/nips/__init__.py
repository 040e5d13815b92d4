"""Nostr Implementation Possibilities -- protocol-specific encoding logic.

The NIPs layer sits above [relaygroups.models][relaygroups.models] and
[relaygroups.core][relaygroups.core]. It performs no I/O: it classifies event
kinds and turns model records into ``nostr_sdk`` tags and event builders.

Attributes:
    nip29: Relay-based groups -- kind classification, tag codecs, event
        builders, and YAML group definitions.
"""

from relaygroups.nips import nip29


__all__ = ["nip29"]
