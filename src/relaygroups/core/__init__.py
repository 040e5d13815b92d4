"""Core layer: exceptions, structured logging, and YAML loading.

Sits at the bottom of the layer stack and is imported by both
``relaygroups.models`` and ``relaygroups.nips``. Performs no network I/O.

Attributes:
    Exceptions: [RelayGroupsError][relaygroups.core.exceptions.RelayGroupsError]
        and the NIP-29 error family.
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][relaygroups.core.logger.Logger].
    YAML: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][relaygroups.core.yaml.load_yaml].
"""

from .exceptions import (
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
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "InvalidAccessModelError",
    "InvalidGroupIdError",
    "InvalidGroupIdentifierError",
    "InvalidPrivacyError",
    "Logger",
    "MissingRequiredTagError",
    "Nip29Error",
    "ProtocolError",
    "RelayGroupsError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
