r"""relaygroups -- NIP-29 relay-based groups for Nostr.

Canonical data model and wire encoding for relay-hosted groups: group
identifiers, event kind classification, and the tag codecs that turn group
metadata, roles, admins and members into ``nostr_sdk`` tags.

Imports flow strictly downward:

```text
        nips        Kind classifier, tag codecs, event builders, configs
          |
        models      Frozen dataclass value records (zero I/O)
          |
        core        Exceptions, structured logging, YAML loading
```

Note:
    Top-level imports (``from relaygroups import GroupId``) use lazy loading
    and resolve on first access. For lightweight usage, import directly from
    subpackages::

        from relaygroups.models import GroupId, Url
        from relaygroups.nips.nip29 import metadata_tags
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("relaygroups")

__all__ = [
    "AccessModel",
    "GroupAdmin",
    "GroupAdmins",
    "GroupConfig",
    "GroupEventKind",
    "GroupId",
    "GroupMembers",
    "GroupMetadata",
    "GroupRoles",
    "Logger",
    "Nip29Error",
    "Privacy",
    "RelayGroupsError",
    "Role",
    "Url",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Logger": ("relaygroups.core", "Logger"),
    "Nip29Error": ("relaygroups.core", "Nip29Error"),
    "RelayGroupsError": ("relaygroups.core", "RelayGroupsError"),
    "AccessModel": ("relaygroups.models", "AccessModel"),
    "GroupAdmin": ("relaygroups.models", "GroupAdmin"),
    "GroupAdmins": ("relaygroups.models", "GroupAdmins"),
    "GroupEventKind": ("relaygroups.models", "GroupEventKind"),
    "GroupId": ("relaygroups.models", "GroupId"),
    "GroupMembers": ("relaygroups.models", "GroupMembers"),
    "GroupMetadata": ("relaygroups.models", "GroupMetadata"),
    "GroupRoles": ("relaygroups.models", "GroupRoles"),
    "Privacy": ("relaygroups.models", "Privacy"),
    "Role": ("relaygroups.models", "Role"),
    "Url": ("relaygroups.models", "Url"),
    "GroupConfig": ("relaygroups.nips.nip29", "GroupConfig"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'relaygroups' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
