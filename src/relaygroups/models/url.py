"""
Validated absolute URL value used for relay URLs and group pictures.

Parses and normalizes URL strings with RFC 3986 (scheme and host
lowercased, percent-encoding and dot segments normalized). Hierarchical
"special" schemes (``ws``, ``wss``, ``http``, ``https``, ``ftp``) must have a
host, drop their default port, and serialize an empty path as ``/``.
Internationalized hosts are IDNA-encoded to punycode::

    Url("wss://Relay.Example.com").url   # 'wss://relay.example.com/'
    Url("wss://rélay.example.com").host  # 'xn--...' (punycode)

No network policy is applied: any scheme and any host are accepted, so the
value prints the way a generic URL parser would print it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from rfc3986 import iri_reference
from rfc3986.exceptions import InvalidAuthority, ValidationError
from rfc3986.validators import Validator

from ._validation import validate_instance


@dataclass(frozen=True, slots=True, order=True)
class Url:
    """Immutable, normalized absolute URL.

    Equality, hashing and ordering use the normalized ``url`` string only.

    Attributes:
        url: Normalized serialization.
        scheme: Lowercased scheme.
        host: Lowercased host, or ``None`` for URLs without an authority.
        port: Explicit non-default port, or ``None``.
        path: Path component (``/`` at minimum for special schemes).

    Raises:
        TypeError: If the input is not a ``str``.
        ValueError: If the input has no scheme, is missing a required host,
            or has an invalid component.

    Examples:
        ```python
        Url("wss://relay.example.com:443").url    # 'wss://relay.example.com/'
        Url("https://example.com/image.png").path # '/image.png'
        ```
    """

    raw_url: str = field(repr=False, compare=False)

    url: str = field(init=False)
    scheme: str = field(init=False, compare=False)
    host: str | None = field(init=False, compare=False)
    port: int | None = field(init=False, compare=False)
    path: str = field(init=False, compare=False)

    # Schemes that require a host, with their default ports
    _SPECIAL_SCHEMES: ClassVar[dict[str, int]] = {
        "ws": 80,
        "wss": 443,
        "http": 80,
        "https": 443,
        "ftp": 21,
    }

    def __post_init__(self) -> None:
        """Parse and validate the raw URL, populating all computed fields.

        Raises:
            ValueError: If the URL is invalid or contains null bytes.
        """
        validate_instance(self.raw_url, str, "raw_url")
        if "\x00" in self.raw_url:
            raise ValueError("URL contains null bytes")

        iri = iri_reference(self.raw_url.strip())
        if not iri.scheme:
            raise ValueError(f"Invalid URL '{self.raw_url}': relative URL without a scheme")
        try:
            if iri.authority:
                iri.authority_info()
            parsed = iri.encode()
            if parsed.authority:
                parsed.authority_info()
        except InvalidAuthority:
            raise ValueError(f"Invalid URL '{self.raw_url}': invalid authority") from None

        uri = parsed.normalize()
        validator = Validator().check_validity_of(
            "scheme", "userinfo", "host", "port", "path", "query", "fragment"
        )
        try:
            validator.validate(uri)
        except ValidationError as e:
            raise ValueError(f"Invalid URL '{self.raw_url}': {e}") from None

        scheme = uri.scheme
        special = scheme in self._SPECIAL_SCHEMES
        if special and not uri.host:
            raise ValueError(f"Invalid URL '{self.raw_url}': missing host")

        port = int(uri.port) if uri.port else None
        if port is not None and port == self._SPECIAL_SCHEMES.get(scheme):
            port = None

        path = uri.path or ""
        if special and not path:
            path = "/"

        url = f"{scheme}:"
        if parsed.authority is not None:
            authority = uri.host or ""
            if uri.userinfo:
                authority = f"{uri.userinfo}@{authority}"
            if port is not None:
                authority = f"{authority}:{port}"
            url += f"//{authority}"
        url += path
        if uri.query is not None:
            url += f"?{uri.query}"
        if uri.fragment is not None:
            url += f"#{uri.fragment}"

        # Bypass frozen restriction to set computed fields
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "host", uri.host)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "path", path)

    def __str__(self) -> str:
        return self.url
