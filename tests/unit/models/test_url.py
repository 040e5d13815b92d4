"""
Unit tests for models.url module.

Tests:
- Normalization (case, default ports, empty path, whitespace)
- Rejection of relative and malformed URLs
- Equality, hashing and ordering by normalized form
- Immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from relaygroups.models import Url


class TestParsing:
    """URL parsing and normalization."""

    def test_empty_path_becomes_slash(self):
        u = Url("wss://relay.example.com")
        assert u.url == "wss://relay.example.com/"
        assert u.scheme == "wss"
        assert u.host == "relay.example.com"
        assert u.port is None
        assert u.path == "/"

    def test_path_preserved(self):
        u = Url("https://example.com/image.png")
        assert u.url == "https://example.com/image.png"
        assert u.path == "/image.png"

    def test_trailing_slash_preserved(self):
        assert Url("wss://relay.example.com/nostr/").url == "wss://relay.example.com/nostr/"

    def test_scheme_and_host_lowercased(self):
        assert Url("WSS://Relay.Example.COM/Nostr").url == "wss://relay.example.com/Nostr"

    def test_default_port_omitted(self):
        assert Url("wss://relay.example.com:443").url == "wss://relay.example.com/"
        assert Url("ws://relay.example.com:80").url == "ws://relay.example.com/"

    def test_explicit_port_kept(self):
        u = Url("wss://relay.example.com:8080")
        assert u.url == "wss://relay.example.com:8080/"
        assert u.port == 8080

    def test_ws_scheme_not_upgraded(self):
        assert Url("ws://relay.example.com").scheme == "ws"

    def test_local_hosts_allowed(self):
        assert Url("ws://localhost:7777").url == "ws://localhost:7777/"

    def test_whitespace_stripped(self):
        assert Url("  wss://relay.example.com  ").url == "wss://relay.example.com/"

    def test_query_kept(self):
        assert Url("https://example.com/pic?size=2").url == "https://example.com/pic?size=2"

    def test_internationalized_host_punycoded(self):
        u = Url("wss://rélay.example.com")
        assert u.host.startswith("xn--r")
        assert u.host.endswith(".example.com")
        assert u.url.isascii()

    def test_internationalized_host_case_insensitive(self):
        assert Url("wss://RÉLAY.example.com") == Url("wss://rélay.example.com")

    def test_non_special_scheme_without_authority(self):
        u = Url("mailto:alice@example.com")
        assert u.url == "mailto:alice@example.com"
        assert u.host is None

    def test_str(self):
        assert str(Url("wss://relay.example.com")) == "wss://relay.example.com/"


class TestValidation:
    @pytest.mark.parametrize(
        "raw",
        [
            "relay.example.com",
            "no-delimiter",
            "",
            "wss://",
            "https:///path-only",
            "wss://relay.example.com:99999",
            "wss://exa mple.com",
        ],
    )
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValueError, match="Invalid URL"):
            Url(raw)

    def test_null_bytes_rejected(self):
        with pytest.raises(ValueError, match="null bytes"):
            Url("wss://relay.example.com/\x00")

    def test_non_str_rejected(self):
        with pytest.raises(TypeError, match="raw_url must be a str"):
            Url(42)  # type: ignore[arg-type]


class TestEquality:
    def test_equal_after_normalization(self):
        assert Url("wss://relay.example.com") == Url("WSS://relay.example.com/")
        assert hash(Url("wss://relay.example.com")) == hash(Url("wss://relay.example.com/"))

    def test_different_paths_differ(self):
        assert Url("wss://relay.example.com/a") != Url("wss://relay.example.com/b")

    def test_ordering_by_normalized_url(self):
        urls = [Url("wss://b.example.com"), Url("wss://a.example.com")]
        assert [u.url for u in sorted(urls)] == ["wss://a.example.com/", "wss://b.example.com/"]

    def test_usable_as_dict_key(self):
        d = {Url("wss://relay.example.com"): 1}
        assert d[Url("wss://relay.example.com/")] == 1


class TestImmutability:
    def test_frozen(self):
        u = Url("wss://relay.example.com")
        with pytest.raises(FrozenInstanceError):
            u.url = "wss://other.example.com/"  # type: ignore[misc]
