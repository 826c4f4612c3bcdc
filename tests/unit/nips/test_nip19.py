"""
Unit tests for nips.nip19 module.

Tests:
- npub decoding with real key material
- nprofile decoding with relay hints
- Raw 64-char hex fallback
- Rejection of malformed codes and non-pubkey entities
- encode_npub()
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from notebrotr.core.exceptions import DecodeError, UnsupportedEntityError
from nostr_sdk import EventId

from notebrotr.nips.nip19 import IdentityPointer, decode_identity_code, encode_npub


class _FakePubkey:
    def __init__(self, hex_key: str) -> None:
        self.npub = MagicMock()
        self.npub.to_hex.return_value = hex_key


class _FakeProfile:
    def __init__(self, hex_key: str, relays: list[str] | None) -> None:
        self.nprofile = MagicMock()
        self.nprofile.public_key.return_value.to_hex.return_value = hex_key
        self.nprofile.relays.return_value = relays


class NOTE:  # noqa: N801 - mirrors the nostr_sdk enum variant name
    pass


NOTE.__name__ = "Nip19Enum.NOTE"


def _patched_nip19(decoded: object):
    nip19 = MagicMock()
    nip19.from_bech32.return_value.as_enum.return_value = decoded
    enum = SimpleNamespace(PUBKEY=_FakePubkey, PROFILE=_FakeProfile)
    return (
        patch("notebrotr.nips.nip19.Nip19", nip19),
        patch("notebrotr.nips.nip19.Nip19Enum", enum),
    )


class TestDecodeNpub:
    def test_real_npub(self, npub: str, pubkey_hex: str) -> None:
        pointer = decode_identity_code(npub)
        assert pointer == IdentityPointer(pubkey=pubkey_hex, relays=())

    def test_mocked_npub(self) -> None:
        nip19_patch, enum_patch = _patched_nip19(_FakePubkey("c" * 64))
        with nip19_patch, enum_patch:
            assert decode_identity_code("npub1abc") == IdentityPointer("c" * 64)


class TestDecodeNprofile:
    def test_relays_are_carried(self) -> None:
        decoded = _FakeProfile("d" * 64, ["wss://relay.one", "wss://relay.two"])
        nip19_patch, enum_patch = _patched_nip19(decoded)
        with nip19_patch, enum_patch:
            pointer = decode_identity_code("nprofile1abc")

        assert pointer.pubkey == "d" * 64
        assert pointer.relays == ("wss://relay.one", "wss://relay.two")

    def test_no_relays(self) -> None:
        nip19_patch, enum_patch = _patched_nip19(_FakeProfile("d" * 64, None))
        with nip19_patch, enum_patch:
            assert decode_identity_code("nprofile1abc").relays == ()


class TestRawHexFallback:
    def test_64_chars(self) -> None:
        code = "f" * 64
        assert decode_identity_code(code) == IdentityPointer(pubkey=code)


class TestRejections:
    def test_malformed(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_identity_code("npub1notvalid")
        assert exc_info.value.code == "npub1notvalid"
        assert not isinstance(exc_info.value, UnsupportedEntityError)

    def test_empty(self) -> None:
        with pytest.raises(DecodeError):
            decode_identity_code("")

    def test_event_pointer_unsupported(self) -> None:
        nip19_patch, enum_patch = _patched_nip19(NOTE())
        with nip19_patch, enum_patch, pytest.raises(UnsupportedEntityError) as exc_info:
            decode_identity_code("note1abc")

        assert exc_info.value.entity_type == "note"
        assert exc_info.value.code == "note1abc"

    def test_real_note_code(self) -> None:
        code = EventId.parse("a" * 64).to_bech32()
        with pytest.raises(UnsupportedEntityError) as exc_info:
            decode_identity_code(code)

        assert exc_info.value.entity_type == "note"
        assert exc_info.value.code == code
        assert str(exc_info.value).startswith("Unsupported entity type note:")


class TestEncodeNpub:
    def test_roundtrip(self, npub: str, pubkey_hex: str) -> None:
        assert encode_npub(pubkey_hex) == npub

    def test_invalid(self) -> None:
        assert encode_npub("not-a-key") is None
