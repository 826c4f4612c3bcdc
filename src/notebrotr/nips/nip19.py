"""NIP-19 identity code decoding.

Turns an un-prefixed bech32 identity code (``npub1...``, ``nprofile1...``)
into an [IdentityPointer][notebrotr.nips.nip19.IdentityPointer] using
``nostr_sdk.Nip19``. Event pointers (``note1...``, ``nevent1...``) decode
successfully but are rejected, since they carry no public key.

A code that is not valid bech32 but is exactly 64 characters long is taken
as a raw hex public key.

Examples:
    ```python
    from notebrotr.nips.nip19 import decode_identity_code

    pointer = decode_identity_code("npub1...")
    pointer.pubkey   # 64-char hex
    pointer.relays   # () for npub, relay hints for nprofile
    ```
"""

from __future__ import annotations

from typing import NamedTuple

from nostr_sdk import Nip19, Nip19Enum, NostrSdkError, PublicKey

from notebrotr.core.exceptions import DecodeError, UnsupportedEntityError


NOSTR_URI_SCHEME = "nostr:"

# Public-key-bearing entities, accepted for identity substitution
PUBKEY_ENTITY_PREFIXES: tuple[str, ...] = ("npub1", "nprofile1")

# Event pointers, linked but never resolved to a profile
EVENT_ENTITY_PREFIXES: tuple[str, ...] = ("nevent1", "note1")

RAW_PUBKEY_LENGTH = 64


class IdentityPointer(NamedTuple):
    """Decoded public-key reference.

    Attributes:
        pubkey: Public key as 64-char hex.
        relays: Relay hints carried by the code (empty for npub and raw hex).
    """

    pubkey: str
    relays: tuple[str, ...] = ()


def _entity_type(decoded: object) -> str:
    """Lower-case variant name of a ``Nip19Enum`` value, e.g. ``"note"``.

    Variant classes are named ``Nip19Enum.NOTE``; only the last segment is kept.
    """
    return type(decoded).__name__.rsplit(".", 1)[-1].lower()


def decode_identity_code(code: str) -> IdentityPointer:
    """Decode an identity code into a public key and relay hints.

    Args:
        code: Identity code without the ``nostr:`` prefix.

    Returns:
        The decoded [IdentityPointer][notebrotr.nips.nip19.IdentityPointer].

    Raises:
        UnsupportedEntityError: If the code decodes to a non-pubkey entity.
        DecodeError: If the code is neither valid NIP-19 nor a 64-char key.
    """
    try:
        decoded = Nip19.from_bech32(code).as_enum()
    except (NostrSdkError, ValueError) as e:
        if len(code) == RAW_PUBKEY_LENGTH:
            return IdentityPointer(pubkey=code)
        raise DecodeError(f"Failed to decode identity code: {e}", code) from e

    if isinstance(decoded, Nip19Enum.PUBKEY):
        return IdentityPointer(pubkey=decoded.npub.to_hex())

    if isinstance(decoded, Nip19Enum.PROFILE):
        profile = decoded.nprofile
        relays = tuple(str(relay) for relay in profile.relays() or ())
        return IdentityPointer(pubkey=profile.public_key().to_hex(), relays=relays)

    raise UnsupportedEntityError(code, _entity_type(decoded))


def encode_npub(pubkey: str) -> str | None:
    """Return the bech32 ``npub`` for a hex public key, or None if invalid."""
    try:
        return PublicKey.parse(pubkey).to_bech32()
    except (NostrSdkError, ValueError):
        return None
