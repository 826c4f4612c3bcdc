"""Nostr Implementation Possibilities -- protocol-specific parsing.

The NIPs layer sits in the middle of the diamond DAG, depending on
[notebrotr.models][notebrotr.models] and the exception hierarchy in
[notebrotr.core.exceptions][notebrotr.core.exceptions].

Attributes:
    decode_identity_code: NIP-19 decoding of ``npub`` / ``nprofile`` codes
        (with raw 64-char hex fallback) into an
        [IdentityPointer][notebrotr.nips.nip19.IdentityPointer].
    encode_npub: Hex public key to bech32 ``npub``.
"""

from .nip19 import (
    EVENT_ENTITY_PREFIXES,
    NOSTR_URI_SCHEME,
    PUBKEY_ENTITY_PREFIXES,
    RAW_PUBKEY_LENGTH,
    IdentityPointer,
    decode_identity_code,
    encode_npub,
)


__all__ = [
    "EVENT_ENTITY_PREFIXES",
    "NOSTR_URI_SCHEME",
    "PUBKEY_ENTITY_PREFIXES",
    "RAW_PUBKEY_LENGTH",
    "IdentityPointer",
    "decode_identity_code",
    "encode_npub",
]
