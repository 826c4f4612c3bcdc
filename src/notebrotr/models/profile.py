"""
Display metadata for a Nostr public key.

A [Profile][notebrotr.models.profile.Profile] is resolved by a profile loader
(see [notebrotr.render.profiles][]) from the author's latest kind-0 event and
lives only for the duration of a single render call.

See Also:
    [RelayProfileLoader][notebrotr.render.profiles.RelayProfileLoader]: Default
        loader producing profiles from relay data.
    [process_users_entities()][notebrotr.render.entities.process_users_entities]:
        Substitutes ``short_name`` for identity references.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ._validation import validate_str_no_null


# Number of npub characters kept when no name is available
_SHORT_NPUB_LENGTH = 12


@dataclass(frozen=True, slots=True)
class Profile:
    """Immutable display metadata for one public key.

    Attributes:
        pubkey: Public key as 64-char hex.
        name: ``name`` field of the kind-0 metadata.
        display_name: ``display_name`` field of the kind-0 metadata.
        picture: Avatar URL.
        about: Free-form biography.
        nip05: NIP-05 internet identifier.
        npub: Bech32 encoding of ``pubkey``, when known.
        relays: Relay hints the profile was resolved through.

    Examples:
        ```python
        profile = Profile(pubkey="b" * 64, name="alice")
        profile.short_name  # "alice"
        ```
    """

    pubkey: str
    name: str | None = None
    display_name: str | None = None
    picture: str | None = None
    about: str | None = None
    nip05: str | None = None
    npub: str | None = None
    relays: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate the public key and freeze the relay list."""
        validate_str_no_null(self.pubkey, "pubkey")
        object.__setattr__(self, "relays", tuple(self.relays))

    @property
    def short_name(self) -> str:
        """Best available display name.

        Falls back from ``name`` to ``display_name`` to a truncated npub (or
        hex key) so that a resolved profile always has something to show.
        """
        for candidate in (self.name, self.display_name):
            if candidate and candidate.strip():
                return candidate.strip()
        if self.npub:
            return self.npub[:_SHORT_NPUB_LENGTH] + "…"
        return self.pubkey[:8] + "…"

    @classmethod
    def from_metadata_json(
        cls,
        pubkey: str,
        content: str,
        *,
        npub: str | None = None,
        relays: tuple[str, ...] = (),
    ) -> Profile:
        """Parse the JSON content of a kind-0 event.

        Non-string values are dropped; unknown keys are ignored.

        Raises:
            ValueError: If *content* is not a JSON object.
        """
        data: Any = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError(f"metadata content must be a JSON object, got {type(data).__name__}")

        def _text(key: str) -> str | None:
            value = data.get(key)
            return value if isinstance(value, str) and value else None

        return cls(
            pubkey=pubkey,
            name=_text("name"),
            display_name=_text("display_name") or _text("displayName"),
            picture=_text("picture"),
            about=_text("about"),
            nip05=_text("nip05"),
            npub=npub,
            relays=relays,
        )
