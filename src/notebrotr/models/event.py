"""
Immutable Nostr event record consumed by the render pipeline.

Holds the six NIP-01 fields the renderer reads (signature excluded) in a
frozen dataclass. Instances are built directly, from a JSON-like mapping via
[from_dict()][notebrotr.models.event.Event.from_dict], or from a
``nostr_sdk.Event`` via
[from_nostr_event()][notebrotr.models.event.Event.from_nostr_event].

See Also:
    [notebrotr.models.event_data][]: Derived display view computed from an
        [Event][notebrotr.models.event.Event].
    [notebrotr.render.pipeline][]: Renders the event content to HTML.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ._validation import (
    freeze_tags,
    validate_kind,
    validate_str_no_null,
    validate_timestamp,
)
from .constants import EVENT_KIND_MAX, EventKind


if TYPE_CHECKING:
    from nostr_sdk import Event as NostrEvent


Tag = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable Nostr event.

    Tags are normalized to a tuple of string tuples on construction so the
    record stays hashable and read-only regardless of the input sequence
    types.

    Attributes:
        id: Event ID as 64-char hex.
        pubkey: Author public key as 64-char hex.
        kind: Integer event kind (1 = short note, 30023 = article).
        created_at: Unix timestamp of event creation.
        tags: Ordered tag records; index 0 is the tag name.
        content: Raw event content.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If a field is out of range or contains null bytes.

    Examples:
        ```python
        event = Event(
            id="a" * 64,
            pubkey="b" * 64,
            kind=1,
            created_at=0,
            tags=[["e", "c" * 64, "", "reply"]],
            content="hello",
        )
        event.tag_value("e")  # "cccc..."
        ```
    """

    id: str
    pubkey: str
    kind: int
    created_at: int
    tags: tuple[Tag, ...] = field(default=())
    content: str = ""

    def __post_init__(self) -> None:
        """Validate field types and freeze the tag sequence."""
        validate_str_no_null(self.id, "id")
        validate_str_no_null(self.pubkey, "pubkey")
        validate_kind(self.kind, "kind", EVENT_KIND_MAX)
        validate_timestamp(self.created_at, "created_at")
        validate_str_no_null(self.content, "content")
        object.__setattr__(self, "tags", freeze_tags(self.tags, "tags"))

    @property
    def is_text_note(self) -> bool:
        """True for kind 1 short notes."""
        return self.kind == EventKind.TEXT_NOTE

    @property
    def is_long_form(self) -> bool:
        """True for kind 30023 long-form articles."""
        return self.kind == EventKind.LONG_FORM_CONTENT

    def tag_value(self, name: str) -> str | None:
        """Return the primary value of the first tag named *name*.

        Tags with no value at index 1 yield ``None`` rather than raising.
        """
        for tag in self.tags:
            if tag and tag[0] == name:
                return tag[1] if len(tag) > 1 else None
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        """Build an event from a NIP-01 JSON object.

        Extra keys such as ``sig`` are ignored.
        """
        return cls(
            id=data["id"],
            pubkey=data["pubkey"],
            kind=data["kind"],
            created_at=data["created_at"],
            tags=data.get("tags", ()),
            content=data.get("content", ""),
        )

    @classmethod
    def from_nostr_event(cls, event: NostrEvent) -> Event:
        """Build an event from a ``nostr_sdk.Event``."""
        return cls(
            id=event.id().to_hex(),
            pubkey=event.author().to_hex(),
            kind=event.kind().as_u16(),
            created_at=event.created_at().as_secs(),
            tags=[tuple(tag.as_vec()) for tag in event.tags().to_vec()],
            content=event.content(),
        )
