"""Derived display view of an [Event][notebrotr.models.event.Event].

Computed on demand by
[get_event_data()][notebrotr.render.metadata.get_event_data]; never stored.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EventData:
    """Title, summary and header image extracted from an event.

    Attributes:
        id: Event ID as 64-char hex.
        kind: Integer event kind.
        created_at: Unix timestamp of event creation.
        title: Article title, or ``"Note of <date>"`` for short notes.
        image: Header image URL, if the event carries an ``image`` tag.
        summary: Article summary, or a truncated content preview for notes.
        content: Raw event content.
    """

    id: str
    kind: int
    created_at: int
    title: str
    image: str | None
    summary: str | None
    content: str
