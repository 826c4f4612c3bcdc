"""Metadata extraction and thread-root detection for events.

Both functions are pure: they read tags and content from an
[Event][notebrotr.models.event.Event] and never mutate it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from notebrotr.models.constants import MARKER_INDEX, THREAD_MARKERS, TagName
from notebrotr.models.event_data import EventData
from notebrotr.utils.dates import format_date

from .configs import RenderConfig


if TYPE_CHECKING:
    from notebrotr.models.event import Event


DEFAULT_ARTICLE_TITLE = "No title"
NOTE_TITLE_PREFIX = "Note of "
SUMMARY_ELLIPSIS = "..."


def is_root_note(event: Event) -> bool:
    """Return True unless an ``e`` tag marks the event as a reply.

    An ``e`` tag with ``root`` or ``reply`` at its marker position (NIP-10)
    makes the event part of a thread rather than a root note.
    """
    for tag in event.tags:
        if (
            len(tag) > MARKER_INDEX
            and tag[0] == TagName.EVENT
            and tag[MARKER_INDEX] in THREAD_MARKERS
        ):
            return False
    return True


def get_event_data(event: Event, config: RenderConfig | None = None) -> EventData:
    """Derive title, summary and image for display.

    Long-form articles (kind 30023) take title and summary from their tags.
    Every other kind is treated as a short note: the title is built from
    the creation date and the summary is a truncated content preview.

    Args:
        event: The event to describe.
        config: Supplies the timezone and summary length. Defaults to
            ``RenderConfig()``.

    Returns:
        A fresh [EventData][notebrotr.models.event_data.EventData].
    """
    config = config or RenderConfig()

    if event.is_long_form:
        title = event.tag_value(TagName.TITLE) or DEFAULT_ARTICLE_TITLE
        summary = event.tag_value(TagName.SUMMARY) or None
    else:
        title = NOTE_TITLE_PREFIX + format_date(event.created_at, tz=config.tzinfo)
        summary = event.content[: config.summary_length] + SUMMARY_ELLIPSIS

    return EventData(
        id=event.id,
        kind=event.kind,
        created_at=event.created_at,
        title=title,
        image=event.tag_value(TagName.IMAGE) or None,
        summary=summary,
        content=event.content,
    )
