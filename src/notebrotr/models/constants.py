"""Shared constants for the models layer.

Defines enumerations that are used across multiple model and render
modules. Placing them here avoids circular dependencies between the
models and render layers.

See Also:
    [notebrotr.models.event][]: Uses [EventKind][notebrotr.models.constants.EventKind]
        to classify events.
    [notebrotr.render.pipeline][]: Branches on the event kind when inserting
        explicit line breaks.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class EventKind(IntEnum):
    """Well-known Nostr event kinds handled by the renderer.

    Attributes:
        SET_METADATA: Kind 0 -- user profile metadata (NIP-01). Fetched by
            [RelayProfileLoader][notebrotr.render.profiles.RelayProfileLoader].
        TEXT_NOTE: Kind 1 -- short text note (NIP-01). Newlines are rendered
            as explicit line breaks.
        LONG_FORM_CONTENT: Kind 30023 -- long-form article (NIP-23). Title and
            summary come from tags.
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    LONG_FORM_CONTENT = 30_023


class TagName(StrEnum):
    """Tag names read by the metadata extractor and root detection.

    Attributes:
        EVENT: ``e`` tag referencing another event (NIP-10).
        TITLE: ``title`` tag of a long-form article (NIP-23).
        SUMMARY: ``summary`` tag of a long-form article (NIP-23).
        IMAGE: ``image`` tag carrying a header image URL (NIP-23).
    """

    EVENT = "e"
    TITLE = "title"
    SUMMARY = "summary"
    IMAGE = "image"


# NIP-10 marker values that make an ``e`` tag a thread reference
THREAD_MARKERS: frozenset[str] = frozenset({"root", "reply"})

# Position of the marker inside an ``e`` tag: ["e", <id>, <relay>, <marker>]
MARKER_INDEX = 3

EVENT_KIND_MAX = 65_535
