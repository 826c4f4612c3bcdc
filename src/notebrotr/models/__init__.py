"""Pure frozen dataclasses with zero I/O for Nostr events and profiles.

The models layer is the foundation of the diamond DAG. It has **no
dependencies** on any other notebrotr package -- only the Python standard
library. Every model uses ``@dataclass(frozen=True, slots=True)`` and
validates in ``__post_init__`` so invalid instances never escape the
constructor.

Attributes:
    Event: Immutable event record with tag lookup and adapters from JSON
        mappings and ``nostr_sdk.Event``.
    EventData: Derived title/summary/image view of an event.
    Profile: Display metadata for a public key, with a ``short_name``
        fallback chain.
    EventKind: Event kinds the renderer branches on.
    TagName: Tag names read by the metadata extractor.
"""

from .constants import EVENT_KIND_MAX, MARKER_INDEX, THREAD_MARKERS, EventKind, TagName
from .event import Event, Tag
from .event_data import EventData
from .profile import Profile


__all__ = [
    "EVENT_KIND_MAX",
    "MARKER_INDEX",
    "THREAD_MARKERS",
    "Event",
    "EventData",
    "EventKind",
    "Profile",
    "Tag",
    "TagName",
]
