"""Content rendering: from raw event content to HTML.

Top of the diamond DAG. Each stage is a plain string transform that can be
used on its own; [Pipeline][notebrotr.render.pipeline.Pipeline] sequences
them and delegates the final conversion to
[MarkdownEngine][notebrotr.render.markdown.MarkdownEngine].

Attributes:
    Pipeline: Ordered stage runner producing HTML.
    RenderConfig: Pydantic configuration (timezone, markdown, lookups, media).
    ProfileLoader, RelayProfileLoader, get_profile: Identity resolution.
    process_users_entities, process_events_entities, clean_markdown_links:
        NIP-19 entity stages.
    process_image_urls, process_video_urls, process_audio_urls: Media embeds.
    process_smarty_pants: Typographic replacements.
    is_root_note, get_event_data: Event metadata helpers.
"""

from .configs import LookupConfig, MarkdownConfig, MediaConfig, RenderConfig
from .entities import clean_markdown_links, process_events_entities, process_users_entities
from .markdown import MarkdownEngine
from .media import process_audio_urls, process_image_urls, process_video_urls
from .metadata import get_event_data, is_root_note
from .pipeline import Pipeline, Stage, process_all
from .profiles import ProfileLoader, RelayProfileLoader, get_profile
from .typography import process_smarty_pants


__all__ = [
    "LookupConfig",
    "MarkdownConfig",
    "MarkdownEngine",
    "MediaConfig",
    "Pipeline",
    "ProfileLoader",
    "RelayProfileLoader",
    "RenderConfig",
    "Stage",
    "clean_markdown_links",
    "get_event_data",
    "get_profile",
    "is_root_note",
    "process_all",
    "process_audio_urls",
    "process_events_entities",
    "process_image_urls",
    "process_smarty_pants",
    "process_users_entities",
    "process_video_urls",
]
