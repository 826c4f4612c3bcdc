r"""notebrotr -- Nostr event content rendering.

Converts raw Nostr event content into HTML: resolves identity references to
display names, links NIP-19 entities, embeds media URLs, applies
typographic cleanup and renders markdown.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
               render          Pipeline stages and orchestration
             /   |   \
          core  nips  utils    Logging/errors/config, NIP-19, dates/client
             \   |   /
              models           Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from notebrotr import Pipeline``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("notebrotr")

__all__ = [
    "Event",
    "EventData",
    "Logger",
    "MarkdownEngine",
    "Pipeline",
    "Profile",
    "RelayProfileLoader",
    "RenderConfig",
    "format_date",
    "get_event_data",
    "is_root_note",
    "process_all",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Event": ("notebrotr.models", "Event"),
    "EventData": ("notebrotr.models", "EventData"),
    "Profile": ("notebrotr.models", "Profile"),
    "Logger": ("notebrotr.core", "Logger"),
    "format_date": ("notebrotr.utils.dates", "format_date"),
    "MarkdownEngine": ("notebrotr.render", "MarkdownEngine"),
    "Pipeline": ("notebrotr.render", "Pipeline"),
    "RelayProfileLoader": ("notebrotr.render", "RelayProfileLoader"),
    "RenderConfig": ("notebrotr.render", "RenderConfig"),
    "get_event_data": ("notebrotr.render", "get_event_data"),
    "is_root_note": ("notebrotr.render", "is_root_note"),
    "process_all": ("notebrotr.render", "process_all"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'notebrotr' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
