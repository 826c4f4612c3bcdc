"""Core layer providing logging, errors, configuration loading and metrics.

Sits in the middle of the diamond DAG -- depends on nothing but third-party
libraries and is depended upon by ``notebrotr.render``.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][notebrotr.core.logger.Logger].
    NoteBrotrError: Root of the exception hierarchy.
        See [notebrotr.core.exceptions][notebrotr.core.exceptions].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
    PROFILE_LOOKUPS, RENDER_DURATION_SECONDS: Prometheus metrics.
"""

from .exceptions import (
    ConfigurationError,
    DecodeError,
    LoaderError,
    NoteBrotrError,
    RenderError,
    UnsupportedEntityError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .metrics import PROFILE_LOOKUPS, RENDER_DURATION_SECONDS, LookupOutcome
from .yaml import load_yaml


__all__ = [
    "PROFILE_LOOKUPS",
    "RENDER_DURATION_SECONDS",
    "ConfigurationError",
    "DecodeError",
    "Logger",
    "LoaderError",
    "LookupOutcome",
    "NoteBrotrError",
    "RenderError",
    "StructuredFormatter",
    "UnsupportedEntityError",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
