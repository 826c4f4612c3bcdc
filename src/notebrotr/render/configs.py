"""Configuration models for the render pipeline.

Every constant the renderer depends on (timezone, markdown features, lookup
limits, viewer URL) is an explicit Pydantic field with a default matching
the stock behavior, so that a partial YAML file only needs to name what it
overrides.

Examples:
    ```yaml
    timezone: Europe/Rome
    lookup:
      max_concurrency: 20
      timeout: 5.0
      relays:
        - wss://relay.damus.io
    markdown:
      tables: false
    ```

See Also:
    [Pipeline][notebrotr.render.pipeline.Pipeline]: Consumes
        [RenderConfig][notebrotr.render.configs.RenderConfig].
    [load_yaml()][notebrotr.core.yaml.load_yaml]: YAML loading used by
        [from_yaml()][notebrotr.render.configs.RenderConfig.from_yaml].
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, ValidationError, field_validator

from notebrotr.core.exceptions import ConfigurationError
from notebrotr.core.yaml import load_yaml


DEFAULT_RELAYS: tuple[str, ...] = (
    "wss://relay.damus.io",
    "wss://nos.lol",
    "wss://relay.nostr.band",
)


class MarkdownConfig(BaseModel):
    """Features enabled on the markdown engine.

    ``html`` must stay enabled for the embed tags and ``<br/>`` markers
    inserted by earlier stages to survive rendering.
    """

    linkify: bool = Field(default=True, description="Turn bare URLs into links")
    tables: bool = Field(default=True, description="GFM table support")
    strikethrough: bool = Field(default=True, description="GFM ~~strikethrough~~ support")
    html: bool = Field(default=True, description="Pass raw HTML through")


class LookupConfig(BaseModel):
    """Identity lookup limits and the relays used by the default loader.

    ``None`` for ``max_concurrency`` or ``timeout`` means unbounded: every
    reference in a note is looked up at once and the stage waits for all
    of them however long they take.
    """

    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        le=1000,
        description="Maximum simultaneous profile lookups per render (None = unbounded)",
    )
    timeout: float | None = Field(
        default=None,
        gt=0.0,
        le=300.0,
        description="Seconds before a single lookup is abandoned (None = no timeout)",
    )
    relays: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RELAYS),
        description="Relays queried by RelayProfileLoader in addition to relay hints",
    )
    fetch_timeout: float = Field(
        default=10.0,
        ge=0.1,
        le=120.0,
        description="Relay fetch timeout for RelayProfileLoader",
    )


class MediaConfig(BaseModel):
    """Media embedding options."""

    video_type_from_extension: bool = Field(
        default=False,
        description="Declare video/<ext> instead of the fixed video/mp4",
    )


class RenderConfig(BaseModel):
    """Top-level render pipeline configuration.

    Attributes:
        timezone: IANA zone used for note titles and formatted dates.
        summary_length: Characters of content kept in a note summary.
        entity_text_length: Characters of an entity shown as link text.
        viewer_url: Base URL that ``nostr:`` link targets are rewritten to.
        markdown: [MarkdownConfig][notebrotr.render.configs.MarkdownConfig].
        lookup: [LookupConfig][notebrotr.render.configs.LookupConfig].
        media: [MediaConfig][notebrotr.render.configs.MediaConfig].
    """

    timezone: str = Field(default="UTC", description="IANA timezone for dates")
    summary_length: int = Field(default=200, ge=1, description="Note summary length")
    entity_text_length: int = Field(default=24, ge=1, description="Entity link text length")
    viewer_url: str = Field(default="https://njump.me/", description="External viewer base URL")
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    media: MediaConfig = Field(default_factory=MediaConfig)

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"unknown timezone: {v}"
            raise ValueError(msg) from e
        return v

    @field_validator("viewer_url")
    @classmethod
    def _validate_viewer_url(cls, v: str) -> str:
        if not v.startswith(("https://", "http://")):
            msg = f"viewer_url must be an http(s) URL, got {v!r}"
            raise ValueError(msg)
        return v if v.endswith("/") else v + "/"

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If the data violates the schema.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid render configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML or the schema is invalid.
        """
        return cls.from_dict(load_yaml(config_path))
