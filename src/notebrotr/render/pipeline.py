"""
Render pipeline orchestration.

A [Pipeline][notebrotr.render.pipeline.Pipeline] runs an explicit, ordered
list of [Stage][notebrotr.render.pipeline.Stage] functions over an event's
content, each consuming the complete output of the previous one, and hands
the result to the [MarkdownEngine][notebrotr.render.markdown.MarkdownEngine]:

```text
identities -> entities -> images -> videos -> audio -> typography
    -> line_breaks (kind 1 only) -> title -> markdown engine -> HTML
```

Only the identity stage suspends (on profile lookups). Failures inside it
degrade to the original text; a markdown engine failure raises
[RenderError][notebrotr.core.exceptions.RenderError] to the caller.

Examples:
    ```python
    from notebrotr.models import Event
    from notebrotr.render import Pipeline, RenderConfig

    pipeline = Pipeline(config=RenderConfig.from_yaml("render.yaml"))
    html = await pipeline.process_all(Event.from_dict(raw_event))
    ```
"""

from __future__ import annotations

import inspect
import re
import time
from collections.abc import Awaitable, Callable
from typing import NamedTuple

from notebrotr.core.logger import Logger
from notebrotr.core.metrics import RENDER_DURATION_SECONDS
from notebrotr.models.event import Event

from .configs import RenderConfig
from .entities import process_events_entities, process_users_entities
from .markdown import MarkdownEngine
from .media import process_audio_urls, process_image_urls, process_video_urls
from .metadata import get_event_data
from .profiles import ProfileLoader, RelayProfileLoader
from .typography import process_smarty_pants


LINE_BREAK_MARKER = "<br/>"


class Stage(NamedTuple):
    """A named content transform.

    Attributes:
        name: Identifier used in debug logs.
        func: ``(content, event) -> content``, optionally a coroutine.
    """

    name: str
    func: Callable[[str, Event], str | Awaitable[str]]


class Pipeline:
    """Converts event content to HTML.

    Args:
        loader: Profile collaborator for identity substitution. Defaults to a
            [RelayProfileLoader][notebrotr.render.profiles.RelayProfileLoader]
            over ``config.lookup.relays``.
        config: Render configuration. Defaults to ``RenderConfig()``.
        engine: Markdown engine. Defaults to one built from ``config.markdown``.
    """

    def __init__(
        self,
        loader: ProfileLoader | None = None,
        config: RenderConfig | None = None,
        engine: MarkdownEngine | None = None,
    ) -> None:
        self._config = config or RenderConfig()
        self._loader = loader or RelayProfileLoader(
            self._config.lookup.relays, timeout=self._config.lookup.fetch_timeout
        )
        self._engine = engine or MarkdownEngine(self._config.markdown)
        self._logger = Logger(__name__)
        self._stages: tuple[Stage, ...] = (
            Stage("identities", self._substitute_identities),
            Stage("entities", self._normalize_entities),
            Stage("images", lambda content, _event: process_image_urls(content) or ""),
            Stage("videos", self._embed_videos),
            Stage("audio", lambda content, _event: process_audio_urls(content) or ""),
            Stage("typography", lambda content, _event: process_smarty_pants(content) or ""),
            Stage("line_breaks", self._insert_line_breaks),
            Stage("title", self._strip_title),
        )

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def loader(self) -> ProfileLoader:
        return self._loader

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    # -------------------------------------------------------------------------
    # Stages
    # -------------------------------------------------------------------------

    async def _substitute_identities(self, content: str, _event: Event) -> str:
        return await process_users_entities(
            content,
            self._loader,
            timeout=self._config.lookup.timeout,
            max_concurrency=self._config.lookup.max_concurrency,
        )

    def _normalize_entities(self, content: str, _event: Event) -> str:
        return (
            process_events_entities(
                content,
                entity_text_length=self._config.entity_text_length,
                viewer_url=self._config.viewer_url,
            )
            or ""
        )

    def _embed_videos(self, content: str, _event: Event) -> str:
        return (
            process_video_urls(
                content, type_from_extension=self._config.media.video_type_from_extension
            )
            or ""
        )

    @staticmethod
    def _insert_line_breaks(content: str, event: Event) -> str:
        if not event.is_text_note:
            return content
        return content.replace("\n", "\n" + LINE_BREAK_MARKER)

    def _strip_title(self, content: str, event: Event) -> str:
        # Content has been through typography, so compare against the converted title
        title = process_smarty_pants(get_event_data(event, self._config).title) or ""
        heading = re.compile(rf"^# {re.escape(title)}[ \t]*$", re.MULTILINE)
        return heading.sub("", content, count=1)

    # -------------------------------------------------------------------------
    # Orchestration
    # -------------------------------------------------------------------------

    async def process_content(self, event: Event) -> str:
        """Run every stage over the event content.

        Returns:
            The markdown text handed to the engine by
            [process_all()][notebrotr.render.pipeline.Pipeline.process_all].
        """
        content = event.content
        for stage in self._stages:
            result = stage.func(content, event)
            if inspect.isawaitable(result):
                result = await result
            content = result
            self._logger.debug("stage_completed", stage=stage.name, length=len(content))
        return content

    async def process_all(self, event: Event) -> str:
        """Render the event content to HTML.

        Raises:
            RenderError: If the markdown engine fails.
        """
        start = time.monotonic()
        self._logger.debug("render_started", event_id=event.id, kind=event.kind)

        html = self._engine.render(await self.process_content(event))

        duration = time.monotonic() - start
        RENDER_DURATION_SECONDS.labels(kind=str(event.kind)).observe(duration)
        self._logger.info(
            "render_completed", event_id=event.id, kind=event.kind, duration_s=round(duration, 3)
        )
        return html


async def process_all(
    event: Event,
    loader: ProfileLoader | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render *event* with a one-off [Pipeline][notebrotr.render.pipeline.Pipeline]."""
    return await Pipeline(loader=loader, config=config).process_all(event)
