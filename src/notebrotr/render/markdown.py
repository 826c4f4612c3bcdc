"""Markdown to HTML conversion.

Thin wrapper over ``markdown-it-py`` configured from
[MarkdownConfig][notebrotr.render.configs.MarkdownConfig]. Starts from the
CommonMark preset and enables the GFM table and strikethrough rules and
bare-URL linkification (backed by ``linkify-it-py``) as configured.
"""

from __future__ import annotations

from markdown_it import MarkdownIt

from notebrotr.core.exceptions import RenderError

from .configs import MarkdownConfig


class MarkdownEngine:
    """Synchronous markdown renderer.

    Examples:
        ```python
        engine = MarkdownEngine()
        engine.render("~~old~~ https://example.com")
        # '<p><s>old</s> <a href="https://example.com">https://example.com</a></p>\\n'
        ```
    """

    def __init__(self, config: MarkdownConfig | None = None) -> None:
        self._config = config or MarkdownConfig()
        self._md = self._build(self._config)

    @property
    def config(self) -> MarkdownConfig:
        return self._config

    @staticmethod
    def _build(config: MarkdownConfig) -> MarkdownIt:
        md = MarkdownIt("commonmark", {"html": config.html, "linkify": config.linkify})
        rules = [
            rule
            for rule, enabled in (
                ("table", config.tables),
                ("strikethrough", config.strikethrough),
                ("linkify", config.linkify),
            )
            if enabled
        ]
        if rules:
            md.enable(rules)
        return md

    def render(self, text: str) -> str:
        """Convert *text* to HTML.

        Raises:
            RenderError: If the underlying engine fails.
        """
        try:
            return self._md.render(text)
        except Exception as e:
            raise RenderError(f"Markdown rendering failed: {e}") from e
