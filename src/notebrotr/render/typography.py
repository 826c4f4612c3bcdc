"""SmartyPants-style typographic replacements.

Replacements run strictly in table order: ``---`` must be replaced before
``--``, otherwise an em dash run would leave a stray hyphen.
"""

from __future__ import annotations

import re


SMARTY_PANTS_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<<|»"), "&laquo;"),
    (re.compile(r">>|«"), "&raquo;"),
    (re.compile(r"\.\.\."), "&hellip;"),
    (re.compile(r"---"), "&mdash;"),
    (re.compile(r"--"), "&mdash;"),
)


def process_smarty_pants(content: str | None) -> str | None:
    """Replace quote, ellipsis and dash sequences with HTML entities.

    ``None`` passes through unchanged.

    Examples:
        ```python
        process_smarty_pants("a---b--c")  # "a&mdash;b&mdash;c"
        ```
    """
    if content is None:
        return None
    for pattern, replacement in SMARTY_PANTS_REPLACEMENTS:
        content = pattern.sub(replacement, content)
    return content
