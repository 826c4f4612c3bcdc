"""Identity substitution and NIP-19 entity normalization.

Two stages of the render pipeline operate on NIP-19 entities:

* [process_users_entities()][notebrotr.render.entities.process_users_entities]
  resolves every ``nostr:npub1...`` / ``nostr:nprofile1...`` reference
  concurrently and replaces it with a markdown link labelled with the
  profile's short name.
* [process_events_entities()][notebrotr.render.entities.process_events_entities]
  turns bare and ``nostr:``-prefixed entities into markdown links pointing
  at an external viewer.

Each pass emits text that the next pass does not match again with the
pattern that produced it, so a single call always terminates and a fully
normalized string is left unchanged.
"""

from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING

from notebrotr.nips.nip19 import EVENT_ENTITY_PREFIXES, NOSTR_URI_SCHEME, PUBKEY_ENTITY_PREFIXES

from .profiles import get_profile


if TYPE_CHECKING:
    from notebrotr.models.profile import Profile

    from .profiles import ProfileLoader


DEFAULT_VIEWER_URL = "https://njump.me/"
DEFAULT_ENTITY_TEXT_LENGTH = 24

_BECH32_BODY = r"[0-9A-Za-z_]+"
_ENTITY = "(?:{}){}".format(
    "|".join((*EVENT_ENTITY_PREFIXES, *PUBKEY_ENTITY_PREFIXES)),
    _BECH32_BODY,
)

_PREFIXED_PUBKEY_RE = re.compile(
    "{}((?:{}){})".format(NOSTR_URI_SCHEME, "|".join(PUBKEY_ENTITY_PREFIXES), _BECH32_BODY)
)

# Bare entity at a token boundary, also inside a link target: [text](npub1...)
_BARE_ENTITY_RE = re.compile(rf"(^|\s|\()({_ENTITY})(?=\s|\)|$)", re.MULTILINE)

_PREFIXED_ENTITY_RE = re.compile(rf"(^|\s){NOSTR_URI_SCHEME}({_ENTITY})(?=\s|$)", re.MULTILINE)

_NOSTR_LINK_TARGET_RE = re.compile(rf"\({NOSTR_URI_SCHEME}([a-zA-Z0-9]+)\)")

_MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


async def process_users_entities(
    content: str,
    loader: ProfileLoader,
    *,
    timeout: float | None = None,  # noqa: ASYNC109
    max_concurrency: int | None = None,
) -> str:
    """Replace resolvable identity references with named markdown links.

    All references are looked up concurrently and the stage resumes once
    every lookup has settled. Replacements are then applied in a single
    left-to-right pass over the recorded match positions, so repeated
    references are each substituted.

    Args:
        content: Raw note content.
        loader: Profile collaborator passed to
            [get_profile()][notebrotr.render.profiles.get_profile].
        timeout: Per-lookup timeout in seconds (``None`` = none).
        max_concurrency: Cap on simultaneous lookups (``None`` = unbounded).

    Returns:
        The content with ``nostr:npub1...`` replaced by
        ``[<short name>](nostr:npub1...)`` where a profile was found.
        Unresolved references are left as they were. Never raises.

    Examples:
        ```python
        await process_users_entities("nostr:npub1abc hello", loader)
        # "[alice](nostr:npub1abc) hello"
        ```
    """
    matches = list(_PREFIXED_PUBKEY_RE.finditer(content))
    if not matches:
        return content

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _resolve(code: str) -> Profile | None:
        if semaphore is None:
            return await get_profile(code, loader, timeout=timeout)
        async with semaphore:
            return await get_profile(code, loader, timeout=timeout)

    profiles = await asyncio.gather(*(_resolve(match.group(1)) for match in matches))

    parts: list[str] = []
    cursor = 0
    for match, profile in zip(matches, profiles, strict=True):
        parts.append(content[cursor : match.start()])
        if profile is None:
            parts.append(match.group(0))
        else:
            parts.append(f"[{profile.short_name}]({match.group(0)})")
        cursor = match.end()
    parts.append(content[cursor:])
    return "".join(parts)


def process_events_entities(
    content: str | None,
    *,
    entity_text_length: int = DEFAULT_ENTITY_TEXT_LENGTH,
    viewer_url: str = DEFAULT_VIEWER_URL,
) -> str | None:
    """Rewrite NIP-19 entities into viewer links.

    Three passes, each over the previous pass's output:

    1. bare entities at a token boundary get a ``nostr:`` prefix;
    2. prefixed entities at a token boundary become
       ``[<truncated entity>...](nostr:<entity>)``;
    3. ``(nostr:<entity>)`` link targets become ``(<viewer_url><entity>)``.

    ``None`` passes through unchanged.
    """
    if content is None:
        return None

    content = _BARE_ENTITY_RE.sub(rf"\1{NOSTR_URI_SCHEME}\2", content)
    content = _PREFIXED_ENTITY_RE.sub(
        lambda m: (
            f"{m.group(1)}[{m.group(2)[:entity_text_length]}...]"
            f"({NOSTR_URI_SCHEME}{m.group(2)})"
        ),
        content,
    )
    return _NOSTR_LINK_TARGET_RE.sub(lambda m: f"({viewer_url}{m.group(1)})", content)


def clean_markdown_links(content: str | None) -> str | None:
    """Replace every ``[text](target)`` markdown link with its text.

    Used for plain-text previews. ``None`` passes through unchanged.
    """
    if content is None:
        return None
    return _MARKDOWN_LINK_RE.sub(r"\1", content)
