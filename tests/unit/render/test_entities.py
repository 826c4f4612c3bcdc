"""
Unit tests for render.entities module.

Tests:
- process_users_entities(): concurrent identity substitution
- process_events_entities(): NIP-19 entity linking
- clean_markdown_links()
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from unittest.mock import MagicMock, patch

import pytest

from notebrotr.core.exceptions import LoaderError
from notebrotr.models import Profile
from notebrotr.nips.nip19 import IdentityPointer
from notebrotr.render.entities import (
    clean_markdown_links,
    process_events_entities,
    process_users_entities,
)


def _decode_as_is(code: str) -> IdentityPointer:
    return IdentityPointer(pubkey=code)


@pytest.fixture
def decode_as_is():
    """Treat every identity code as its own public key."""
    with patch("notebrotr.render.profiles.decode_identity_code", side_effect=_decode_as_is):
        yield


class _CountingLoader:
    """Loader recording the peak number of concurrent lookups."""

    def __init__(self, delay: float = 0.01) -> None:
        self.delay = delay
        self.active = 0
        self.peak = 0

    async def load(self, pubkey: str, relays: tuple[str, ...] = ()) -> Profile | None:
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.active -= 1
        return Profile(pubkey=pubkey, name="someone")


# ============================================================================
# process_users_entities
# ============================================================================


class TestProcessUsersEntities:
    @pytest.mark.asyncio
    async def test_resolved_reference(
        self, decode_as_is: None, make_loader: Callable[..., MagicMock], alice: Profile
    ) -> None:
        result = await process_users_entities("nostr:npub1abc hello", make_loader(result=alice))
        assert result == "[alice](nostr:npub1abc) hello"

    @pytest.mark.asyncio
    async def test_real_npub(
        self, npub: str, pubkey_hex: str, make_loader: Callable[..., MagicMock], alice: Profile
    ) -> None:
        loader = make_loader(result=alice)
        result = await process_users_entities(f"gm nostr:{npub}!", loader)

        assert result == f"gm [alice](nostr:{npub})!"
        loader.load.assert_awaited_once_with(pubkey_hex, ())

    @pytest.mark.asyncio
    async def test_unresolved_left_unchanged(
        self, decode_as_is: None, empty_loader: MagicMock
    ) -> None:
        content = "hi nostr:npub1abc"
        assert await process_users_entities(content, empty_loader) == content

    @pytest.mark.asyncio
    async def test_duplicates_all_replaced(
        self, decode_as_is: None, make_loader: Callable[..., MagicMock], alice: Profile
    ) -> None:
        loader = make_loader(result=alice)
        result = await process_users_entities("nostr:npub1abc and nostr:npub1abc", loader)

        assert result == "[alice](nostr:npub1abc) and [alice](nostr:npub1abc)"
        assert loader.load.await_count == 2

    @pytest.mark.asyncio
    async def test_mixed_outcomes(
        self, decode_as_is: None, make_loader: Callable[..., MagicMock], alice: Profile
    ) -> None:
        def _load(pubkey: str, relays: tuple[str, ...]) -> Profile | None:
            if pubkey == "npub1bad":
                raise LoaderError("relay unreachable")
            return alice if pubkey == "npub1abc" else None

        loader = make_loader(side_effect=_load)
        result = await process_users_entities(
            "nostr:npub1abc nostr:npub1bad nostr:nprofile1xyz", loader
        )
        assert result == "[alice](nostr:npub1abc) nostr:npub1bad nostr:nprofile1xyz"

    @pytest.mark.asyncio
    async def test_no_references_skips_loader(self, empty_loader: MagicMock) -> None:
        assert await process_users_entities("just text", empty_loader) == "just text"
        empty_loader.load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_event_entities_not_resolved(self, empty_loader: MagicMock) -> None:
        content = "see nostr:note1abc"
        assert await process_users_entities(content, empty_loader) == content
        empty_loader.load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_code_left_unchanged(self, empty_loader: MagicMock) -> None:
        content = "nostr:npub1notvalid"
        assert await process_users_entities(content, empty_loader) == content
        empty_loader.load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lookups_run_concurrently(self, decode_as_is: None) -> None:
        loader = _CountingLoader()
        content = " ".join(f"nostr:npub1user{i}" for i in range(5))
        await process_users_entities(content, loader)
        assert loader.peak == 5

    @pytest.mark.asyncio
    async def test_max_concurrency(self, decode_as_is: None) -> None:
        loader = _CountingLoader()
        content = " ".join(f"nostr:npub1user{i}" for i in range(5))
        result = await process_users_entities(content, loader, max_concurrency=2)

        assert loader.peak <= 2
        assert result.count("[someone]") == 5

    @pytest.mark.asyncio
    async def test_timeout_leaves_reference(self, decode_as_is: None) -> None:
        loader = _CountingLoader(delay=1.0)
        result = await process_users_entities("nostr:npub1slow", loader, timeout=0.01)
        assert result == "nostr:npub1slow"


# ============================================================================
# process_events_entities
# ============================================================================


class TestProcessEventsEntities:
    def test_bare_entity(self) -> None:
        assert process_events_entities("see note1abc") == (
            "see [note1abc...](https://njump.me/note1abc)"
        )

    def test_prefixed_entity(self) -> None:
        assert process_events_entities("nostr:nevent1qqq") == (
            "[nevent1qqq...](https://njump.me/nevent1qqq)"
        )

    def test_link_text_truncated(self) -> None:
        entity = "npub1" + "x" * 40
        result = process_events_entities(entity)
        assert result == f"[{entity[:24]}...](https://njump.me/{entity})"

    def test_custom_length_and_viewer(self) -> None:
        result = process_events_entities(
            "note1abcdef", entity_text_length=6, viewer_url="https://viewer.example/"
        )
        assert result == "[note1a...](https://viewer.example/note1abcdef)"

    def test_existing_link_target(self) -> None:
        assert process_events_entities("[alice](nostr:npub1abc)") == (
            "[alice](https://njump.me/npub1abc)"
        )

    def test_bare_link_target(self) -> None:
        assert process_events_entities("[alice](npub1abc)") == (
            "[alice](https://njump.me/npub1abc)"
        )

    def test_multiline(self) -> None:
        assert process_events_entities("first\nnote1abc\nlast") == (
            "first\n[note1abc...](https://njump.me/note1abc)\nlast"
        )

    def test_embedded_in_word_untouched(self) -> None:
        assert process_events_entities("xnote1abc") == "xnote1abc"

    def test_idempotent(self) -> None:
        once = process_events_entities("see note1abc and nostr:npub1xyz")
        assert process_events_entities(once) == once

    def test_none(self) -> None:
        assert process_events_entities(None) is None


class TestCleanMarkdownLinks:
    def test_links_replaced_by_text(self) -> None:
        assert clean_markdown_links("[alice](https://x.example) and [b](c)") == "alice and b"

    def test_plain_text(self) -> None:
        assert clean_markdown_links("no links") == "no links"

    def test_none(self) -> None:
        assert clean_markdown_links(None) is None
