"""
Pytest configuration and shared fixtures for notebrotr tests.

Provides:
- Event factories for short notes and long-form articles
- Real Nostr key material for NIP-19 encoding
- Mock profile loaders
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from nostr_sdk import Keys

from notebrotr.models import Event, Profile


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Key Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def keys() -> Keys:
    """A freshly generated key pair (session-wide)."""
    return Keys.generate()


@pytest.fixture(scope="session")
def pubkey_hex(keys: Keys) -> str:
    return keys.public_key().to_hex()


@pytest.fixture(scope="session")
def npub(keys: Keys) -> str:
    return keys.public_key().to_bech32()


# ============================================================================
# Event Fixtures
# ============================================================================


def _make_event(
    content: str = "Test content",
    kind: int = 1,
    created_at: int = 1_700_000_000,
    tags: list[list[str]] | None = None,
    event_id: str = "a" * 64,
    pubkey: str = "b" * 64,
) -> Event:
    return Event(
        id=event_id,
        pubkey=pubkey,
        kind=kind,
        created_at=created_at,
        tags=tags or [],
        content=content,
    )


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Factory building an Event with overridable fields."""
    return _make_event


@pytest.fixture
def note_event() -> Event:
    """Kind 1 short note."""
    return _make_event(content="hello\nworld")


@pytest.fixture
def article_event() -> Event:
    """Kind 30023 long-form article with title, summary and image tags."""
    return _make_event(
        kind=30023,
        content="# Hello\n\nBody of the article.",
        tags=[
            ["d", "hello"],
            ["title", "Hello"],
            ["summary", "A short summary"],
            ["image", "https://example.com/header.png"],
        ],
    )


# ============================================================================
# Loader Fixtures
# ============================================================================


@pytest.fixture
def alice() -> Profile:
    return Profile(pubkey="b" * 64, name="alice")


def _make_loader(result: Any = None, side_effect: Any = None) -> MagicMock:
    loader = MagicMock()
    loader.load = AsyncMock(return_value=result, side_effect=side_effect)
    return loader


@pytest.fixture
def make_loader() -> Callable[..., MagicMock]:
    """Factory for a loader whose ``load`` coroutine is an AsyncMock."""
    return _make_loader


@pytest.fixture
def empty_loader() -> MagicMock:
    """Loader that never finds a profile."""
    return _make_loader(result=None)
