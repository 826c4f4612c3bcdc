"""Nostr client operations for profile resolution.

Provides a client factory and a fetch helper that retrieves the latest
signature-verified kind-0 (profile metadata) event of an author from a set
of relays. Used by
[RelayProfileLoader][notebrotr.render.profiles.RelayProfileLoader].

Examples:
    ```python
    from notebrotr.utils.protocol import fetch_metadata_event

    event = await fetch_metadata_event(pubkey, ["wss://relay.damus.io"], timeout=5.0)
    if event is not None:
        print(event.content())
    ```
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterable
from datetime import timedelta
from typing import TYPE_CHECKING

from nostr_sdk import ClientBuilder, Filter, Kind, NostrSdkError, PublicKey, RelayUrl

from notebrotr.models.constants import EventKind


if TYPE_CHECKING:
    from nostr_sdk import Client
    from nostr_sdk import Event as NostrEvent


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def create_client() -> Client:
    """Create a read-only Nostr client (call ``add_relay()`` before use)."""
    return ClientBuilder().build()


async def fetch_metadata_event(
    pubkey: str,
    relays: Iterable[str],
    *,
    timeout: float = DEFAULT_TIMEOUT,  # noqa: ASYNC109
) -> NostrEvent | None:
    """Fetch the newest verified kind-0 event of *pubkey* from *relays*.

    Relay URLs that fail to parse are logged and skipped. The client is
    shut down before returning, including on error.

    Args:
        pubkey: Author public key as 64-char hex.
        relays: Relay URLs to query.
        timeout: Fetch timeout in seconds.

    Returns:
        The most recent metadata event, or ``None`` if no relay returned one
        (or no relay URL was usable).

    Raises:
        NostrSdkError: If *pubkey* is invalid or the fetch fails.
        OSError: On connection-level failures.
    """
    author = PublicKey.parse(pubkey)

    client = create_client()
    try:
        added = 0
        for url in dict.fromkeys(relays):
            try:
                await client.add_relay(RelayUrl.parse(url))
                added += 1
            except NostrSdkError as e:
                logger.debug("relay_skipped url=%s error=%s", url, e)
        if not added:
            return None

        await client.connect()
        event_filter = Filter().author(author).kind(Kind(EventKind.SET_METADATA)).limit(1)
        events = await client.fetch_events(event_filter, timedelta(seconds=timeout))

        latest: NostrEvent | None = None
        for evt in events.to_vec():
            if not evt.verify():
                continue
            if latest is None or evt.created_at().as_secs() > latest.created_at().as_secs():
                latest = evt
        return latest
    finally:
        # nostr-sdk Rust FFI can raise arbitrary exception types during shutdown.
        with contextlib.suppress(Exception):
            await client.shutdown()
