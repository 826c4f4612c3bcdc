"""
Profile resolution for identity references.

The render pipeline does not know where profiles come from: it calls a
[ProfileLoader][notebrotr.render.profiles.ProfileLoader] with a public key
and relay hints. [RelayProfileLoader][notebrotr.render.profiles.RelayProfileLoader]
is the default implementation, fetching the author's latest kind-0 event
through ``nostr_sdk``. Applications with their own profile cache plug it in
by implementing the same ``load()`` coroutine.

[get_profile()][notebrotr.render.profiles.get_profile] combines NIP-19
decoding with the loader call and **never raises**: decode failures,
loader failures and lookup timeouts are logged and yield ``None``.

See Also:
    [decode_identity_code()][notebrotr.nips.nip19.decode_identity_code]:
        Identity code decoding.
    [process_users_entities()][notebrotr.render.entities.process_users_entities]:
        Fans out one ``get_profile()`` call per reference.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Protocol

from nostr_sdk import NostrSdkError

from notebrotr.core.exceptions import DecodeError, LoaderError, UnsupportedEntityError
from notebrotr.core.logger import Logger
from notebrotr.core.metrics import PROFILE_LOOKUPS, LookupOutcome
from notebrotr.models.profile import Profile
from notebrotr.nips.nip19 import decode_identity_code, encode_npub
from notebrotr.utils.protocol import DEFAULT_TIMEOUT, fetch_metadata_event

from .configs import DEFAULT_RELAYS


_logger = Logger(__name__)


class ProfileLoader(Protocol):
    """Resolves a public key to display metadata.

    Implementations may suspend on I/O and may raise; callers going through
    [get_profile()][notebrotr.render.profiles.get_profile] absorb failures.
    """

    async def load(self, pubkey: str, relays: tuple[str, ...]) -> Profile | None:
        """Return the profile of *pubkey*, or ``None`` if none exists."""
        ...


class RelayProfileLoader:
    """Loads profiles from the latest kind-0 event on a set of relays.

    Relay hints from ``nprofile`` codes are queried before the configured
    default relays. Nothing is cached between calls.

    Examples:
        ```python
        loader = RelayProfileLoader(relays=["wss://relay.damus.io"], timeout=5.0)
        profile = await loader.load(pubkey, relays=())
        ```
    """

    def __init__(
        self,
        relays: Iterable[str] = DEFAULT_RELAYS,
        *,
        timeout: float = DEFAULT_TIMEOUT,  # noqa: ASYNC109
    ) -> None:
        self._relays = tuple(relays)
        self._timeout = timeout

    @property
    def relays(self) -> tuple[str, ...]:
        return self._relays

    async def load(self, pubkey: str, relays: tuple[str, ...] = ()) -> Profile | None:
        """Fetch and parse the profile of *pubkey*.

        Raises:
            LoaderError: If the relays cannot be queried or the metadata
                content is not a JSON object.
        """
        try:
            event = await fetch_metadata_event(
                pubkey, (*relays, *self._relays), timeout=self._timeout
            )
        except (NostrSdkError, OSError) as e:
            raise LoaderError(f"Failed to fetch metadata for {pubkey}: {e}") from e

        if event is None:
            return None

        try:
            return Profile.from_metadata_json(
                pubkey, event.content(), npub=encode_npub(pubkey), relays=relays
            )
        except ValueError as e:
            raise LoaderError(f"Invalid metadata content for {pubkey}: {e}") from e


async def get_profile(
    code: str,
    loader: ProfileLoader,
    *,
    timeout: float | None = None,  # noqa: ASYNC109
) -> Profile | None:
    """Decode an identity code and load its profile.

    Args:
        code: Identity code without the ``nostr:`` prefix (``npub1...``,
            ``nprofile1...`` or a 64-char hex key).
        loader: Collaborator resolving the decoded public key.
        timeout: Seconds before the loader call is abandoned
            (``None`` = wait indefinitely).

    Returns:
        The resolved [Profile][notebrotr.models.profile.Profile], or ``None``
        if the code is unsupported or malformed, the loader found nothing,
        failed, or timed out.
    """
    try:
        pointer = decode_identity_code(code)
    except UnsupportedEntityError as e:
        _logger.warning("unsupported_entity", code=code, entity_type=e.entity_type)
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.FAILED).inc()
        return None
    except DecodeError as e:
        _logger.warning("decode_failed", code=code, error=str(e))
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.FAILED).inc()
        return None

    try:
        async with asyncio.timeout(timeout):
            profile = await loader.load(pointer.pubkey, pointer.relays)
    except TimeoutError:
        _logger.warning("profile_load_timeout", pubkey=pointer.pubkey, timeout_s=timeout)
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.FAILED).inc()
        return None
    except Exception as e:  # noqa: BLE001 - loaders are external, any failure means "no profile"
        _logger.warning("profile_load_failed", pubkey=pointer.pubkey, error=str(e))
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.FAILED).inc()
        return None

    if profile is None:
        _logger.debug("profile_not_found", pubkey=pointer.pubkey)
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.UNRESOLVED).inc()
        return None

    PROFILE_LOOKUPS.labels(outcome=LookupOutcome.RESOLVED).inc()
    return profile
