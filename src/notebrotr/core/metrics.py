"""
Prometheus metrics for the render pipeline.

Defines module-level metric objects (singletons, thread-safe) recorded by
[get_profile()][notebrotr.render.profiles.get_profile] and
[Pipeline.process_all()][notebrotr.render.pipeline.Pipeline.process_all].
Exposition (an HTTP ``/metrics`` endpoint) is left to the embedding
application, which can serve ``prometheus_client.generate_latest()``.

Architecture:
    PROFILE_LOOKUPS:            Counter of identity lookups by outcome.
    RENDER_DURATION_SECONDS:    Histogram for render latency percentiles.
"""

from __future__ import annotations

from enum import StrEnum

from prometheus_client import Counter, Histogram


class LookupOutcome(StrEnum):
    """Label values for [PROFILE_LOOKUPS][notebrotr.core.metrics.PROFILE_LOOKUPS].

    Attributes:
        RESOLVED: The loader returned a profile.
        UNRESOLVED: The code decoded but no profile was found.
        FAILED: Decoding, loading, or the lookup timeout failed.
    """

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    FAILED = "failed"


PROFILE_LOOKUPS = Counter(
    "notebrotr_profile_lookups",
    "Identity reference lookups by outcome",
    ["outcome"],
)

# Render latency, dominated by profile lookups when references are present
RENDER_DURATION_SECONDS = Histogram(
    "notebrotr_render_duration_seconds",
    "Duration of a full render call in seconds",
    ["kind"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1, 2.5, 5, 10, 30),
)
