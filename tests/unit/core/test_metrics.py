"""Unit tests for core.metrics module."""

from __future__ import annotations

from prometheus_client import REGISTRY

from notebrotr.core.metrics import PROFILE_LOOKUPS, RENDER_DURATION_SECONDS, LookupOutcome


def _lookups(outcome: str) -> float:
    return REGISTRY.get_sample_value("notebrotr_profile_lookups_total", {"outcome": outcome}) or 0.0


class TestLookupOutcome:
    def test_values(self) -> None:
        assert [o.value for o in LookupOutcome] == ["resolved", "unresolved", "failed"]


class TestProfileLookups:
    def test_increment_by_outcome(self) -> None:
        before = _lookups("resolved")
        PROFILE_LOOKUPS.labels(outcome=LookupOutcome.RESOLVED).inc()
        assert _lookups("resolved") == before + 1


class TestRenderDuration:
    def test_observe(self) -> None:
        labels = {"kind": "99"}
        before = REGISTRY.get_sample_value("notebrotr_render_duration_seconds_count", labels) or 0.0
        RENDER_DURATION_SECONDS.labels(kind="99").observe(0.02)
        after = REGISTRY.get_sample_value("notebrotr_render_duration_seconds_count", labels)
        assert after == before + 1
