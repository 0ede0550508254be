"""
Defines Prometheus metrics for extraction and browser commands.

Metrics are collected in-process only; nothing is exported over HTTP.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (test reloads, plugin discovery) must not raise a
# duplicate registration error.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]

METRICS: Dict[str, Any] = {
    "extractions_total": Counter(
        "browserlite_extractions_total",
        "Content extraction attempts by producing method and outcome",
        ["method", "outcome"],
    ),
    "extraction_duration_seconds": Histogram(
        "browserlite_extraction_duration_seconds",
        "Wall time of a single extraction call",
        buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
    ),
    "extracted_content_chars": Histogram(
        "browserlite_extracted_content_chars",
        "Length of accepted extracted content in characters",
        buckets=(100, 500, 1_000, 5_000, 10_000, 50_000, 100_000),
    ),
    "commands_total": Counter(
        "browserlite_commands_total",
        "CLI browser commands by outcome",
        ["command", "outcome"],
    ),
}
