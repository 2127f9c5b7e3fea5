"""Upstream helpers that turn collector output into engine inputs.

- ``average_intensity``        pain intensity counts → 0-1 average
- ``has_free_alternatives``    competitor pricing text → bool
- ``extract_filtering_metrics`` tiered relevance scores → FilteringMetrics
- ``filtering_red_flags``      data-quality red flags from filtering metrics
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .. import constants
from ..schemas.two_axis_schema import FilteringMetrics
from ..schemas.verdict_schema import RedFlag

logger = logging.getLogger(__name__)

_CORE_TIERS = frozenset({"core", "strong"})
_RELATED_TIERS = frozenset({"related", "adjacent"})


def average_intensity(high: int, medium: int, low: int, total_signals: int) -> float:
    """Weighted mean intensity (high=1.0, medium=0.6, low=0.3).

    Returns the neutral 0.5 when there are no signals.
    """
    if total_signals <= 0:
        return 0.5
    w = constants.INTENSITY_WEIGHTS
    weighted = high * w["high"] + medium * w["medium"] + low * w["low"]
    return weighted / total_signals


def has_free_alternatives(pricing_descriptions: Iterable[Optional[str]]) -> bool:
    """True when any competitor's pricing model/range mentions a free tier."""
    for text in pricing_descriptions:
        lowered = (text or "").lower()
        if any(marker in lowered for marker in constants.FREE_PRICING_MARKERS):
            return True
    return False


def signal_tier(relevance: float) -> Optional[str]:
    """Highest tier whose threshold *relevance* meets; None below 'adjacent'."""
    for tier, threshold in constants.SIGNAL_TIER_THRESHOLDS.items():
        if relevance >= threshold:
            return tier
    return None


def extract_filtering_metrics(
    relevance_scores: Iterable[float],
    posts_analyzed: int,
    sources: Sequence[str],
) -> FilteringMetrics:
    """Bucket tiered relevance scores in a single pass.

    core + strong tiers count as core signals, related + adjacent as
    related signals; anything below the adjacent threshold is dropped.
    """
    tiers = Counter(signal_tier(score) for score in relevance_scores)
    core = sum(tiers[t] for t in _CORE_TIERS)
    related = sum(tiers[t] for t in _RELATED_TIERS)
    logger.debug("Tiered signals: %s (core=%d related=%d)", dict(tiers), core, related)
    return FilteringMetrics(
        core_signals=core,
        related_signals=related,
        posts_analyzed=posts_analyzed,
        sources=list(sources),
    )


def filtering_red_flags(metrics: Optional[FilteringMetrics]) -> List[RedFlag]:
    """Data-quality flags appended after the rule engine's flags."""
    if metrics is None:
        return []

    flags: List[RedFlag] = []
    if metrics.narrow_problem_warning:
        flags.append(RedFlag(
            severity="MEDIUM",
            title="Narrow Problem Definition",
            message=(
                f"{round(metrics.stage2_filter_rate or 0)}% of domain-relevant posts didn't "
                "match your specific problem. Consider broadening your hypothesis."
            ),
        ))

    if (
        metrics.quality_level == "low"
        and (metrics.post_filter_rate or 0) > 95
        and metrics.posts_analyzed < 10
    ):
        flags.append(RedFlag(
            severity="MEDIUM",
            title="Very High Filter Rate",
            message=(
                f"Only {metrics.posts_analyzed} relevant posts found. "
                "Results may be less reliable."
            ),
        ))
    return flags
