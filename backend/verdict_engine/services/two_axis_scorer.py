"""Two-Axis Scorer.

Separates two questions the single verdict score conflates:

- Hypothesis Confidence — did we find the user's *specific* idea?
      0.5 × direct signal + 0.25 × volume + 0.25 × multi-source
- Market Opportunity — is there a market here at all?
      0.3 × market size + 0.25 × timing + 0.25 × activity
      + 0.2 × competitor presence

Weights, level cutoffs and step tables come from ``ScoringConfig``.
Only computed when filtering metrics are supplied.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.two_axis_schema import HypothesisConfidence, MarketOpportunity, TwoAxisInput
from .score_utils import clamp, round1, round_half_up


def _multi_source_score(source_count: int, config: ScoringConfig) -> float:
    """Score of the largest configured source count not above *source_count*."""
    table = config.multi_source_scores
    return table[max(k for k in table if k <= source_count)]


def _competitor_presence_score(competitor_count: Optional[int], config: ScoringConfig) -> float:
    """Some competitors validate the market; none is a warning, too many is crowding."""
    if competitor_count is None:
        return config.two_axis_neutral_score
    for bound, score in config.competitor_presence_steps:
        if competitor_count <= bound:
            return score
    return config.competitor_presence_crowded


def _activity_score(posts_analyzed: int, total_signals: int) -> float:
    posts_ratio = min(1.0, posts_analyzed / 100)
    signal_bonus = min(1.0, total_signals / 20)
    return min(10.0, 7.0 * posts_ratio + 3.0 * signal_bonus)


def _level(score: float, thresholds: Dict[str, float], levels: Tuple[str, ...]) -> str:
    """First of *levels* whose cutoff *score* reaches; the last level has no cutoff."""
    for level in levels[:-1]:
        if score >= thresholds[level]:
            return level
    return levels[-1]


def calculate_hypothesis_confidence(
    two_axis: TwoAxisInput,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> HypothesisConfidence:
    metrics = two_axis.filtering_metrics
    total = metrics.core_signals + metrics.related_signals
    source_count = len(set(metrics.sources))
    w = config.hypothesis_weights

    direct_percent = min(100.0, metrics.core_signals / total * 100) if total > 0 else 0.0
    direct_score = direct_percent / 10
    volume_score = min(10.0, total / 10)
    multi_source_score = _multi_source_score(source_count, config)

    score = round1(clamp(
        w["direct_signal"] * direct_score
        + w["volume"] * volume_score
        + w["multi_source"] * multi_source_score
    ))

    return HypothesisConfidence(
        score=score,
        level=_level(score, config.hypothesis_level_thresholds, ("high", "partial", "low")),
        direct_signal_percent=round1(direct_percent),
        signal_volume=total,
        multi_source_confirmation=source_count > 1,
        factors={
            "direct_signal_score": round1(direct_score),
            "volume_score": round1(volume_score),
            "multi_source_score": multi_source_score,
        },
    )


def calculate_market_opportunity(
    two_axis: TwoAxisInput,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> MarketOpportunity:
    metrics = two_axis.filtering_metrics
    total = metrics.core_signals + metrics.related_signals
    neutral = config.two_axis_neutral_score
    w = config.opportunity_weights

    market_size = clamp(two_axis.market_score if two_axis.market_score is not None else neutral)
    timing = clamp(two_axis.timing_score if two_axis.timing_score is not None else neutral)
    activity = _activity_score(metrics.posts_analyzed, total)
    presence = _competitor_presence_score(two_axis.competitor_count, config)

    contributions = {
        "market_size_contribution": w["market_size"] * market_size,
        "timing_contribution": w["timing"] * timing,
        "activity_contribution": w["activity"] * activity,
        "competitor_contribution": w["competitor"] * presence,
    }
    score = round1(clamp(sum(contributions.values())))

    return MarketOpportunity(
        score=score,
        level=_level(score, config.opportunity_level_thresholds, ("strong", "moderate", "weak")),
        market_size_score=round1(market_size),
        timing_score=round1(timing),
        activity_score=round1(activity),
        competitor_presence=presence,
        factors={k: round_half_up(v, 2) for k, v in contributions.items()},
    )


def calculate_two_axis(
    two_axis: Optional[TwoAxisInput],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> Tuple[Optional[HypothesisConfidence], Optional[MarketOpportunity]]:
    """Both axes, or ``(None, None)`` without filtering metrics."""
    if two_axis is None:
        return None, None
    return (
        calculate_hypothesis_confidence(two_axis, config),
        calculate_market_opportunity(two_axis, config),
    )
