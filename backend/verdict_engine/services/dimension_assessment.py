"""Per-dimension assessment: status, summary, dealbreakers and advice.

Also combines per-dimension confidences and rates overall data
sufficiency.  No weighting happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .. import constants
from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
    TimingScoreInput,
)
from .market_adjustment import MarketAdjustment

_CONFIDENCE_POINTS = {"high": 3, "medium": 2, "low": 1}

_DEALBREAKER_MESSAGES = {
    "pain": "Pain Score is critically low - users may not have strong enough pain points",
    "competition": "Competition Score is critically low - market may be too crowded or dominated",
    "market": "Market Score is critically low - achieving your revenue goals may be unrealistic",
    "timing": "Timing Score is critically low - market conditions may not be favorable",
}

# Prompts for modules that have not been run, in the order they are
# pushed to the front of the recommendation list.
_MISSING_MODULE_PROMPTS: Tuple[Tuple[str, str], ...] = (
    ("pain", "Run Community Voice analysis to assess market pain"),
    ("competition", "Run Competitor Intelligence to assess competitive landscape"),
    ("market", "Run Market Sizing to validate revenue potential"),
    ("timing", "Run Timing Analysis to assess market timing"),
)

INTERVIEW_RECOMMENDATION = (
    "Conduct 5-10 user interviews using the Interview Guide to validate "
    "these findings with real users"
)


@dataclass(frozen=True)
class AssessedDimension:
    """A present dimension before weights are known."""

    key: str
    score: float
    status: str
    confidence: str
    summary: str
    dealbreaker: Optional[str]
    advice: Tuple[str, ...]

    @property
    def display_name(self) -> str:
        return constants.DIMENSION_DISPLAY_NAMES[self.key]


def dimension_status(score: float, config: ScoringConfig = DEFAULT_CONFIG) -> str:
    t = config.status_thresholds
    if score >= t["strong"]:
        return "strong"
    if score >= t["adequate"]:
        return "adequate"
    if score >= t["needs_work"]:
        return "needs_work"
    return "critical"


def normalize_confidence(confidence: str) -> str:
    return "low" if confidence == "very_low" else confidence


def _is_weak(status: str) -> bool:
    return status in ("needs_work", "critical")


def _dealbreaker(key: str, score: float, config: ScoringConfig) -> Optional[str]:
    if score < config.dealbreaker_threshold:
        return _DEALBREAKER_MESSAGES[key]
    return None


def assess_pain(pain: PainScoreInput, config: ScoringConfig = DEFAULT_CONFIG) -> AssessedDimension:
    status = dimension_status(pain.overall_score, config)
    advice: List[str] = []
    if _is_weak(status):
        if pain.willingness_to_pay_count == 0:
            advice.append(
                "Find evidence of willingness-to-pay - look for pricing discussions and purchase intent"
            )
        advice.append("Gather more community data or refine search terms to find stronger pain signals")

    return AssessedDimension(
        key="pain",
        score=pain.overall_score,
        status=status,
        confidence=normalize_confidence(pain.confidence),
        summary=(
            f"{pain.total_signals} signals detected, "
            f"{pain.willingness_to_pay_count} WTP indicators"
        ),
        dealbreaker=_dealbreaker("pain", pain.overall_score, config),
        advice=tuple(advice),
    )


def assess_competition(
    competition: CompetitionScoreInput,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> AssessedDimension:
    status = dimension_status(competition.score, config)
    advice: List[str] = []
    if _is_weak(status):
        if competition.threats:
            advice.append(f"Address competitive threats: {competition.threats[0]}")
        advice.append("Identify unique positioning angles or underserved niches")

    return AssessedDimension(
        key="competition",
        score=competition.score,
        status=status,
        confidence=competition.confidence,
        summary=f"{competition.competitor_count} competitors analyzed",
        dealbreaker=_dealbreaker("competition", competition.score, config),
        advice=tuple(advice),
    )


def assess_market(
    market: MarketScoreInput,
    adjustment: MarketAdjustment,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> AssessedDimension:
    """Assess the market dimension on its *adjusted* score."""
    score = adjustment.adjusted_score
    status = dimension_status(score, config)
    advice: List[str] = []
    if _is_weak(status):
        advice.append("Consider narrowing your target market or adjusting pricing strategy")
        if market.achievability in ("unlikely", "difficult"):
            advice.append("Lower your Minimum Success Criteria or expand your serviceable market")

    summary = (
        f"{market.penetration_required:.1f}% penetration needed - "
        f"{market.achievability.replace('_', ' ', 1)}"
    )
    if score < market.score - 1:
        summary += f" (adjusted from {market.score:.1f} for WTP/competition)"

    return AssessedDimension(
        key="market",
        score=score,
        status=status,
        confidence=normalize_confidence(market.confidence),
        summary=summary,
        dealbreaker=_dealbreaker("market", score, config),
        advice=tuple(advice),
    )


def assess_timing(timing: TimingScoreInput, config: ScoringConfig = DEFAULT_CONFIG) -> AssessedDimension:
    status = dimension_status(timing.score, config)
    advice: List[str] = []
    if _is_weak(status):
        if timing.headwinds_count > timing.tailwinds_count:
            advice.append("Address market headwinds or wait for better timing conditions")
        if timing.trend == "falling":
            advice.append("Market interest appears to be declining - consider pivoting or moving faster")

    arrow = {"rising": "↑", "falling": "↓"}.get(timing.trend, "→")
    return AssessedDimension(
        key="timing",
        score=timing.score,
        status=status,
        confidence=timing.confidence,
        summary=(
            f"{timing.tailwinds_count} tailwinds, {timing.headwinds_count} headwinds "
            f"{arrow} Window: {timing.timing_window}"
        ),
        dealbreaker=_dealbreaker("timing", timing.score, config),
        advice=tuple(advice),
    )


def build_recommendations(
    assessed: Sequence[AssessedDimension],
    missing: Sequence[str],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> List[str]:
    """Missing-module prompts first, then dimension advice, then interviews.

    Truncated to ``config.max_recommendations``.
    """
    recommendations: List[str] = [a for dim in assessed for a in dim.advice]
    for key, prompt in _MISSING_MODULE_PROMPTS:
        if key in missing:
            recommendations.insert(0, prompt)
    if len(assessed) >= 2:
        recommendations.append(INTERVIEW_RECOMMENDATION)
    return recommendations[: config.max_recommendations]


def combine_confidences(confidences: Sequence[str]) -> str:
    """Average high=3 / medium=2 / low=1; no dimensions → low."""
    if not confidences:
        return "low"
    avg = sum(_CONFIDENCE_POINTS[normalize_confidence(c)] for c in confidences) / len(confidences)
    if avg >= 2.5:
        return "high"
    if avg >= 1.5:
        return "medium"
    return "low"


def rate_data_sufficiency(
    assessed: Sequence[AssessedDimension],
    total_dimensions: int,
) -> Tuple[str, str]:
    """Return ``(sufficiency, reason)`` describing how far to trust the verdict."""
    count = len(assessed)
    if count == 0:
        return "insufficient", "No research data available"
    if count == 1:
        return (
            "limited",
            f"Only 1 of {total_dimensions} dimensions analyzed - run more modules for reliable verdict",
        )

    low_confidence = sum(1 for d in assessed if d.confidence == "low")
    completion_ratio = count / total_dimensions

    if count == 2 and low_confidence >= 1:
        return "limited", "2 dimensions with low confidence data"
    if count >= 3 and low_confidence <= 1:
        return "strong", f"{count} dimensions analyzed with good confidence"
    if completion_ratio >= 0.75:
        return "adequate", f"{count} of {total_dimensions} dimensions analyzed"
    return "limited", f"Only {count} dimensions - consider running more analyses"
