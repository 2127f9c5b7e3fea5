"""Scoring configuration — immutable tables passed into the engine.

Defaults come from ``verdict_engine.constants``.  Tests and callers may
build alternate configurations (e.g. shifted thresholds) without touching
module globals.  A table missing one of its keys fails validation here
instead of surfacing as a ``KeyError`` halfway through scoring.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .. import constants

# Keys each threshold table must carry, highest tier first.
_REQUIRED_KEYS: Dict[str, Tuple[str, ...]] = {
    "verdict_thresholds": ("strong", "mixed", "weak"),
    "status_thresholds": ("strong", "adequate", "needs_work"),
    "sample_size_thresholds": ("high_confidence", "moderate_confidence", "low_confidence"),
    "score_range_margins": ("low_confidence", "very_limited"),
    "hypothesis_weights": ("direct_signal", "volume", "multi_source"),
    "opportunity_weights": ("market_size", "timing", "activity", "competitor"),
    "hypothesis_level_thresholds": ("high", "partial"),
    "opportunity_level_thresholds": ("strong", "moderate"),
}

# Tables whose values must strictly descend in the key order above.
_DESCENDING = (
    "verdict_thresholds",
    "status_thresholds",
    "sample_size_thresholds",
    "hypothesis_level_thresholds",
    "opportunity_level_thresholds",
)


class ScoringConfig(BaseModel):
    """Weights, thresholds and caps used by every pipeline stage."""

    model_config = ConfigDict(frozen=True)

    full_weights: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.FULL_WEIGHTS),
        description="Base weight per dimension before renormalization",
    )
    verdict_thresholds: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.VERDICT_THRESHOLDS),
    )
    status_thresholds: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.STATUS_THRESHOLDS),
    )
    dealbreaker_threshold: float = constants.DEALBREAKER_THRESHOLD
    max_recommendations: int = Field(
        constants.MAX_RECOMMENDATIONS,
        ge=1,
        le=constants.MAX_RECOMMENDATIONS,
        description="Recommendations kept after ordering; the verdict holds at most 5",
    )

    calibration_center: float = constants.CALIBRATION_CENTER
    calibration_max_amplification: float = constants.CALIBRATION_MAX_AMPLIFICATION
    calibration_min_amplification: float = constants.CALIBRATION_MIN_AMPLIFICATION
    calibration_span: float = Field(constants.CALIBRATION_SPAN, gt=0.0)

    wtp_small_sample_signals: int = constants.WTP_SMALL_SAMPLE_SIGNALS
    wtp_hard_cap: float = constants.WTP_HARD_CAP
    wtp_soft_cap: float = constants.WTP_SOFT_CAP
    saturation_competitor_count: int = constants.SATURATION_COMPETITOR_COUNT
    saturated_free_alt_cap: float = constants.SATURATED_FREE_ALT_CAP
    saturated_cap: float = constants.SATURATED_CAP
    penetration_high_pct: float = constants.PENETRATION_HIGH_PCT
    penetration_medium_pct: float = constants.PENETRATION_MEDIUM_PCT

    market_wtp_zero_factor: float = constants.MARKET_WTP_ZERO_FACTOR
    market_wtp_weak_factor: float = constants.MARKET_WTP_WEAK_FACTOR
    market_wtp_weak_max: int = constants.MARKET_WTP_WEAK_MAX
    market_severity_low: float = constants.MARKET_SEVERITY_LOW
    market_severity_moderate: float = constants.MARKET_SEVERITY_MODERATE
    market_severity_low_factor: float = constants.MARKET_SEVERITY_LOW_FACTOR
    market_severity_moderate_factor: float = constants.MARKET_SEVERITY_MODERATE_FACTOR
    market_free_alt_factor: float = constants.MARKET_FREE_ALT_FACTOR
    market_floor: float = Field(constants.MARKET_FLOOR, ge=0.0, le=10.0)
    market_default_intensity: float = constants.MARKET_DEFAULT_INTENSITY

    sample_size_thresholds: Dict[str, int] = Field(
        default_factory=lambda: dict(constants.SAMPLE_SIZE_THRESHOLDS),
    )
    score_range_margins: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.SCORE_RANGE_MARGINS),
    )

    hypothesis_weights: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.HYPOTHESIS_WEIGHTS),
    )
    opportunity_weights: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.OPPORTUNITY_WEIGHTS),
    )
    hypothesis_level_thresholds: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.HYPOTHESIS_LEVEL_THRESHOLDS),
    )
    opportunity_level_thresholds: Dict[str, float] = Field(
        default_factory=lambda: dict(constants.OPPORTUNITY_LEVEL_THRESHOLDS),
    )
    multi_source_scores: Dict[int, float] = Field(
        default_factory=lambda: dict(constants.MULTI_SOURCE_SCORES),
        description="Distinct source count → score; larger counts use the largest key",
    )
    competitor_presence_steps: Tuple[Tuple[int, float], ...] = Field(
        default=constants.COMPETITOR_PRESENCE_STEPS,
        description="Ascending (max competitor count, presence score) pairs",
    )
    competitor_presence_crowded: float = constants.COMPETITOR_PRESENCE_CROWDED
    two_axis_neutral_score: float = constants.TWO_AXIS_NEUTRAL_SCORE

    @field_validator("full_weights")
    @classmethod
    def _weights_cover_all_dimensions(cls, v: Dict[str, float]) -> Dict[str, float]:
        missing = set(constants.DIMENSION_ORDER) - set(v)
        if missing:
            raise ValueError(f"full_weights missing dimensions: {sorted(missing)}")
        if any(w <= 0 for w in v.values()):
            raise ValueError("full_weights must all be positive")
        return v

    @field_validator("multi_source_scores")
    @classmethod
    def _multi_source_has_zero(cls, v: Dict[int, float]) -> Dict[int, float]:
        if 0 not in v:
            raise ValueError("multi_source_scores must define a score for 0 sources")
        return v

    @field_validator("competitor_presence_steps")
    @classmethod
    def _steps_ascend(cls, v: Tuple[Tuple[int, float], ...]) -> Tuple[Tuple[int, float], ...]:
        bounds = [bound for bound, _ in v]
        if not bounds or bounds != sorted(set(bounds)):
            raise ValueError("competitor_presence_steps must be non-empty with ascending bounds")
        return v

    @model_validator(mode="after")
    def _tables_complete_and_ordered(self) -> "ScoringConfig":
        for name, keys in _REQUIRED_KEYS.items():
            table = getattr(self, name)
            missing = [k for k in keys if k not in table]
            if missing:
                raise ValueError(f"{name} missing keys: {missing}")

        for name in _DESCENDING:
            table = getattr(self, name)
            values = [table[k] for k in _REQUIRED_KEYS[name]]
            if any(hi <= lo for hi, lo in zip(values, values[1:])):
                raise ValueError(
                    f"{name} must descend: " + " > ".join(_REQUIRED_KEYS[name])
                )
        return self


DEFAULT_CONFIG = ScoringConfig()
