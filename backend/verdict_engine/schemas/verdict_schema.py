from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .dimension_schema import ConfidenceLevel
from .two_axis_schema import HypothesisConfidence, MarketOpportunity

VerdictLevel = Literal["strong", "mixed", "weak", "none"]
DimensionStatus = Literal["strong", "adequate", "needs_work", "critical"]
Severity = Literal["HIGH", "MEDIUM", "LOW"]
SampleSizeLabel = Literal[
    "high_confidence",
    "moderate_confidence",
    "low_confidence",
    "very_limited",
]
DataSufficiency = Literal["insufficient", "limited", "adequate", "strong"]


class DimensionScore(BaseModel):
    """One scored research dimension as it entered the aggregate."""

    model_config = ConfigDict(frozen=True)

    name: str
    score: float = Field(..., description="0-10 (market score is post-adjustment)")
    weight: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Normalized weight over the present dimensions",
    )
    status: DimensionStatus
    confidence: ConfidenceLevel
    summary: str = ""


class RedFlag(BaseModel):
    """Severity-tagged explanation shown prominently before the score."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    title: str
    message: str


class SampleSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    posts_analyzed: int
    signals_found: int
    label: SampleSizeLabel
    description: str


class ScoreRange(BaseModel):
    """Confidence interval around the final score when data is limited."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(..., ge=0.0, le=10.0)
    max: float = Field(..., ge=0.0, le=10.0)


class ScoreAdjustment(BaseModel):
    """One traceable change to a score made by a pipeline stage."""

    model_config = ConfigDict(frozen=True)

    stage: str = Field(..., description="e.g. 'market_adjustment', 'calibration', 'wtp_kill_switch'")
    before: float
    after: float
    reason: str


class ViabilityVerdict(BaseModel):
    """Complete output of the Viability Verdict Engine.

    Produced by ``calculate_viability`` / ``calculate_mvp_viability``.
    ``overall_score`` is the calibrated, rule-adjusted score and is always
    clamped to [0, 10].  ``raw_score`` is the weighted aggregate before
    calibration.
    """

    model_config = ConfigDict(frozen=True)

    overall_score: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="Calibrated score after all rule-engine caps",
    )
    raw_score: float = Field(
        ...,
        ge=0.0,
        le=10.0,
        description="Σ(normalized weight × dimension score), 1 decimal",
    )
    verdict: VerdictLevel
    verdict_label: str
    verdict_description: str
    calibrated_verdict_label: str = Field(
        ...,
        description="Verdict label softened for small samples",
    )
    score_range: Optional[ScoreRange] = None
    dimensions: List[DimensionScore] = Field(default_factory=list)
    weakest_dimension: Optional[DimensionScore] = None
    dealbreakers: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(
        default_factory=list,
        max_length=5,
    )
    confidence: ConfidenceLevel
    is_complete: bool
    available_dimensions: int
    total_dimensions: int
    data_sufficiency: DataSufficiency
    data_sufficiency_reason: str
    sample_size: Optional[SampleSize] = None
    red_flags: Optional[List[RedFlag]] = Field(
        default=None,
        description="Omitted when no rule fired",
    )
    hypothesis_confidence: Optional[HypothesisConfidence] = None
    market_opportunity: Optional[MarketOpportunity] = None
    adjustments: List[ScoreAdjustment] = Field(
        default_factory=list,
        description="Ordered trace of every stage that moved a score",
    )
