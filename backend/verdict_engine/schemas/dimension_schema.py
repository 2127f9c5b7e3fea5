"""Dimension inputs — already-scored research dimensions from upstream modules.

Each input is produced by an external analysis module (community voice,
competitor intelligence, market sizing, timing analysis) and is read-only
to the engine.  Any of them may be absent.  Numeric counts are trusted as
delivered; only enumerations are validated.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ConfidenceLevel = Literal["low", "medium", "high"]
InputConfidence = Literal["very_low", "low", "medium", "high"]
MarketMaturity = Literal["emerging", "growing", "mature", "declining"]
Achievability = Literal[
    "highly_achievable",
    "achievable",
    "challenging",
    "difficult",
    "unlikely",
]
TrendDirection = Literal["rising", "stable", "falling"]


class PainScoreInput(BaseModel):
    """Pain dimension from the community voice pipeline."""

    model_config = ConfigDict(frozen=True)

    overall_score: float = Field(
        ...,
        description="0-10 pain score from the pain detector",
    )
    confidence: InputConfidence = Field(
        ...,
        description="Detector confidence; 'very_low' is treated as 'low'",
    )
    total_signals: int = Field(
        ...,
        description="Number of pain signals detected",
    )
    willingness_to_pay_count: int = Field(
        ...,
        description="Signals expressing purchase intent",
    )
    posts_analyzed: Optional[int] = Field(
        default=None,
        description="Posts that passed relevance filtering (drives sample size)",
    )
    average_intensity: Optional[float] = Field(
        default=None,
        description="0-1 average intensity of pain signals (high=1, medium=0.6, low=0.3)",
    )


class CompetitionScoreInput(BaseModel):
    """Competition dimension from competitor intelligence."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., description="0-10 competition score (higher = less crowded)")
    confidence: ConfidenceLevel
    competitor_count: int = Field(..., description="Competitors analyzed")
    threats: List[str] = Field(default_factory=list)
    has_free_alternatives: Optional[bool] = Field(
        default=None,
        description="Whether any competitor offers a free tier",
    )
    market_maturity: Optional[MarketMaturity] = None


class MarketScoreInput(BaseModel):
    """Market dimension from Fermi market sizing."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., description="0-10 market score before reality adjustments")
    confidence: InputConfidence
    penetration_required: float = Field(
        ...,
        description="Market penetration (percent) needed to hit the revenue goal",
    )
    achievability: Achievability


class TimingScoreInput(BaseModel):
    """Timing dimension from trend analysis."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., description="0-10 timing score")
    confidence: ConfidenceLevel
    trend: TrendDirection
    tailwinds_count: int = 0
    headwinds_count: int = 0
    timing_window: str = ""
