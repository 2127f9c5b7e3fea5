"""Two-axis scoring — Hypothesis Confidence vs. Market Opportunity."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

HypothesisConfidenceLevel = Literal["high", "partial", "low"]
MarketOpportunityLevel = Literal["strong", "moderate", "weak"]


class FilteringMetrics(BaseModel):
    """Relevance-filter output describing how the signal set was obtained."""

    model_config = ConfigDict(frozen=True)

    core_signals: int = Field(..., description="Signals matching the specific hypothesis")
    related_signals: int = Field(..., description="Signals in the surrounding problem space")
    posts_analyzed: int = Field(..., description="Posts that passed the domain filter")
    sources: List[str] = Field(
        default_factory=list,
        description="Data sources consulted, e.g. 'reddit', 'app_stores'",
    )
    post_filter_rate: Optional[float] = Field(
        default=None,
        description="Percent of fetched posts rejected by the filter",
    )
    stage2_filter_rate: Optional[float] = Field(
        default=None,
        description="Percent of domain-relevant posts that missed the specific problem",
    )
    narrow_problem_warning: bool = False
    quality_level: Optional[Literal["low", "medium", "high"]] = None


class TwoAxisInput(BaseModel):
    """Everything the two-axis scorer needs beyond the dimension inputs."""

    model_config = ConfigDict(frozen=True)

    filtering_metrics: FilteringMetrics
    market_score: Optional[float] = None
    timing_score: Optional[float] = None
    competitor_count: Optional[int] = None


class HypothesisConfidence(BaseModel):
    """Did the research find the user's specific idea?"""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=10.0)
    level: HypothesisConfidenceLevel
    direct_signal_percent: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="min(100, core / total × 100)",
    )
    signal_volume: int = Field(..., description="core + related signals")
    multi_source_confirmation: bool = Field(
        ...,
        description="True when more than one distinct source contributed",
    )
    factors: Dict[str, float] = Field(
        default_factory=dict,
        description="direct_signal_score, volume_score, multi_source_score",
    )


class MarketOpportunity(BaseModel):
    """Is there a market at all, independent of the specific hypothesis?"""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=10.0)
    level: MarketOpportunityLevel
    market_size_score: float
    timing_score: float
    activity_score: float
    competitor_presence: float
    factors: Dict[str, float] = Field(
        default_factory=dict,
        description="Weighted contribution of each component",
    )
