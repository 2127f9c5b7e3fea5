# Schemas package
from .dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
    TimingScoreInput,
)
from .two_axis_schema import (
    FilteringMetrics,
    HypothesisConfidence,
    MarketOpportunity,
    TwoAxisInput,
)
from .verdict_schema import (
    DimensionScore,
    RedFlag,
    SampleSize,
    ScoreAdjustment,
    ScoreRange,
    ViabilityVerdict,
)
from .config_schema import DEFAULT_CONFIG, ScoringConfig
from .request_schema import MvpViabilityRequest, ViabilityRequest

__all__ = [
    "PainScoreInput",
    "CompetitionScoreInput",
    "MarketScoreInput",
    "TimingScoreInput",
    "FilteringMetrics",
    "TwoAxisInput",
    "HypothesisConfidence",
    "MarketOpportunity",
    "DimensionScore",
    "RedFlag",
    "SampleSize",
    "ScoreAdjustment",
    "ScoreRange",
    "ViabilityVerdict",
    "ScoringConfig",
    "DEFAULT_CONFIG",
    "ViabilityRequest",
    "MvpViabilityRequest",
]
