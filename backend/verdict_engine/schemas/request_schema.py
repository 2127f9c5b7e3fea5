from typing import Optional

from pydantic import BaseModel, Field

from .dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
    TimingScoreInput,
)
from .two_axis_schema import TwoAxisInput


class ViabilityRequest(BaseModel):
    """Request body for ``POST /viability``.  Every dimension is optional."""

    pain: Optional[PainScoreInput] = Field(
        default=None,
        description="Pain dimension from community voice analysis",
    )
    competition: Optional[CompetitionScoreInput] = Field(
        default=None,
        description="Competition dimension from competitor intelligence",
    )
    market: Optional[MarketScoreInput] = Field(
        default=None,
        description="Market dimension from market sizing",
    )
    timing: Optional[TimingScoreInput] = Field(
        default=None,
        description="Timing dimension from timing analysis",
    )
    two_axis: Optional[TwoAxisInput] = Field(
        default=None,
        description="Filtering metrics for the two-axis breakdown",
    )


class MvpViabilityRequest(BaseModel):
    """Request body for the legacy ``POST /viability/mvp`` endpoint."""

    pain: Optional[PainScoreInput] = None
    competition: Optional[CompetitionScoreInput] = None
