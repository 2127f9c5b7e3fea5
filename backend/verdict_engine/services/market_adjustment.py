"""Market Score Adjustment.

Raw market score is inflated by TAM alone.  Before the Market dimension
enters aggregation it is discounted by three independent reality checks
(default factors shown; all come from ``ScoringConfig``):

- WTP factor:          0 WTP signals → 0.3,  ≤3 → 0.6,  else 1.0
- Severity factor:     avg intensity <0.4 → 0.5,  <0.7 → 0.8,  else 1.0
- Free-alt factor:     free competitors exist → 0.5,  else 1.0

The product is floored at 1.0.  Example: a water-reminder app with a 9.0
market score and no purchase intent ends up near 1.0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.dimension_schema import CompetitionScoreInput, PainScoreInput
from .score_utils import clamp, round1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketAdjustment:
    raw_score: float
    adjusted_score: float
    wtp_factor: float
    severity_factor: float
    free_alt_factor: float
    floor: float

    @property
    def reason(self) -> str:
        return (
            f"market discounted ×{self.wtp_factor} WTP, ×{self.severity_factor} severity, "
            f"×{self.free_alt_factor} free alternatives (floor {self.floor})"
        )


def _wtp_factor(wtp_count: int, config: ScoringConfig) -> float:
    if wtp_count == 0:
        return config.market_wtp_zero_factor
    if wtp_count <= config.market_wtp_weak_max:
        return config.market_wtp_weak_factor
    return 1.0


def _severity_factor(average_intensity: float, config: ScoringConfig) -> float:
    if average_intensity < config.market_severity_low:
        return config.market_severity_low_factor
    if average_intensity < config.market_severity_moderate:
        return config.market_severity_moderate_factor
    return 1.0


def adjust_market_score(
    raw_market_score: float,
    pain: Optional[PainScoreInput],
    competition: Optional[CompetitionScoreInput],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> MarketAdjustment:
    """Discount *raw_market_score* for missing purchase intent, trivial pain
    and free competitors.

    A missing pain input counts as zero WTP evidence with neutral intensity.
    """
    wtp_count = pain.willingness_to_pay_count if pain else 0
    intensity = (
        pain.average_intensity
        if pain and pain.average_intensity is not None
        else config.market_default_intensity
    )
    has_free = bool(competition and competition.has_free_alternatives)

    wtp = _wtp_factor(wtp_count, config)
    severity = _severity_factor(intensity, config)
    free_alt = config.market_free_alt_factor if has_free else 1.0

    adjusted = max(raw_market_score * wtp * severity * free_alt, config.market_floor)
    adjusted = round1(clamp(adjusted))

    logger.debug(
        "Market score %.1f → %.1f (wtp=%.1f severity=%.1f free_alt=%.1f)",
        raw_market_score, adjusted, wtp, severity, free_alt,
    )
    return MarketAdjustment(
        raw_score=raw_market_score,
        adjusted_score=adjusted,
        wtp_factor=wtp,
        severity_factor=severity,
        free_alt_factor=free_alt,
        floor=config.market_floor,
    )
