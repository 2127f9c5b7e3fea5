"""Sample-Size Estimator.

Buckets ``posts_analyzed`` into a confidence label and derives a score
interval for limited samples:

    100+ posts  → high_confidence       (no range)
    50-99       → moderate_confidence   (no range)
    20-49       → low_confidence        (± 1.5)
    < 20        → very_limited          (± 2.0)
"""

from __future__ import annotations

from typing import Optional

from .. import constants
from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.verdict_schema import SampleSize, ScoreRange
from .score_utils import clamp, round1


def classify_sample_size(posts_analyzed: int, config: ScoringConfig = DEFAULT_CONFIG) -> str:
    """Pure function of *posts_analyzed* → sample-size label."""
    thresholds = config.sample_size_thresholds
    if posts_analyzed >= thresholds["high_confidence"]:
        return "high_confidence"
    if posts_analyzed >= thresholds["moderate_confidence"]:
        return "moderate_confidence"
    if posts_analyzed >= thresholds["low_confidence"]:
        return "low_confidence"
    return "very_limited"


def estimate_sample_size(
    posts_analyzed: Optional[int],
    signals_found: int,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> Optional[SampleSize]:
    """Build the sample-size indicator, or None when the upstream did not
    report how many posts were analyzed."""
    if posts_analyzed is None:
        return None

    label = classify_sample_size(posts_analyzed, config)
    return SampleSize(
        posts_analyzed=posts_analyzed,
        signals_found=signals_found,
        label=label,
        description=constants.SAMPLE_SIZE_DESCRIPTIONS[label],
    )


def score_range(
    score: float,
    sample_size: Optional[SampleSize],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> Optional[ScoreRange]:
    """± interval around *score* for limited samples; None otherwise."""
    if sample_size is None:
        return None

    margin = config.score_range_margins.get(sample_size.label)
    if margin is None:
        return None

    return ScoreRange(
        min=round1(clamp(score - margin)),
        max=round1(clamp(score + margin)),
    )
