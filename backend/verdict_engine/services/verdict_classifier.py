"""Verdict Classifier.

Maps the final score to a verdict tier, its label and guidance text, and
produces the sample-size-calibrated label.
"""

from __future__ import annotations

from typing import Optional

from .. import constants
from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.verdict_schema import SampleSize


def classify_verdict(score: float, config: ScoringConfig = DEFAULT_CONFIG) -> str:
    """Strict partition: ≥7.5 strong, ≥5.0 mixed, ≥4.0 weak, else none."""
    thresholds = config.verdict_thresholds
    if score >= thresholds["strong"]:
        return "strong"
    if score >= thresholds["mixed"]:
        return "mixed"
    if score >= thresholds["weak"]:
        return "weak"
    return "none"


def verdict_label(verdict: str) -> str:
    return constants.VERDICT_LABELS[verdict]


def verdict_description(verdict: str) -> str:
    return constants.VERDICT_DESCRIPTIONS[verdict]


def calibrated_verdict_label(verdict: str, sample_size: Optional[SampleSize]) -> str:
    """Soften confident labels when the sample is small.

    "STRONG SIGNAL" on 15 posts is misleading, so it becomes
    "PROMISING — LIMITED DATA".  'none' is never softened: a failing
    signal should not be hedged.
    """
    base = verdict_label(verdict)
    if sample_size is None:
        return base

    softened = constants.LIMITED_DATA_LABELS.get(sample_size.label, {})
    return softened.get(verdict, base)
