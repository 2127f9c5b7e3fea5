"""Score Calibrator.

Raw weighted scores cluster around 5-7, which produces a "mixed" verdict
for almost everything.  The calibrator stretches scores away from the
center with an amplification factor that fades toward the edges:

    amplification = 1.4 - 0.4 * (|score - 5.5| / 4.5)
    calibrated    = clamp(5.5 + (score - 5.5) * amplification, 0, 10)

    5.5 → 5.5   (center is a fixed point)
    7.0 → ~7.4  (pushed higher)
    4.0 → ~3.6  (pushed lower)
    0.0 → 0.0   (no data, never calibrated)
"""

from __future__ import annotations

from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from .score_utils import clamp, round1


def calibrate_score(raw_score: float, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """Apply the center-biased stretch to *raw_score*.

    A raw score of exactly 0 means "no data" and is returned unchanged so
    it is never conflated with "data says failure".
    """
    if raw_score == 0:
        return 0.0

    center = config.calibration_center
    max_amp = config.calibration_max_amplification
    min_amp = config.calibration_min_amplification

    distance = abs(raw_score - center)
    amplification = max_amp - (max_amp - min_amp) * (distance / config.calibration_span)

    transformed = center + (raw_score - center) * amplification
    return round1(clamp(transformed))
