"""Weight Normalizer and Score Aggregator.

Rescales the base weight table over whichever dimensions are present and
computes the weighted raw score.

Rules
-----
- Only present dimensions are ever normalized
- Present normalized weights always sum to 1
- Zero present dimensions never reaches this module (caller short-circuits)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping

from .score_utils import clamp, round1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresentDimension:
    """A dimension that actually has data, with its un-normalized weight."""

    name: str
    base_weight: float
    score: float


def normalize_weights(present: List[PresentDimension]) -> Dict[str, float]:
    """Return ``{name: base_weight / Σ base_weight}`` over *present*."""
    total = sum(d.base_weight for d in present)
    return {d.name: d.base_weight / total for d in present}


def aggregate_score(
    present: List[PresentDimension],
    weights: Mapping[str, float],
) -> float:
    """Σ(normalized weight × score), clamped to [0, 10] and rounded to 1 decimal."""
    raw = sum(weights[d.name] * d.score for d in present)
    raw_score = round1(clamp(raw))
    logger.debug(
        "Aggregated %d dimension(s) → raw score %.1f (weights=%s)",
        len(present),
        raw_score,
        {k: round(v, 4) for k, v in weights.items()},
    )
    return raw_score
