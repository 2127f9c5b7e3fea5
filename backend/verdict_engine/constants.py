"""Centralized scoring constants for the Viability Verdict Engine.

This module is the SINGLE SOURCE OF TRUTH for weight tables, verdict
thresholds, rule caps and labels.  Every numeric table reaches the
pipeline through ``ScoringConfig``.  Display text (labels, descriptions,
dimension names) and the upstream signal-extraction tables are read
directly.
"""

from __future__ import annotations

# ── Dimension weights ───────────────────────────────────────────────────
# Full mode (all four dimensions).  Renormalized over whichever dimensions
# are actually present.

FULL_WEIGHTS: dict[str, float] = {
    "pain": 0.35,
    "market": 0.25,
    "competition": 0.25,
    "timing": 0.15,
}

# Legacy two-dimension table: 35/(35+25) = 0.58, 25/(35+25) = 0.42
MVP_WEIGHTS: dict[str, float] = {
    "pain": 0.58,
    "competition": 0.42,
}

DIMENSION_ORDER: tuple[str, ...] = ("pain", "competition", "market", "timing")

DIMENSION_DISPLAY_NAMES: dict[str, str] = {
    "pain": "Pain Score",
    "competition": "Competition Score",
    "market": "Market Score",
    "timing": "Timing Score",
}

# ── Verdict thresholds ──────────────────────────────────────────────────
# Anything below ``weak`` is 'none' → DO NOT PURSUE (lower bound was 2.5).

VERDICT_THRESHOLDS: dict[str, float] = {
    "strong": 7.5,
    "mixed": 5.0,
    "weak": 4.0,
}

VERDICT_LABELS: dict[str, str] = {
    "strong": "STRONG SIGNAL",
    "mixed": "MIXED SIGNAL",
    "weak": "WEAK SIGNAL",
    "none": "DO NOT PURSUE",
}

VERDICT_DESCRIPTIONS: dict[str, str] = {
    "strong": "Proceed to user interviews with confidence. Strong market signals detected.",
    "mixed": (
        "Conduct user interviews to validate assumptions. Mixed signals suggest "
        "talking to real users will clarify the opportunity."
    ),
    "weak": (
        "Significant concerns detected. Validate core assumptions with user "
        "interviews before building anything."
    ),
    "none": "No viable business signal detected. Pivot to a different problem or target audience.",
}

# Softened labels keyed by sample-size label, then verdict.
LIMITED_DATA_LABELS: dict[str, dict[str, str]] = {
    "very_limited": {
        "strong": "PROMISING — LIMITED DATA",
        "mixed": "UNCERTAIN — LIMITED DATA",
        "weak": "WEAK — LIMITED DATA",
    },
    "low_confidence": {
        "strong": "STRONG — NEEDS MORE DATA",
    },
}

# ── Dimension status / dealbreakers ─────────────────────────────────────

STATUS_THRESHOLDS: dict[str, float] = {
    "strong": 7.5,
    "adequate": 5.0,
    "needs_work": 3.0,
}

DEALBREAKER_THRESHOLD: float = 3.0

MAX_RECOMMENDATIONS: int = 5

# ── Calibration ─────────────────────────────────────────────────────────

CALIBRATION_CENTER: float = 5.5
CALIBRATION_MAX_AMPLIFICATION: float = 1.4   # at the center
CALIBRATION_MIN_AMPLIFICATION: float = 1.0   # at the edges (1 or 10)
CALIBRATION_SPAN: float = 4.5

# ── Rule engine caps ────────────────────────────────────────────────────

WTP_SMALL_SAMPLE_SIGNALS: int = 20   # below this, zero WTP is a hard kill
WTP_HARD_CAP: float = 5.0
WTP_SOFT_CAP: float = 6.0

SATURATION_COMPETITOR_COUNT: int = 5
SATURATED_FREE_ALT_CAP: float = 5.0
SATURATED_CAP: float = 6.5

PENETRATION_HIGH_PCT: float = 50.0
PENETRATION_MEDIUM_PCT: float = 25.0

# ── Market score adjustment ─────────────────────────────────────────────

MARKET_WTP_ZERO_FACTOR: float = 0.3
MARKET_WTP_WEAK_FACTOR: float = 0.6
MARKET_WTP_WEAK_MAX: int = 3          # 1..3 WTP signals count as weak evidence
MARKET_SEVERITY_LOW: float = 0.4      # avg intensity below → low severity
MARKET_SEVERITY_MODERATE: float = 0.7
MARKET_SEVERITY_LOW_FACTOR: float = 0.5
MARKET_SEVERITY_MODERATE_FACTOR: float = 0.8
MARKET_FREE_ALT_FACTOR: float = 0.5
MARKET_FLOOR: float = 1.0
MARKET_DEFAULT_INTENSITY: float = 0.5

# ── Two-axis scoring ────────────────────────────────────────────────────

HYPOTHESIS_WEIGHTS: dict[str, float] = {
    "direct_signal": 0.5,
    "volume": 0.25,
    "multi_source": 0.25,
}

OPPORTUNITY_WEIGHTS: dict[str, float] = {
    "market_size": 0.3,
    "timing": 0.25,
    "activity": 0.25,
    "competitor": 0.2,
}

HYPOTHESIS_LEVEL_THRESHOLDS: dict[str, float] = {"high": 6.0, "partial": 3.0}
OPPORTUNITY_LEVEL_THRESHOLDS: dict[str, float] = {"strong": 7.0, "moderate": 5.0}

# Distinct source count → score; counts above the largest key use its score.
MULTI_SOURCE_SCORES: dict[int, float] = {0: 0.0, 1: 4.0, 2: 7.0, 3: 10.0}

# (max competitor count, presence score), ascending; more than the last
# bound is a crowded market.
COMPETITOR_PRESENCE_STEPS: tuple[tuple[int, float], ...] = ((0, 3.0), (2, 7.0), (10, 10.0))
COMPETITOR_PRESENCE_CROWDED: float = 7.0

TWO_AXIS_NEUTRAL_SCORE: float = 5.0

# ── Sample size ─────────────────────────────────────────────────────────

SAMPLE_SIZE_THRESHOLDS: dict[str, int] = {
    "high_confidence": 100,
    "moderate_confidence": 50,
    "low_confidence": 20,
}

SAMPLE_SIZE_DESCRIPTIONS: dict[str, str] = {
    "high_confidence": "High confidence — substantial data sample",
    "moderate_confidence": "Moderate confidence — good data sample",
    "low_confidence": "Low confidence — consider broader search terms",
    "very_limited": "Very limited data — interpret with caution",
}

SCORE_RANGE_MARGINS: dict[str, float] = {
    "low_confidence": 1.5,
    "very_limited": 2.0,
}

# ── Tiered relevance filter ─────────────────────────────────────────────
# Minimum relevance score for each tier, highest first.

SIGNAL_TIER_THRESHOLDS: dict[str, float] = {
    "core": 0.45,
    "strong": 0.35,
    "related": 0.25,
    "adjacent": 0.15,
}

# Intensity weights used to derive ``average_intensity`` for pain input.
INTENSITY_WEIGHTS: dict[str, float] = {
    "high": 1.0,
    "medium": 0.6,
    "low": 0.3,
}

FREE_PRICING_MARKERS: tuple[str, ...] = ("free", "$0", "freemium")
