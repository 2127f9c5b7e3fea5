from .calibration import calibrate_score
from .market_adjustment import adjust_market_score
from .rule_engine import DEFAULT_RULES, RuleContext, RuleState, run_rules
from .sample_size import classify_sample_size, estimate_sample_size, score_range
from .signal_extraction import (
    average_intensity,
    extract_filtering_metrics,
    filtering_red_flags,
    has_free_alternatives,
)
from .two_axis_scorer import calculate_two_axis
from .verdict_classifier import calibrated_verdict_label, classify_verdict
from .viability_calculator import calculate_mvp_viability, calculate_viability
from .weight_normalizer import PresentDimension, aggregate_score, normalize_weights

__all__ = [
    "calculate_viability",
    "calculate_mvp_viability",
    "calibrate_score",
    "adjust_market_score",
    "DEFAULT_RULES",
    "RuleContext",
    "RuleState",
    "run_rules",
    "classify_sample_size",
    "estimate_sample_size",
    "score_range",
    "average_intensity",
    "extract_filtering_metrics",
    "filtering_red_flags",
    "has_free_alternatives",
    "calculate_two_axis",
    "calibrated_verdict_label",
    "classify_verdict",
    "PresentDimension",
    "aggregate_score",
    "normalize_weights",
]
