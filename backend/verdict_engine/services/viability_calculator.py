"""Viability Calculator — fuses up to four research dimensions into a verdict.

Full formula (all four dimensions present):

    VIABILITY = Pain × 0.35 + Market × 0.25 + Competition × 0.25 + Timing × 0.15

Weights are renormalized over whichever dimensions are present.

Pipeline
--------
1. Market score adjustment (WTP, severity, free alternatives)
2. Weight normalization + aggregation → raw score
3. Calibration → calibrated score
4. Rule engine (WTP kill switch, saturation cap, market reality)
5. Verdict classification + sample-size calibrated label
6. Two-axis breakdown (when filtering metrics are supplied)

Rules
-----
- NO API calls
- NO DB writes
- NO shared state: every call builds a fresh ``ViabilityVerdict``
- Every score change is recorded in ``adjustments``
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .. import constants
from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
    TimingScoreInput,
)
from ..schemas.two_axis_schema import TwoAxisInput
from ..schemas.verdict_schema import DimensionScore, ScoreAdjustment, ViabilityVerdict
from .calibration import calibrate_score
from .dimension_assessment import (
    AssessedDimension,
    assess_competition,
    assess_market,
    assess_pain,
    assess_timing,
    build_recommendations,
    combine_confidences,
    rate_data_sufficiency,
)
from .market_adjustment import adjust_market_score
from .rule_engine import DEFAULT_RULES, RuleContext, run_rules
from .sample_size import estimate_sample_size, score_range
from .signal_extraction import filtering_red_flags
from .two_axis_scorer import calculate_two_axis
from .verdict_classifier import (
    calibrated_verdict_label,
    classify_verdict,
    verdict_description,
    verdict_label,
)
from .weight_normalizer import PresentDimension, aggregate_score, normalize_weights

logger = logging.getLogger(__name__)

TOTAL_DIMENSIONS = len(constants.DIMENSION_ORDER)


def calculate_viability(
    pain: Optional[PainScoreInput],
    competition: Optional[CompetitionScoreInput],
    market: Optional[MarketScoreInput] = None,
    timing: Optional[TimingScoreInput] = None,
    two_axis: Optional[TwoAxisInput] = None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ViabilityVerdict:
    """Compute the full Viability Verdict from any subset of dimensions.

    Parameters
    ----------
    pain, competition, market, timing
        Already-scored dimension inputs; ``None`` means the module was not run.
    two_axis : TwoAxisInput, optional
        Filtering metrics for the Hypothesis Confidence / Market Opportunity
        breakdown.  Omitted → both axes are ``None``.
    config : ScoringConfig
        Weight, threshold and cap tables.

    Returns
    -------
    ViabilityVerdict
        Immutable verdict with ``overall_score`` clamped to [0, 10].
    """
    adjustments: List[ScoreAdjustment] = []
    assessed: List[AssessedDimension] = []

    # ── 1. Assess present dimensions (market on its adjusted score) ──────
    if pain is not None:
        assessed.append(assess_pain(pain, config))
    if competition is not None:
        assessed.append(assess_competition(competition, config))
    if market is not None:
        market_adj = adjust_market_score(market.score, pain, competition, config)
        if market_adj.adjusted_score != market_adj.raw_score:
            adjustments.append(ScoreAdjustment(
                stage="market_adjustment",
                before=market_adj.raw_score,
                after=market_adj.adjusted_score,
                reason=market_adj.reason,
            ))
        assessed.append(assess_market(market, market_adj, config))
    if timing is not None:
        assessed.append(assess_timing(timing, config))

    missing = [
        key for key, value in (
            ("pain", pain),
            ("competition", competition),
            ("market", market),
            ("timing", timing),
        )
        if value is None
    ]

    # ── 2. Normalize weights + aggregate ─────────────────────────────────
    if assessed:
        present = [
            PresentDimension(name=d.key, base_weight=config.full_weights[d.key], score=d.score)
            for d in assessed
        ]
        weights = normalize_weights(present)
        raw_score = aggregate_score(present, weights)
    else:
        # No data: never run the aggregator, report insufficiency instead
        weights = {}
        raw_score = 0.0

    dimensions = [
        DimensionScore(
            name=d.display_name,
            score=d.score,
            weight=weights[d.key],
            status=d.status,
            confidence=d.confidence,
            summary=d.summary,
        )
        for d in assessed
    ]

    # ── 3. Calibrate ─────────────────────────────────────────────────────
    calibrated = calibrate_score(raw_score, config)
    if calibrated != raw_score:
        adjustments.append(ScoreAdjustment(
            stage="calibration",
            before=raw_score,
            after=calibrated,
            reason="center-biased stretch around 5.5",
        ))

    # ── 4. Rule engine ───────────────────────────────────────────────────
    ctx = RuleContext(pain=pain, competition=competition, market=market, config=config)
    state = run_rules(calibrated, ctx, DEFAULT_RULES)
    adjustments.extend(state.adjustments)
    final_score = state.score

    # ── 5. Verdict + sample size ─────────────────────────────────────────
    verdict = state.forced_verdict or classify_verdict(final_score, config)
    sample = (
        estimate_sample_size(pain.posts_analyzed, pain.total_signals, config)
        if pain is not None
        else None
    )

    red_flags = list(state.red_flags)
    if two_axis is not None:
        red_flags.extend(filtering_red_flags(two_axis.filtering_metrics))

    # ── 6. Two-axis breakdown ────────────────────────────────────────────
    hypothesis, opportunity = calculate_two_axis(two_axis, config)

    data_sufficiency, data_sufficiency_reason = rate_data_sufficiency(assessed, TOTAL_DIMENSIONS)
    weakest = min(dimensions, key=lambda d: d.score) if dimensions else None

    logger.info(
        "Viability verdict: raw=%.1f calibrated=%.1f final=%.1f verdict=%s flags=%d dims=%d/%d",
        raw_score, calibrated, final_score, verdict, len(red_flags),
        len(assessed), TOTAL_DIMENSIONS,
    )

    return ViabilityVerdict(
        overall_score=final_score,
        raw_score=raw_score,
        verdict=verdict,
        verdict_label=verdict_label(verdict),
        verdict_description=state.forced_description or verdict_description(verdict),
        calibrated_verdict_label=calibrated_verdict_label(verdict, sample),
        score_range=score_range(final_score, sample, config),
        dimensions=dimensions,
        weakest_dimension=weakest,
        dealbreakers=[d.dealbreaker for d in assessed if d.dealbreaker],
        recommendations=build_recommendations(assessed, missing, config),
        confidence=combine_confidences([d.confidence for d in assessed]),
        is_complete=len(assessed) == TOTAL_DIMENSIONS,
        available_dimensions=len(assessed),
        total_dimensions=TOTAL_DIMENSIONS,
        data_sufficiency=data_sufficiency,
        data_sufficiency_reason=data_sufficiency_reason,
        sample_size=sample,
        red_flags=red_flags or None,
        hypothesis_confidence=hypothesis,
        market_opportunity=opportunity,
        adjustments=adjustments,
    )


def calculate_mvp_viability(
    pain: Optional[PainScoreInput],
    competition: Optional[CompetitionScoreInput],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ViabilityVerdict:
    """Legacy two-dimension calculator (Pain + Competition).

    Runs the general pipeline with only those two dimensions, so it shares
    every rule and yields the same verdict as ``calculate_viability`` for
    the same input.  Normalizing the full table over Pain + Competition
    gives 0.5833 / 0.4167, which is the published ``MVP_WEIGHTS`` table
    before rounding.
    """
    return calculate_viability(pain, competition, None, None, None, config)
