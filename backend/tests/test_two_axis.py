"""Two-axis scoring and signal extraction tests."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from verdict_engine.schemas.config_schema import ScoringConfig
from verdict_engine.schemas.dimension_schema import PainScoreInput
from verdict_engine.schemas.two_axis_schema import FilteringMetrics, TwoAxisInput
from verdict_engine.services.signal_extraction import (
    average_intensity,
    extract_filtering_metrics,
    filtering_red_flags,
    has_free_alternatives,
    signal_tier,
)
from verdict_engine.services.two_axis_scorer import (
    calculate_hypothesis_confidence,
    calculate_market_opportunity,
    calculate_two_axis,
)
from verdict_engine.services.viability_calculator import calculate_viability


def _input(core=80, related=20, posts=150, sources=("reddit", "hacker_news", "app_stores"), **kwargs):
    return TwoAxisInput(
        filtering_metrics=FilteringMetrics(
            core_signals=core,
            related_signals=related,
            posts_analyzed=posts,
            sources=list(sources),
        ),
        **kwargs,
    )


# ===================================================================== #
#  Hypothesis confidence                                                  #
# ===================================================================== #

class TestHypothesisConfidence:
    def test_three_sources_and_eighty_percent_core_is_high(self):
        result = calculate_hypothesis_confidence(_input())
        assert result.direct_signal_percent == 80.0
        assert result.signal_volume == 100
        assert result.multi_source_confirmation is True
        assert result.factors == {
            "direct_signal_score": 8.0,
            "volume_score": 10.0,
            "multi_source_score": 10.0,
        }
        assert result.score == 9.0
        assert result.level == "high"

    def test_mostly_related_signals_is_partial(self):
        result = calculate_hypothesis_confidence(_input(core=10, related=30, sources=("reddit",)))
        # 0.5 × 2.5 + 0.25 × 4.0 + 0.25 × 4
        assert result.score == 3.3
        assert result.level == "partial"
        assert result.multi_source_confirmation is False

    def test_no_signals_is_low(self):
        result = calculate_hypothesis_confidence(_input(core=0, related=0, sources=()))
        assert result.score == 0.0
        assert result.direct_signal_percent == 0.0
        assert result.level == "low"

    def test_duplicate_sources_count_once(self):
        result = calculate_hypothesis_confidence(_input(sources=("reddit", "reddit")))
        assert result.factors["multi_source_score"] == 4.0


# ===================================================================== #
#  Market opportunity                                                     #
# ===================================================================== #

class TestMarketOpportunity:
    def test_active_validated_market_is_strong(self):
        result = calculate_market_opportunity(
            _input(market_score=7.0, timing_score=8.0, competitor_count=4)
        )
        assert result.activity_score == 10.0
        assert result.competitor_presence == 10.0
        assert result.score == 8.6
        assert result.level == "strong"

    def test_some_competitors_beat_none(self):
        none = calculate_market_opportunity(_input(market_score=6.0, timing_score=6.0, competitor_count=0))
        some = calculate_market_opportunity(_input(market_score=6.0, timing_score=6.0, competitor_count=2))
        assert some.score > none.score
        assert none.competitor_presence == 3.0
        assert some.competitor_presence == 7.0

    def test_missing_inputs_default_to_neutral(self):
        result = calculate_market_opportunity(_input(core=0, related=0, posts=0))
        assert result.market_size_score == 5.0
        assert result.timing_score == 5.0
        assert result.activity_score == 0.0
        assert result.competitor_presence == 5.0
        assert result.level == "weak"

    def test_factors_report_contributions(self):
        result = calculate_market_opportunity(_input(market_score=7.0, timing_score=8.0, competitor_count=4))
        assert result.factors["market_size_contribution"] == pytest.approx(2.1)
        assert result.factors["timing_contribution"] == pytest.approx(2.0)
        assert result.factors["activity_contribution"] == pytest.approx(2.5)
        assert result.factors["competitor_contribution"] == pytest.approx(2.0)

    def test_factors_round_half_up(self):
        # 0.25 × 4.5 = 1.125 exactly; banker's rounding would give 1.12
        result = calculate_market_opportunity(_input(timing_score=4.5))
        assert result.factors["timing_contribution"] == 1.13


class TestTwoAxisConfig:
    def test_hypothesis_weights_from_config(self):
        cfg = ScoringConfig(hypothesis_weights={"direct_signal": 1.0, "volume": 0.0, "multi_source": 0.0})
        result = calculate_hypothesis_confidence(_input(core=40, related=60), cfg)
        assert result.score == 4.0
        assert result.level == "partial"

    def test_level_cutoffs_from_config(self):
        cfg = ScoringConfig(opportunity_level_thresholds={"strong": 9.0, "moderate": 8.0})
        result = calculate_market_opportunity(
            _input(market_score=7.0, timing_score=8.0, competitor_count=4), cfg,
        )
        assert result.score == 8.6
        assert result.level == "moderate"

    def test_step_tables_from_config(self):
        cfg = ScoringConfig(
            multi_source_scores={0: 0.0, 1: 6.0},
            competitor_presence_steps=((0, 1.0), (20, 9.0)),
            competitor_presence_crowded=2.0,
        )
        hypothesis = calculate_hypothesis_confidence(_input(sources=("reddit", "hacker_news")), cfg)
        assert hypothesis.factors["multi_source_score"] == 6.0
        crowded = calculate_market_opportunity(_input(competitor_count=15), cfg)
        assert crowded.competitor_presence == 9.0
        assert calculate_market_opportunity(_input(competitor_count=25), cfg).competitor_presence == 2.0

    def test_verdict_passes_config_through(self):
        cfg = ScoringConfig(hypothesis_level_thresholds={"high": 9.5, "partial": 3.0})
        pain = PainScoreInput(overall_score=7.0, confidence="high", total_signals=60, willingness_to_pay_count=6)
        verdict = calculate_viability(pain, None, two_axis=_input(), config=cfg)
        assert verdict.hypothesis_confidence.level == "partial"


class TestTwoAxisInVerdict:
    def test_absent_without_filtering_metrics(self):
        assert calculate_two_axis(None) == (None, None)
        pain = PainScoreInput(overall_score=7.0, confidence="high", total_signals=60, willingness_to_pay_count=6)
        verdict = calculate_viability(pain, None)
        assert verdict.hypothesis_confidence is None
        assert verdict.market_opportunity is None

    def test_attached_to_verdict(self):
        pain = PainScoreInput(overall_score=7.0, confidence="high", total_signals=60, willingness_to_pay_count=6)
        verdict = calculate_viability(pain, None, two_axis=_input())
        assert verdict.hypothesis_confidence.level == "high"
        assert verdict.market_opportunity is not None

    def test_filtering_flags_follow_rule_flags(self):
        pain = PainScoreInput(overall_score=7.0, confidence="high", total_signals=12, willingness_to_pay_count=0)
        metrics = FilteringMetrics(
            core_signals=3,
            related_signals=9,
            posts_analyzed=8,
            sources=["reddit"],
            narrow_problem_warning=True,
            stage2_filter_rate=72.4,
            post_filter_rate=97.0,
            quality_level="low",
        )
        verdict = calculate_viability(pain, None, two_axis=TwoAxisInput(filtering_metrics=metrics))
        assert [f.title for f in verdict.red_flags] == [
            "No Purchase Intent",
            "Narrow Problem Definition",
            "Very High Filter Rate",
        ]


# ===================================================================== #
#  Signal extraction helpers                                              #
# ===================================================================== #

class TestSignalExtraction:
    def test_average_intensity(self):
        assert average_intensity(2, 1, 1, 4) == pytest.approx(0.725)
        assert average_intensity(0, 0, 0, 0) == 0.5

    def test_free_alternatives_detection(self):
        assert has_free_alternatives(["$10/mo subscription", None, "Freemium"]) is True
        assert has_free_alternatives(["$0 starter plan"]) is True
        assert has_free_alternatives(["$29/mo", "Enterprise"]) is False
        assert has_free_alternatives([]) is False

    @pytest.mark.parametrize(
        "relevance,tier",
        [(0.5, "core"), (0.45, "core"), (0.4, "strong"), (0.3, "related"), (0.2, "adjacent"), (0.1, None)],
    )
    def test_signal_tier(self, relevance, tier):
        assert signal_tier(relevance) == tier

    def test_extract_filtering_metrics(self):
        metrics = extract_filtering_metrics([0.5, 0.4, 0.3, 0.2, 0.1, 0.45], 42, ["reddit"])
        assert metrics.core_signals == 3
        assert metrics.related_signals == 2
        assert metrics.posts_analyzed == 42
        assert metrics.sources == ["reddit"]

    def test_filtering_red_flags(self):
        assert filtering_red_flags(None) == []
        clean = FilteringMetrics(core_signals=10, related_signals=5, posts_analyzed=80)
        assert filtering_red_flags(clean) == []

        narrow = FilteringMetrics(
            core_signals=2,
            related_signals=20,
            posts_analyzed=60,
            narrow_problem_warning=True,
            stage2_filter_rate=72.4,
        )
        flags = filtering_red_flags(narrow)
        assert len(flags) == 1
        assert flags[0].message.startswith("72% of domain-relevant posts")
