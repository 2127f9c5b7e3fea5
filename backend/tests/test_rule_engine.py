"""Rule engine tests — WTP kill switch, saturation cap, market reality warnings, ordering and idempotence."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from verdict_engine.schemas.dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
)
from verdict_engine.services.rule_engine import (
    CompetitionSaturationRule,
    DEFAULT_RULES,
    MarketRealityRule,
    RuleContext,
    RuleState,
    WtpKillSwitchRule,
    run_rules,
)


def _pain(wtp=0, signals=15):
    return PainScoreInput(
        overall_score=8.0,
        confidence="high",
        total_signals=signals,
        willingness_to_pay_count=wtp,
    )


def _competition(count=6, free=None, maturity=None):
    return CompetitionScoreInput(
        score=7.0,
        confidence="high",
        competitor_count=count,
        has_free_alternatives=free,
        market_maturity=maturity,
    )


def _market(penetration=10.0, achievability="achievable"):
    return MarketScoreInput(
        score=7.0,
        confidence="medium",
        penetration_required=penetration,
        achievability=achievability,
    )


# ===================================================================== #
#  WTP kill switch                                                        #
# ===================================================================== #

class TestWtpKillSwitch:
    rule = WtpKillSwitchRule()

    def test_small_sample_hard_cap_and_forced_verdict(self):
        state = self.rule.apply(RuleState(score=9.3), RuleContext(pain=_pain(signals=15)))
        assert state.score == 5.0
        assert state.forced_verdict == "weak"
        assert len(state.red_flags) == 1
        assert state.red_flags[0].severity == "HIGH"
        assert state.red_flags[0].title == "No Purchase Intent"

    def test_small_sample_forces_verdict_even_below_cap(self):
        state = self.rule.apply(RuleState(score=3.0), RuleContext(pain=_pain(signals=15)))
        assert state.score == 3.0
        assert state.forced_verdict == "weak"
        assert state.adjustments == ()

    def test_large_sample_soft_cap_without_forced_verdict(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext(pain=_pain(signals=40)))
        assert state.score == 6.0
        assert state.forced_verdict is None
        assert "40 pain signals" in state.red_flags[0].message

    def test_boundary_twenty_signals_is_large_sample(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext(pain=_pain(signals=20)))
        assert state.score == 6.0
        assert state.forced_verdict is None

    def test_zero_signals_does_not_fire(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext(pain=_pain(signals=0)))
        assert state == RuleState(score=8.0)

    def test_any_wtp_evidence_disables_rule(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext(pain=_pain(wtp=1, signals=10)))
        assert state == RuleState(score=8.0)

    def test_missing_pain_does_not_fire(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext())
        assert state == RuleState(score=8.0)


# ===================================================================== #
#  Competition saturation                                                 #
# ===================================================================== #

class TestCompetitionSaturation:
    rule = CompetitionSaturationRule()

    def test_free_alternatives_in_mature_market(self):
        ctx = RuleContext(competition=_competition(count=2, free=True, maturity="mature"))
        state = self.rule.apply(RuleState(score=8.0), ctx)
        assert state.score == 5.0
        assert state.red_flags[0].severity == "HIGH"
        assert state.red_flags[0].title == "Saturated Market"

    def test_many_competitors_without_free_alternatives(self):
        state = self.rule.apply(RuleState(score=8.0), RuleContext(competition=_competition(count=6)))
        assert state.score == 6.5
        assert state.red_flags[0].severity == "MEDIUM"
        assert state.red_flags[0].title == "Competitive Market"
        assert state.red_flags[0].message == "6 competitors in a competitive market"

    def test_free_alternatives_alone_are_not_saturation(self):
        ctx = RuleContext(competition=_competition(count=2, free=True, maturity="growing"))
        state = self.rule.apply(RuleState(score=8.0), ctx)
        assert state == RuleState(score=8.0)

    def test_score_below_cap_keeps_score_but_flags(self):
        ctx = RuleContext(competition=_competition(count=8, free=True))
        state = self.rule.apply(RuleState(score=4.2), ctx)
        assert state.score == 4.2
        assert len(state.red_flags) == 1


# ===================================================================== #
#  Market reality warnings                                                #
# ===================================================================== #

class TestMarketReality:
    rule = MarketRealityRule()

    def _titles(self, market):
        state = self.rule.apply(RuleState(score=7.0), RuleContext(market=market))
        assert state.score == 7.0
        return [(f.severity, f.title) for f in state.red_flags]

    def test_high_penetration(self):
        assert self._titles(_market(penetration=60)) == [("HIGH", "Unrealistic Market Penetration")]

    def test_medium_penetration(self):
        assert self._titles(_market(penetration=30)) == [("MEDIUM", "Ambitious Market Penetration")]

    def test_difficult_suppressed_when_penetration_flagged(self):
        titles = self._titles(_market(penetration=30, achievability="difficult"))
        assert titles == [("MEDIUM", "Ambitious Market Penetration")]

    def test_difficult_alone(self):
        titles = self._titles(_market(penetration=10, achievability="difficult"))
        assert titles == [("MEDIUM", "Difficult Revenue Goals")]

    def test_unlikely_always_flagged(self):
        titles = self._titles(_market(penetration=60, achievability="unlikely"))
        assert titles == [
            ("HIGH", "Unrealistic Market Penetration"),
            ("HIGH", "Revenue Goals Unlikely"),
        ]

    def test_realistic_market_has_no_flags(self):
        assert self._titles(_market(penetration=25, achievability="achievable")) == []


# ===================================================================== #
#  Pipeline contract                                                      #
# ===================================================================== #

class TestPipeline:
    def test_default_order(self):
        names = [r.name for r in DEFAULT_RULES]
        assert names == ["wtp_kill_switch", "competition_saturation", "market_reality"]

    def test_caps_compose_without_double_penalty(self):
        ctx = RuleContext(
            pain=_pain(signals=120),
            competition=_competition(count=6, free=True, maturity="mature"),
            market=_market(penetration=60),
        )
        state = run_rules(8.0, ctx)
        assert state.score == 5.0
        assert [f.title for f in state.red_flags] == [
            "No Purchase Intent",
            "Saturated Market",
            "Unrealistic Market Penetration",
        ]
        assert [(a.before, a.after) for a in state.adjustments] == [(8.0, 6.0), (6.0, 5.0)]

    @pytest.mark.parametrize("rule", DEFAULT_RULES, ids=lambda r: r.name)
    def test_rules_are_idempotent(self, rule):
        ctx = RuleContext(
            pain=_pain(signals=15),
            competition=_competition(count=6, free=True, maturity="mature"),
            market=_market(penetration=60, achievability="unlikely"),
        )
        snapshot = RuleState(score=9.0)
        assert rule.apply(snapshot, ctx) == rule.apply(snapshot, ctx)
        assert snapshot == RuleState(score=9.0)

    def test_empty_rule_list_leaves_score(self):
        state = run_rules(7.25, RuleContext(pain=_pain()), rules=())
        assert state.score == 7.3
        assert state.red_flags == ()

    def test_score_clamped_on_entry(self):
        assert run_rules(12.0, RuleContext()).score == 10.0
        assert run_rules(-1.0, RuleContext()).score == 0.0
