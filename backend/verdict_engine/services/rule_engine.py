"""Rule Engine — ordered override rules applied after calibration.

Each rule is a small strategy object: it receives the current
``RuleState`` and the immutable ``RuleContext`` (the dimension inputs)
and returns a NEW state.  Rules never mutate their input, so every rule
can be re-run on the same snapshot and produce the same cap and the same
flag text.

Default order (later rules see the output of earlier ones):

1. WTP kill switch          — caps at 5.0 / 6.0, may force verdict 'weak'
2. Competition saturation   — caps at 5.0 / 6.5
3. Market reality warnings  — flags only, never caps

Red flags accumulate in order and are never removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from ..schemas.config_schema import DEFAULT_CONFIG, ScoringConfig
from ..schemas.dimension_schema import (
    CompetitionScoreInput,
    MarketScoreInput,
    PainScoreInput,
)
from ..schemas.verdict_schema import RedFlag, ScoreAdjustment
from .score_utils import clamp, round1

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Read-only inputs every rule may consult."""

    pain: Optional[PainScoreInput] = None
    competition: Optional[CompetitionScoreInput] = None
    market: Optional[MarketScoreInput] = None
    config: ScoringConfig = DEFAULT_CONFIG


@dataclass(frozen=True)
class RuleState:
    """Score and explanations threaded through the rule pipeline."""

    score: float
    red_flags: Tuple[RedFlag, ...] = ()
    forced_verdict: Optional[str] = None
    forced_description: Optional[str] = None
    adjustments: Tuple[ScoreAdjustment, ...] = ()

    def with_flag(self, severity: str, title: str, message: str) -> "RuleState":
        flag = RedFlag(severity=severity, title=title, message=message)
        return replace(self, red_flags=self.red_flags + (flag,))

    def capped(self, cap: float, stage: str, reason: str) -> "RuleState":
        """Lower the score to *cap* if it is above it; record the change."""
        if self.score <= cap:
            return self
        new_score = round1(clamp(cap))
        logger.info("[%s] score capped %.1f → %.1f (%s)", stage, self.score, new_score, reason)
        adjustment = ScoreAdjustment(stage=stage, before=self.score, after=new_score, reason=reason)
        return replace(self, score=new_score, adjustments=self.adjustments + (adjustment,))


class Rule:
    """Base class for a single override rule."""

    name: str = "rule"

    def apply(self, state: RuleState, ctx: RuleContext) -> RuleState:
        raise NotImplementedError


class WtpKillSwitchRule(Rule):
    """Zero willingness-to-pay is a circuit breaker.

    Small samples (0 < signals < 20) get a hard cap and a forced 'weak'
    verdict; larger samples earn more trust and only get a soft cap.
    """

    name = "wtp_kill_switch"

    def apply(self, state: RuleState, ctx: RuleContext) -> RuleState:
        if ctx.pain is None or ctx.pain.willingness_to_pay_count != 0:
            return state

        cfg = ctx.config
        total = ctx.pain.total_signals

        if 0 < total < cfg.wtp_small_sample_signals:
            state = state.capped(
                cfg.wtp_hard_cap,
                self.name,
                f"zero WTP signals in a small sample ({total} signals)",
            )
            state = replace(
                state,
                forced_verdict="weak",
                forced_description=(
                    "No purchase intent detected. Validate willingness-to-pay before proceeding."
                ),
            )
            return state.with_flag(
                "HIGH",
                "No Purchase Intent",
                "Zero willingness-to-pay signals found in community data",
            )

        if total >= cfg.wtp_small_sample_signals:
            state = state.with_flag(
                "HIGH",
                "No Purchase Intent",
                f"Zero WTP signals found across {total} pain signals. "
                "Users may not pay for this solution.",
            )
            return state.capped(
                cfg.wtp_soft_cap,
                self.name,
                f"zero WTP signals across {total} signals",
            )

        return state


class CompetitionSaturationRule(Rule):
    """Real pain and a huge TAM mean little when free alternatives dominate."""

    name = "competition_saturation"

    def apply(self, state: RuleState, ctx: RuleContext) -> RuleState:
        comp = ctx.competition
        if comp is None:
            return state

        cfg = ctx.config
        has_free = bool(comp.has_free_alternatives)
        saturated = (
            comp.market_maturity == "mature"
            or comp.competitor_count >= cfg.saturation_competitor_count
        )

        if has_free and saturated:
            state = state.capped(
                cfg.saturated_free_alt_cap,
                self.name,
                "free alternatives in a saturated market",
            )
            return state.with_flag(
                "HIGH",
                "Saturated Market",
                "Multiple free alternatives exist in a mature market",
            )

        if saturated:
            state = state.capped(
                cfg.saturated_cap,
                self.name,
                f"{comp.competitor_count} competitors",
            )
            return state.with_flag(
                "MEDIUM",
                "Competitive Market",
                f"{comp.competitor_count} competitors in a "
                f"{comp.market_maturity or 'competitive'} market",
            )

        return state


class MarketRealityRule(Rule):
    """Warn when the revenue goal needs implausible penetration.  Never caps."""

    name = "market_reality"

    def apply(self, state: RuleState, ctx: RuleContext) -> RuleState:
        market = ctx.market
        if market is None:
            return state

        cfg = ctx.config
        penetration = market.penetration_required
        penetration_flagged = False

        if penetration > cfg.penetration_high_pct:
            state = state.with_flag(
                "HIGH",
                "Unrealistic Market Penetration",
                f"Requires {penetration:.0f}% market penetration — rarely achievable. "
                "Consider higher pricing or a narrower niche.",
            )
            penetration_flagged = True
        elif penetration > cfg.penetration_medium_pct:
            state = state.with_flag(
                "MEDIUM",
                "Ambitious Market Penetration",
                f"Requires {penetration:.0f}% penetration — an ambitious target. "
                "Validate with customer discovery.",
            )
            penetration_flagged = True

        if market.achievability == "unlikely":
            state = state.with_flag(
                "HIGH",
                "Revenue Goals Unlikely",
                "Market math suggests revenue goals may be unrealistic at current pricing.",
            )
        elif market.achievability == "difficult" and not penetration_flagged:
            state = state.with_flag(
                "MEDIUM",
                "Difficult Revenue Goals",
                "Achieving revenue goals will require exceptional execution.",
            )

        return state


DEFAULT_RULES: Tuple[Rule, ...] = (
    WtpKillSwitchRule(),
    CompetitionSaturationRule(),
    MarketRealityRule(),
)


def run_rules(
    score: float,
    ctx: RuleContext,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> RuleState:
    """Thread *score* through *rules* in order and return the final state."""
    state = RuleState(score=round1(clamp(score)))
    for rule in rules:
        state = rule.apply(state, ctx)
    logger.debug(
        "Rule engine: %.1f → %.1f, %d red flag(s)",
        score, state.score, len(state.red_flags),
    )
    return state
