"""Viability Verdict Routes.

Thin HTTP wrapper around the calculator.  All business logic lives in
``services.viability_calculator``; the route only times the call.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from ..config import build_scoring_config
from ..schemas.request_schema import MvpViabilityRequest, ViabilityRequest
from ..schemas.verdict_schema import ViabilityVerdict
from ..services.viability_calculator import calculate_mvp_viability, calculate_viability
from ..timing import scoring_timer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/viability",
    tags=["Viability"],
    responses={
        500: {"description": "Internal server error during scoring"}
    },
)

_scoring_config = build_scoring_config()


def _supplied(*dimensions) -> int:
    return sum(d is not None for d in dimensions)


@router.post(
    "",
    response_model=ViabilityVerdict,
    status_code=status.HTTP_200_OK,
    summary="Compute a Viability Verdict",
    response_description="Calibrated verdict with dimensions, red flags and two-axis scores",
)
def compute_viability(payload: ViabilityRequest) -> ViabilityVerdict:
    """Fuse any subset of Pain / Competition / Market / Timing into a verdict."""
    supplied = _supplied(payload.pain, payload.competition, payload.market, payload.timing)
    with scoring_timer("viability", supplied):
        return calculate_viability(
            payload.pain,
            payload.competition,
            payload.market,
            payload.timing,
            payload.two_axis,
            config=_scoring_config,
        )


@router.post(
    "/mvp",
    response_model=ViabilityVerdict,
    status_code=status.HTTP_200_OK,
    summary="Compute a legacy two-dimension Viability Verdict",
)
def compute_mvp_viability(payload: MvpViabilityRequest) -> ViabilityVerdict:
    """Pain + Competition only.  Same rules as the full endpoint."""
    with scoring_timer("viability_mvp", _supplied(payload.pain, payload.competition)):
        return calculate_mvp_viability(
            payload.pain,
            payload.competition,
            config=_scoring_config,
        )
