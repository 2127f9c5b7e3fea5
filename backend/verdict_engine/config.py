"""Centralized runtime configuration.

Loads environment variables (``.env`` via python-dotenv) at import time and
builds the ``ScoringConfig`` used by the HTTP layer.  The engine itself
never reads the environment; callers pass a config in.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from dotenv import load_dotenv

from .schemas.config_schema import DEFAULT_CONFIG, ScoringConfig

load_dotenv()

logger = logging.getLogger(__name__)

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

_WEIGHT_ENV_VARS: Dict[str, str] = {
    "pain": "VIABILITY_WEIGHT_PAIN",
    "market": "VIABILITY_WEIGHT_MARKET",
    "competition": "VIABILITY_WEIGHT_COMPETITION",
    "timing": "VIABILITY_WEIGHT_TIMING",
}


def _read_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("[CONFIG] Ignoring %s=%r (not a number)", name, raw)
        return None


def build_scoring_config() -> ScoringConfig:
    """Return ``DEFAULT_CONFIG`` with any weight overrides from the environment.

    Invalid overrides (e.g. a non-positive weight) raise a pydantic
    ``ValidationError`` so a misconfigured deployment fails at startup.
    """
    overrides: Dict[str, float] = {}
    for dim, env_var in _WEIGHT_ENV_VARS.items():
        value = _read_float(env_var)
        if value is not None:
            overrides[dim] = value
    if not overrides:
        return DEFAULT_CONFIG

    weights = {**DEFAULT_CONFIG.full_weights, **overrides}
    logger.info("[CONFIG] Dimension weight overrides: %s", overrides)
    return ScoringConfig(**{**DEFAULT_CONFIG.model_dump(), "full_weights": weights})


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
