"""
Timing Utilities for Latency Instrumentation

Logs how long each viability request spent scoring, in the ``[TIMING]``
format used across the service.
"""

import logging
import time
from contextlib import contextmanager
from typing import Optional

logger = logging.getLogger(__name__)


def log_timing(node_name: str, action: str, duration_ms: Optional[float] = None):
    """Log a timing event in standard format."""
    if duration_ms is not None:
        logger.info("[TIMING] %s: %s — duration=%.0fms", node_name, action, duration_ms)
    else:
        logger.info("[TIMING] %s: %s", node_name, action)


@contextmanager
def scoring_timer(endpoint: str, dimensions: int):
    """Time one scoring call, tagging the log line with the dimensions supplied."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        log_timing(endpoint, f"scored {dimensions}/4 dimension(s)", duration_ms)
