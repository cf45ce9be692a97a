"""Scheduling algorithms for adaptive-recall."""

from adaptive_recall.engine.calibration import observed_recall_rate, update_adjusting_factor
from adaptive_recall.engine.interval import compute_interval
from adaptive_recall.engine.scheduler import (
    DEFAULT_TARGET_PROBABILITY,
    UpdateParameters,
    jitter_interval,
    schedule,
)

__all__ = [
    "DEFAULT_TARGET_PROBABILITY",
    "UpdateParameters",
    "compute_interval",
    "jitter_interval",
    "observed_recall_rate",
    "schedule",
    "update_adjusting_factor",
]
