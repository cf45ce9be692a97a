"""adaptive-recall: self-adjusting spaced repetition scheduling for a single item.

Models recall with an exponential forgetting curve, corrects the curve with
an adjusting factor calibrated from review history, and jitters intervals so
items created together drift apart.
"""

from adaptive_recall.core.scheduling_data import SchedulingData, UserReview
from adaptive_recall.engine.calibration import observed_recall_rate, update_adjusting_factor
from adaptive_recall.engine.interval import compute_interval
from adaptive_recall.engine.scheduler import (
    DEFAULT_TARGET_PROBABILITY,
    UpdateParameters,
    jitter_interval,
    schedule,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TARGET_PROBABILITY",
    "SchedulingData",
    "UpdateParameters",
    "UserReview",
    "__version__",
    "compute_interval",
    "jitter_interval",
    "observed_recall_rate",
    "schedule",
    "update_adjusting_factor",
]
