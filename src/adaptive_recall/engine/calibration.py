"""Adjusting-factor calibration from an item's review history.

If the recall rate actually observed differs from the target, scaling the
forgetting rate by ln(target) / ln(actual) moves the next computed interval
toward one that would have produced the target. This is the interval
modifier heuristic described in the Anki deck options manual.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from adaptive_recall.core.scheduling_data import SchedulingData

logger = logging.getLogger(__name__)


def observed_recall_rate(item_data: SchedulingData) -> float:
    """Fraction of reviews that were recalled."""
    return item_data.times_recalled / item_data.times_reviewed


def update_adjusting_factor(
    item_data: SchedulingData,
    target_probability: float,
) -> SchedulingData:
    """Recompute the adjusting factor from accumulated history.

    Degenerate history is not guarded against: no reviews yet, or an
    observed rate of exactly 0 or 1, raise from the arithmetic itself.

    Args:
        item_data: Current state of the item (not modified)
        target_probability: Recall probability the schedule aims for

    Returns:
        New SchedulingData differing from item_data only in adjusting_factor

    Raises:
        ZeroDivisionError: If times_reviewed is 0 or the observed rate is 1.0
        ValueError: If the observed rate or target_probability is <= 0
    """
    actual_probability = observed_recall_rate(item_data)
    new_adjusting_factor = math.log(target_probability) / math.log(actual_probability)

    logger.debug(
        "Adjusting factor %.4f -> %.4f (observed %.4f, target %.4f)",
        item_data.adjusting_factor,
        new_adjusting_factor,
        actual_probability,
        target_probability,
    )

    return replace(item_data, adjusting_factor=new_adjusting_factor)
