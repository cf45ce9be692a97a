"""Interval model: inverse of the exponential forgetting curve.

Solves R(t) = e^(-rate * t) for t at R(t) = probability:

    t = ln(probability) / -rate
"""

from __future__ import annotations

import math


def compute_interval(forgetting_rate: float, probability: float) -> int:
    """Days until recall probability drops to ``probability``.

    The fractional day count is truncated toward zero, so intervals come out
    slightly short rather than rounded.

    Args:
        forgetting_rate: Decay constant of the forgetting curve, >= 0
        probability: Target recall probability, < 1.0

    Returns:
        Whole number of days

    Raises:
        ValueError: If forgetting_rate is negative or probability >= 1.0, or
            from math.log if probability <= 0
        ZeroDivisionError: If forgetting_rate is 0; a curve that never decays
            has no finite interval and no day count is substituted
    """
    if forgetting_rate < 0:
        raise ValueError(f"forgetting_rate must be non-negative, got {forgetting_rate}")
    if probability >= 1.0:
        raise ValueError(f"probability must be < 1.0, got {probability}")

    n_days = math.log(probability) / -forgetting_rate
    return int(n_days)
