"""Review scheduler: next interval and item parameters after one review.

Since t = ln(P) / -f, dividing the forgetting rate f by k multiplies the
interval by k. Each review scales memory strength (and, on TOO_HARD or
TOO_EASY, difficulty), so the difficulty / memory_strength quotient shrinks
and intervals grow from one review to the next.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Any

from adaptive_recall.core.scheduling_data import SchedulingData, UserReview
from adaptive_recall.engine.interval import compute_interval

logger = logging.getLogger(__name__)

DEFAULT_TARGET_PROBABILITY = 0.9


@dataclass(frozen=True)
class UpdateParameters:
    """How strongly a single review moves an item's parameters.

    Values are not range-checked. A difficulty_change_factor of 2.0 or more
    drives difficulty to zero or below on TOO_EASY, and a non-positive
    memory_strength_change_factor does the same to memory strength; keeping
    item state within the model's domain is up to the caller.

    Attributes:
        difficulty_change_factor: Difficulty multiplier on TOO_HARD; TOO_EASY
            uses the mirrored factor 2 - difficulty_change_factor
        memory_strength_change_factor: Memory strength multiplier applied on
            every review
    """

    difficulty_change_factor: float = 1.1
    memory_strength_change_factor: float = 1.60

    def to_dict(self) -> dict[str, Any]:
        return {
            "difficulty_change_factor": self.difficulty_change_factor,
            "memory_strength_change_factor": self.memory_strength_change_factor,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UpdateParameters:
        try:
            return cls(
                difficulty_change_factor=float(data.get("difficulty_change_factor", 1.1)),
                memory_strength_change_factor=float(
                    data.get("memory_strength_change_factor", 1.60)
                ),
            )
        except (ValueError, TypeError):
            logger.warning(
                "Invalid update parameters %r, falling back to defaults", data, exc_info=True
            )
            return cls()


def jitter_interval(base_interval: int, rng: random.Random) -> int:
    """Spread an interval by up to a tenth of its length in either direction.

    Items created together would otherwise come due on the same day forever.
    The noise term is drawn uniformly from [-r, r - 1] with r = base_interval // 10.
    Intervals shorter than ten days have an empty range and are returned as is.
    """
    random_range = base_interval // 10
    if random_range == 0:
        return base_interval

    random_change = rng.randrange(0, random_range * 2) - random_range
    return base_interval + random_change


def schedule(
    item_data: SchedulingData,
    user_review: UserReview,
    update_parameters: UpdateParameters | None = None,
    probability: float = DEFAULT_TARGET_PROBABILITY,
    *,
    rng: random.Random | None = None,
) -> SchedulingData:
    """Compute the scheduling state that follows one review.

    The next interval comes from the forgetting rate of the state *before*
    this review, scaled by the unchanged adjusting factor. Difficulty and
    memory strength are updated for the review after that.

    Both review counters are incremented on every call whatever the outcome,
    TOO_HARD included. This is a known discrepancy kept for compatibility:
    times_recalled is meant to count successful recalls, but here it always
    equals the number of reviews added by this function.

    Args:
        item_data: Current state of the item (not modified)
        user_review: How the review felt
        update_parameters: Update factors (uses defaults if None)
        probability: Target recall probability at the next review, < 1.0
        rng: Randomness source for the jitter (fresh unseeded generator if None)

    Returns:
        New SchedulingData with the jittered interval and incremented counters

    Raises:
        ValueError: If the derived forgetting rate is negative or probability >= 1.0
    """
    if update_parameters is None:
        update_parameters = UpdateParameters()
    if rng is None:
        rng = random.Random()

    if user_review == UserReview.TOO_HARD:
        new_difficulty = item_data.difficulty * update_parameters.difficulty_change_factor
    elif user_review == UserReview.TOO_EASY:
        new_difficulty = item_data.difficulty * (2.0 - update_parameters.difficulty_change_factor)
    else:
        new_difficulty = item_data.difficulty

    new_memory_strength = (
        item_data.memory_strength * update_parameters.memory_strength_change_factor
    )

    base_interval = compute_interval(item_data.forgetting_rate, probability)
    next_interval = jitter_interval(base_interval, rng)

    logger.debug(
        "Scheduled review (%s): base interval %d, jittered %d",
        user_review,
        base_interval,
        next_interval,
    )

    return replace(
        item_data,
        interval=next_interval,
        difficulty=new_difficulty,
        memory_strength=new_memory_strength,
        times_reviewed=item_data.times_reviewed + 1,
        times_recalled=item_data.times_recalled + 1,
    )
