"""
Review session example for adaptive-recall.

This example demonstrates:
1. Creating an item with default scheduling state
2. Threading it through a sequence of reviews
3. Recalibrating the adjusting factor from a review history
"""

import logging
import random

from adaptive_recall import (
    DEFAULT_TARGET_PROBABILITY,
    SchedulingData,
    UpdateParameters,
    UserReview,
    schedule,
    update_adjusting_factor,
)


def show(label: str, item: SchedulingData) -> None:
    print(
        f"  {label:<12} interval={item.interval:>4}d  difficulty={item.difficulty:6.2f}  "
        f"strength={item.memory_strength:9.2f}  factor={item.adjusting_factor:.3f}  "
        f"reviews={item.times_reviewed}"
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Seeded so the jitter is the same on every run
    rng = random.Random(2024)
    params = UpdateParameters(difficulty_change_factor=1.15)

    # 1. A new item
    item = SchedulingData()
    print("New item:")
    show("created", item)

    # 2. Reviews as the user reports them
    reviews = [
        UserReview.JUST_ENOUGH,
        UserReview.TOO_HARD,
        UserReview.JUST_ENOUGH,
        UserReview.TOO_EASY,
        UserReview.JUST_ENOUGH,
        UserReview.JUST_ENOUGH,
        UserReview.TOO_EASY,
        UserReview.JUST_ENOUGH,
    ]

    print("\nReviewing...")
    for review in reviews:
        item = schedule(item, review, params, DEFAULT_TARGET_PROBABILITY, rng=rng)
        show(review.value, item)

    # 3. Calibration needs a history with some failed recalls. schedule()
    #    counts every review as recalled, so the caller tracks misses itself.
    history = SchedulingData(
        interval=item.interval,
        difficulty=item.difficulty,
        memory_strength=item.memory_strength,
        times_reviewed=item.times_reviewed,
        times_recalled=item.times_reviewed - 2,
    )

    print("\nCalibrating with 2 missed recalls...")
    calibrated = update_adjusting_factor(history, DEFAULT_TARGET_PROBABILITY)
    show("calibrated", calibrated)

    following = schedule(calibrated, UserReview.JUST_ENOUGH, params, rng=rng)
    show("next review", following)


if __name__ == "__main__":
    main()
