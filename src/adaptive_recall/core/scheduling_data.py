"""Per-item scheduling state and review outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class UserReview(StrEnum):
    """How a review felt to the user."""

    TOO_HARD = "too_hard"  # Curve decays faster than expected: raise difficulty
    JUST_ENOUGH = "just_enough"
    TOO_EASY = "too_easy"  # Curve decays slower than expected: lower difficulty


@dataclass(frozen=True)
class SchedulingData:
    """Scheduling state of a single item.

    The defaults put the difficulty/memory_strength ratio at 0.1, close to
    -ln(0.9), so the first interval lands around one day at a 0.9 target.

    Values are never validated: difficulty, memory_strength and
    adjusting_factor must stay strictly positive for the model to be
    defined, and keeping them there is up to the caller.

    Attributes:
        interval: Days until the next review
        difficulty: Larger means faster decay per unit of memory strength
        memory_strength: Larger means slower decay
        adjusting_factor: Scale applied to the difficulty/strength ratio (1.0 = none)
        times_reviewed: Number of scheduled reviews
        times_recalled: Number of reviews counted as recalled
    """

    interval: int = 1
    difficulty: float = 10.0
    memory_strength: float = 100.0
    adjusting_factor: float = 1.0
    times_reviewed: int = 0
    times_recalled: int = 0

    @property
    def forgetting_rate(self) -> float:
        """Decay constant of the forgetting curve R(t) = exp(-rate * t)."""
        return (1.0 / self.adjusting_factor) * (self.difficulty / self.memory_strength)
