"""Core data models for adaptive-recall."""

from adaptive_recall.core.scheduling_data import SchedulingData, UserReview

__all__ = [
    "SchedulingData",
    "UserReview",
]
