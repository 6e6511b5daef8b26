"""Domain models for budget versus intake."""

from dataclasses import dataclass
from enum import Enum


class Trend(str, Enum):
    """Expected weight direction at the current intake."""

    GAIN = "gain"
    LOSE = "lose"


@dataclass(frozen=True)
class CalorieStatus:
    """Budget, intake and balance for the current session."""

    bmr: float
    tdee: float
    consumed: float
    remaining: float
    trend: Trend
