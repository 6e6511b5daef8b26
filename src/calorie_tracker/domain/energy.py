"""Energy budget domain models."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Daily activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


@dataclass
class BiometricProfile:
    """Biometric inputs for the current session."""

    weight_kg: float = 0.0
    height_cm: float = 0.0
    age_years: float = 0.0
    sex: Sex = Sex.MALE


@dataclass(frozen=True)
class EnergyBudget:
    """Basal and total daily energy expenditure in kcal."""

    bmr: float
    tdee: float
