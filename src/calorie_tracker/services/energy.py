"""Basal metabolic rate and daily energy expenditure."""

from calorie_tracker.domain.energy import (
    ACTIVITY_MULTIPLIERS,
    ActivityLevel,
    BiometricProfile,
    EnergyBudget,
    Sex,
)

_MALE_OFFSET = 5
_FEMALE_OFFSET = -161


def compute_bmr(
    weight_kg: float, height_cm: float, age_years: float, sex: Sex
) -> float:
    """Return BMR in kcal/day using the Mifflin-St Jeor equation.

    Inputs are not validated; zero or negative values propagate.
    """
    offset = _MALE_OFFSET if sex == Sex.MALE else _FEMALE_OFFSET
    return 10 * weight_kg + 6.25 * height_cm - 5 * age_years + offset


def compute_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Scale BMR by the activity multiplier."""
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def compute_budget(
    profile: BiometricProfile, activity_level: ActivityLevel
) -> EnergyBudget:
    """Compute BMR and TDEE for a profile."""
    bmr = compute_bmr(
        profile.weight_kg, profile.height_cm, profile.age_years, profile.sex
    )
    return EnergyBudget(bmr=bmr, tdee=compute_tdee(bmr, activity_level))
