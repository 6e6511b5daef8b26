"""Pydantic models for the tracker HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.domain.energy import ActivityLevel, Sex
from calorie_tracker.domain.status import Trend


class ProfileUpdate(BaseModel):
    """Partial biometric update; omitted fields keep their value."""

    weight_kg: float | None = Field(default=None, allow_inf_nan=False)
    height_cm: float | None = Field(default=None, allow_inf_nan=False)
    age_years: float | None = Field(default=None, allow_inf_nan=False)
    sex: Sex | None = None


class ActivityUpdate(BaseModel):
    """Activity level selection."""

    activity_level: ActivityLevel


class FoodSelection(BaseModel):
    """A catalog food name and a quantity of reference units."""

    food_name: str
    quantity: float = Field(default=1, allow_inf_nan=False)


class DraftName(BaseModel):
    """Name for the meal draft."""

    name: str


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class FoodResponse(_FromDomain):
    """Catalog food."""

    name: str
    unit: str
    reference_weight: str
    calories_per_unit: int


class EnergyBudgetResponse(_FromDomain):
    """BMR and TDEE."""

    bmr: float
    tdee: float


class ProfileResponse(_FromDomain):
    """Biometric profile with its activity level and budget."""

    weight_kg: float
    height_cm: float
    age_years: float
    sex: Sex
    activity_level: ActivityLevel
    budget: EnergyBudgetResponse


class StatusResponse(_FromDomain):
    """Budget, intake, balance and trend."""

    bmr: float
    tdee: float
    consumed: float
    remaining: float
    trend: Trend


class EntryResponse(_FromDomain):
    """Ledger entry."""

    label: str
    calories: float


class MealComponentResponse(_FromDomain):
    """Food and quantity within a meal."""

    food: FoodResponse
    quantity: float
    calories: float


class MealResponse(_FromDomain):
    """Finalized custom meal."""

    name: str
    components: list[MealComponentResponse]
    total_calories: float


class DraftResponse(_FromDomain):
    """Meal draft in progress."""

    name: str
    components: list[MealComponentResponse]
    calories: float
