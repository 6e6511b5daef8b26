"""Tracker session tying together profile, ledger and custom meals."""

import logging
from dataclasses import dataclass, field

from calorie_tracker.domain.energy import (
    ActivityLevel,
    BiometricProfile,
    EnergyBudget,
    Sex,
)
from calorie_tracker.domain.errors import EntryNotFoundError
from calorie_tracker.domain.ledger import (
    ConsumedEntry,
    CustomMeal,
    MealComponent,
    MealDraft,
)
from calorie_tracker.domain.status import CalorieStatus, Trend
from calorie_tracker.services.catalog import FoodCatalogService
from calorie_tracker.services.energy import compute_budget
from calorie_tracker.services.ledger import ConsumptionLedger
from calorie_tracker.services.meals import MealBuilder

_logger = logging.getLogger(__name__)


@dataclass
class TrackerSession:
    """State for one user interaction; nothing is persisted.

    Every profile setter recomputes the energy budget before returning it.
    """

    catalog: FoodCatalogService
    profile: BiometricProfile = field(default_factory=BiometricProfile)
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    ledger: ConsumptionLedger = field(default_factory=ConsumptionLedger)
    meal_builder: MealBuilder = field(default_factory=MealBuilder)
    custom_meals: list[CustomMeal] = field(default_factory=list)
    budget: EnergyBudget = field(init=False)

    def __post_init__(self) -> None:
        self.budget = compute_budget(self.profile, self.activity_level)

    def set_weight(self, weight_kg: float) -> EnergyBudget:
        """Replace the weight in kg."""
        self.profile.weight_kg = weight_kg
        return self._recompute()

    def set_height(self, height_cm: float) -> EnergyBudget:
        """Replace the height in cm."""
        self.profile.height_cm = height_cm
        return self._recompute()

    def set_age(self, age_years: float) -> EnergyBudget:
        """Replace the age in years."""
        self.profile.age_years = age_years
        return self._recompute()

    def set_sex(self, sex: Sex) -> EnergyBudget:
        """Replace the sex."""
        self.profile.sex = sex
        return self._recompute()

    def set_activity_level(self, activity_level: ActivityLevel) -> EnergyBudget:
        """Replace the activity level."""
        self.activity_level = activity_level
        return self._recompute()

    def record_food(self, food_name: str, quantity: float) -> ConsumedEntry:
        """Record a catalog food in the ledger."""
        return self.ledger.record_food(self.catalog, food_name, quantity)

    def record_meal(self, position: int) -> ConsumedEntry:
        """Record the finalized custom meal at ``position``."""
        return self.ledger.record_meal(self.get_meal(position))

    def remove_entry(self, position: int) -> ConsumedEntry:
        """Remove a ledger entry."""
        return self.ledger.remove_entry(position)

    def get_meal(self, position: int) -> CustomMeal:
        """Return a finalized custom meal by position."""
        if not 0 <= position < len(self.custom_meals):
            raise EntryNotFoundError(position)
        return self.custom_meals[position]

    @property
    def draft(self) -> MealDraft:
        """Meal currently being assembled."""
        return self.meal_builder.draft

    def start_draft(self, name: str) -> MealDraft:
        """Name the draft meal."""
        self.meal_builder.start_draft(name)
        return self.draft

    def add_to_draft(self, food_name: str, quantity: float) -> MealComponent:
        """Add a catalog food to the draft meal."""
        return self.meal_builder.add_component(self.catalog, food_name, quantity)

    def finalize_draft(self) -> CustomMeal:
        """Finalize the draft and keep it with the session's meals."""
        meal = self.meal_builder.finalize()
        self.custom_meals.append(meal)
        _logger.info("Custom meal saved: %s", meal.name)
        return meal

    def status(self) -> CalorieStatus:
        """Budget, intake, signed balance and trend."""
        consumed = self.ledger.total_consumed()
        tdee = self.budget.tdee
        return CalorieStatus(
            bmr=self.budget.bmr,
            tdee=tdee,
            consumed=consumed,
            remaining=self.ledger.remaining(tdee),
            trend=Trend.GAIN if consumed > tdee else Trend.LOSE,
        )

    def _recompute(self) -> EnergyBudget:
        self.budget = compute_budget(self.profile, self.activity_level)
        return self.budget
