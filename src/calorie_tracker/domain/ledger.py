"""Domain models for consumption tracking and custom meals."""

from dataclasses import dataclass

from calorie_tracker.domain.catalog import FoodRecord


@dataclass(frozen=True)
class ConsumedEntry:
    """Snapshot of calories recorded for a food or meal."""

    label: str
    calories: float


@dataclass(frozen=True)
class MealComponent:
    """A catalog food and the quantity of reference units used."""

    food: FoodRecord
    quantity: float

    @property
    def calories(self) -> float:
        """Calories contributed by this component."""
        return self.food.calories_per_unit * self.quantity


@dataclass(frozen=True)
class CustomMeal:
    """Finalized, reusable bundle of foods."""

    name: str
    components: tuple[MealComponent, ...]

    @property
    def total_calories(self) -> float:
        """Sum of component calories."""
        return sum(component.calories for component in self.components)


@dataclass(frozen=True)
class MealDraft:
    """Read-only view of the meal being assembled."""

    name: str
    components: tuple[MealComponent, ...]
