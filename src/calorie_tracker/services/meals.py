"""Custom meal builder."""

import logging
from dataclasses import dataclass, field

from calorie_tracker.domain.errors import InvalidDraftError
from calorie_tracker.domain.ledger import CustomMeal, MealComponent, MealDraft
from calorie_tracker.services.ledger import FoodLookup, resolve_food

_logger = logging.getLogger(__name__)


@dataclass
class MealBuilder:
    """Assembles a draft meal and emits immutable custom meals.

    The draft name and its components are independent: renaming keeps the
    components already added, and a failed finalize leaves both as they were.
    """

    _name: str = ""
    _components: list[MealComponent] = field(default_factory=list)

    @property
    def draft(self) -> MealDraft:
        """Current draft name and components."""
        return MealDraft(name=self._name, components=tuple(self._components))

    def start_draft(self, name: str) -> None:
        """Set or replace the draft name."""
        self._name = name

    def add_component(
        self, catalog: FoodLookup, food_name: str, quantity: float
    ) -> MealComponent:
        """Append a catalog food to the draft."""
        food = resolve_food(catalog, food_name)
        component = MealComponent(food=food, quantity=quantity)
        self._components.append(component)
        return component

    def draft_calories(self) -> float:
        """Calories of the draft as it stands."""
        return sum(component.calories for component in self._components)

    def finalize(self) -> CustomMeal:
        """Emit the draft as a custom meal and clear it."""
        name = self._name.strip()
        if not name:
            raise InvalidDraftError("Meal name is required")
        if not self._components:
            raise InvalidDraftError("Meal needs at least one food")
        meal = CustomMeal(name=name, components=tuple(self._components))
        self._name = ""
        self._components = []
        _logger.debug("Finalized meal %s with %s foods", name, len(meal.components))
        return meal
