"""Consumption ledger for calories eaten during a session."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from calorie_tracker.domain.catalog import FoodRecord
from calorie_tracker.domain.errors import EntryNotFoundError, FoodNotFoundError
from calorie_tracker.domain.ledger import ConsumedEntry, CustomMeal

_logger = logging.getLogger(__name__)


class FoodLookup(Protocol):
    """Exact-name lookup over a loaded food catalog."""

    def find(self, name: str) -> FoodRecord | None:
        """Return the food with this name, if present."""


def resolve_food(catalog: FoodLookup, food_name: str) -> FoodRecord:
    """Look up a food or raise ``FoodNotFoundError``."""
    food = catalog.find(food_name)
    if food is None:
        raise FoodNotFoundError(food_name)
    return food


@dataclass
class ConsumptionLedger:
    """Append-ordered record of consumed foods and meals."""

    _entries: list[ConsumedEntry] = field(default_factory=list)

    def record_food(
        self, catalog: FoodLookup, food_name: str, quantity: float
    ) -> ConsumedEntry:
        """Record ``quantity`` reference units of a catalog food."""
        food = resolve_food(catalog, food_name)
        entry = ConsumedEntry(
            label=food.name, calories=food.calories_per_unit * quantity
        )
        return self._append(entry)

    def record_meal(self, meal: CustomMeal) -> ConsumedEntry:
        """Record a finalized custom meal as a single entry."""
        entry = ConsumedEntry(label=meal.name, calories=meal.total_calories)
        return self._append(entry)

    def remove_entry(self, position: int) -> ConsumedEntry:
        """Remove and return the entry at ``position``."""
        if not 0 <= position < len(self._entries):
            raise EntryNotFoundError(position)
        entry = self._entries.pop(position)
        _logger.debug("Ledger removed %s (%s kcal)", entry.label, entry.calories)
        return entry

    def entries(self) -> tuple[ConsumedEntry, ...]:
        """Entries in the order they were recorded."""
        return tuple(self._entries)

    def total_consumed(self) -> float:
        """Sum of all recorded calories."""
        return sum(entry.calories for entry in self._entries)

    def remaining(self, tdee: float) -> float:
        """Calories left in the budget; negative when over budget."""
        return tdee - self.total_consumed()

    def _append(self, entry: ConsumedEntry) -> ConsumedEntry:
        self._entries.append(entry)
        _logger.debug("Ledger recorded %s (%s kcal)", entry.label, entry.calories)
        return entry
