"""Errors raised by the calorie tracking core."""


class CalorieTrackerError(Exception):
    """Base class for recoverable tracker errors."""


class FoodNotFoundError(CalorieTrackerError, LookupError):
    """A food name is not present in the loaded catalog."""

    def __init__(self, food_name: str) -> None:
        super().__init__(f"Food not found in catalog: {food_name!r}")
        self.food_name = food_name


class EntryNotFoundError(CalorieTrackerError, LookupError):
    """A ledger entry or custom meal position is out of range."""

    def __init__(self, position: int) -> None:
        super().__init__(f"No item at position {position}")
        self.position = position


class InvalidDraftError(CalorieTrackerError, ValueError):
    """The meal draft cannot be finalized in its current state."""
