"""Food catalog domain models."""

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class FoodRecord:
    """A catalog food with calories per reference unit."""

    name: str
    unit: str
    reference_weight: str
    calories_per_unit: int


class CatalogItem(BaseModel):
    """Raw catalog record as published by the food catalog source."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(alias="Alimento", min_length=1)
    unit: str = Field(default="", alias="Unidade")
    reference_weight: str = Field(default="", alias="Peso")
    calories: int = Field(alias="Calorias")

    @field_validator("unit", "reference_weight", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int | float):
            return str(value)
        return value

    @field_validator("calories", mode="before")
    @classmethod
    def _parse_calories(cls, value: object) -> int:
        return parse_integer_prefix(value)

    def to_record(self) -> FoodRecord:
        """Convert the payload into an immutable domain record."""
        return FoodRecord(
            name=self.name,
            unit=self.unit,
            reference_weight=self.reference_weight,
            calories_per_unit=self.calories,
        )


def parse_integer_prefix(value: object) -> int:
    """Parse the leading integer of a value, truncating any fraction.

    ``"89"`` and ``"89.7"`` both give ``89``; ``" -3kcal"`` gives ``-3``.
    Floats are truncated toward zero. Raises ``ValueError`` when no leading
    integer is present.
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not a calorie value")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        if match:
            return int(match.group(1))
    raise ValueError(f"Not an integer calorie value: {value!r}")
