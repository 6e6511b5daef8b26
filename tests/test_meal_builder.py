"""Tests for the custom meal builder."""

import pytest

from calorie_tracker.domain.errors import FoodNotFoundError, InvalidDraftError
from calorie_tracker.services.catalog import FoodCatalogService
from calorie_tracker.services.ledger import ConsumptionLedger
from calorie_tracker.services.meals import MealBuilder


def test_finalize_emits_meal_and_clears_draft(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.start_draft("Lunch")
    builder.add_component(catalog, "Banana", 2)
    builder.add_component(catalog, "Arroz", 1)

    meal = builder.finalize()
    ledger = ConsumptionLedger()
    entry = ledger.record_meal(meal)

    assert meal.name == "Lunch"
    assert [component.food.name for component in meal.components] == [
        "Banana",
        "Arroz",
    ]
    assert entry.label == "Lunch"
    assert entry.calories == 308
    assert ledger.total_consumed() == 308
    assert builder.draft.name == ""
    assert builder.draft.components == ()


def test_finalize_without_components_keeps_draft() -> None:
    builder = MealBuilder()
    builder.start_draft("Dinner")

    with pytest.raises(InvalidDraftError):
        builder.finalize()

    assert builder.draft.name == "Dinner"


def test_finalize_without_name_keeps_components(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.add_component(catalog, "Banana", 1)
    builder.start_draft("   ")

    with pytest.raises(InvalidDraftError):
        builder.finalize()

    assert builder.draft.name == "   "
    assert len(builder.draft.components) == 1


def test_finalize_trims_name(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.start_draft("  Snack ")
    builder.add_component(catalog, "Pao", 1)

    assert builder.finalize().name == "Snack"


def test_renaming_keeps_components(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.start_draft("Breakfast")
    builder.add_component(catalog, "Pao", 2)
    builder.start_draft("Brunch")

    assert builder.draft.name == "Brunch"
    assert builder.draft_calories() == 264


def test_add_unknown_component_leaves_draft(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.add_component(catalog, "Banana", 1)

    with pytest.raises(FoodNotFoundError):
        builder.add_component(catalog, "Tapioca", 1)

    assert [component.food.name for component in builder.draft.components] == [
        "Banana"
    ]


def test_finalized_meal_does_not_alias_draft(catalog: FoodCatalogService) -> None:
    builder = MealBuilder()
    builder.start_draft("Lunch")
    builder.add_component(catalog, "Banana", 1)
    meal = builder.finalize()

    builder.start_draft("Lunch")
    builder.add_component(catalog, "Arroz", 3)

    assert len(meal.components) == 1
    assert meal.total_calories == 89
