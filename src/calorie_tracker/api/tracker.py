"""Tracker API endpoints over the single in-process session."""

from fastapi import APIRouter, Request, status

from calorie_tracker.api.models import (
    ActivityUpdate,
    DraftName,
    DraftResponse,
    EnergyBudgetResponse,
    EntryResponse,
    FoodResponse,
    FoodSelection,
    MealComponentResponse,
    MealResponse,
    ProfileResponse,
    ProfileUpdate,
    StatusResponse,
)
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.catalog import FoodCatalogService
from calorie_tracker.services.session import TrackerSession

router = APIRouter()


def _session(request: Request) -> TrackerSession:
    container: AppContainer = request.app.state.container
    return container.session


@router.get("/foods")
async def list_foods(request: Request) -> dict[str, object]:
    """Return the loaded catalog; empty while it is still loading."""
    container: AppContainer = request.app.state.container
    return _foods_payload(container.catalog_service)


@router.post("/foods/reload")
async def reload_foods(request: Request) -> dict[str, object]:
    """Wait for a pending catalog fetch, then fetch again if it failed."""
    container: AppContainer = request.app.state.container
    task = container.catalog_task
    if task is not None and not task.done():
        await task
    await container.catalog_service.load()
    return _foods_payload(container.catalog_service)


@router.get("/profile")
async def get_profile(request: Request) -> ProfileResponse:
    """Return the biometric profile and its energy budget."""
    return _profile_response(_session(request))


@router.patch("/profile")
async def update_profile(payload: ProfileUpdate, request: Request) -> ProfileResponse:
    """Replace the provided biometric fields and recompute the budget."""
    session = _session(request)
    if payload.weight_kg is not None:
        session.set_weight(payload.weight_kg)
    if payload.height_cm is not None:
        session.set_height(payload.height_cm)
    if payload.age_years is not None:
        session.set_age(payload.age_years)
    if payload.sex is not None:
        session.set_sex(payload.sex)
    return _profile_response(session)


@router.put("/profile/activity")
async def update_activity(payload: ActivityUpdate, request: Request) -> ProfileResponse:
    """Select the activity level and recompute the budget."""
    session = _session(request)
    session.set_activity_level(payload.activity_level)
    return _profile_response(session)


@router.get("/status")
async def get_status(request: Request) -> StatusResponse:
    """Return budget, intake and the signed remaining balance."""
    return StatusResponse.model_validate(_session(request).status())


@router.get("/ledger")
async def list_entries(request: Request) -> dict[str, object]:
    """Return consumed entries in the order they were recorded."""
    ledger = _session(request).ledger
    return {
        "entries": [EntryResponse.model_validate(entry) for entry in ledger.entries()],
        "total": ledger.total_consumed(),
    }


@router.post("/ledger/foods", status_code=status.HTTP_201_CREATED)
async def record_food(payload: FoodSelection, request: Request) -> EntryResponse:
    """Record a catalog food."""
    entry = _session(request).record_food(payload.food_name, payload.quantity)
    return EntryResponse.model_validate(entry)


@router.post("/ledger/meals/{position}", status_code=status.HTTP_201_CREATED)
async def record_meal(position: int, request: Request) -> EntryResponse:
    """Record a finalized custom meal."""
    return EntryResponse.model_validate(_session(request).record_meal(position))


@router.delete("/ledger/{position}")
async def remove_entry(position: int, request: Request) -> EntryResponse:
    """Remove a ledger entry."""
    return EntryResponse.model_validate(_session(request).remove_entry(position))


@router.get("/meals")
async def list_meals(request: Request) -> dict[str, object]:
    """Return finalized custom meals in creation order."""
    return {
        "meals": [
            MealResponse.model_validate(meal)
            for meal in _session(request).custom_meals
        ]
    }


@router.get("/meals/draft")
async def get_draft(request: Request) -> DraftResponse:
    """Return the meal draft."""
    return _draft_response(_session(request))


@router.put("/meals/draft/name")
async def name_draft(payload: DraftName, request: Request) -> DraftResponse:
    """Set the draft name."""
    session = _session(request)
    session.start_draft(payload.name)
    return _draft_response(session)


@router.post("/meals/draft/components")
async def add_draft_component(
    payload: FoodSelection, request: Request
) -> DraftResponse:
    """Add a catalog food to the draft."""
    session = _session(request)
    session.add_to_draft(payload.food_name, payload.quantity)
    return _draft_response(session)


@router.post("/meals/draft/finalize", status_code=status.HTTP_201_CREATED)
async def finalize_draft(request: Request) -> MealResponse:
    """Finalize the draft into a reusable custom meal."""
    return MealResponse.model_validate(_session(request).finalize_draft())


def _foods_payload(catalog: FoodCatalogService) -> dict[str, object]:
    return {
        "loaded": catalog.is_loaded,
        "foods": [FoodResponse.model_validate(food) for food in catalog.foods],
    }


def _profile_response(session: TrackerSession) -> ProfileResponse:
    profile = session.profile
    return ProfileResponse(
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        age_years=profile.age_years,
        sex=profile.sex,
        activity_level=session.activity_level,
        budget=EnergyBudgetResponse.model_validate(session.budget),
    )


def _draft_response(session: TrackerSession) -> DraftResponse:
    draft = session.draft
    return DraftResponse(
        name=draft.name,
        components=[
            MealComponentResponse.model_validate(component)
            for component in draft.components
        ],
        calories=session.meal_builder.draft_calories(),
    )
