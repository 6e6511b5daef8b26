"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from calorie_tracker.adapters.catalog_client import FoodCatalogClient
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.catalog import FoodCatalogService
from calorie_tracker.services.session import TrackerSession


def catalog_payload() -> list[dict[str, object]]:
    return [
        {"Alimento": "Banana", "Unidade": "unidade", "Peso": "100g", "Calorias": "89"},
        {"Alimento": "Arroz", "Unidade": "colher", "Peso": "100g", "Calorias": "130"},
        {"Alimento": "Pao", "Unidade": "fatia", "Peso": "50g", "Calorias": "132.8"},
    ]


@dataclass
class FakeFoodCatalogClient(FoodCatalogClient):
    """Fake catalog client returning a fixed payload."""

    payload: list[dict[str, object]] = field(default_factory=catalog_payload)
    failures: int = 0
    delay_seconds: float = 0
    calls: int = 0

    async def fetch_foods(self) -> list[dict[str, object]]:
        self.calls += 1
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.calls <= self.failures:
            raise RuntimeError("catalog unavailable")
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        catalog_url="https://catalog.test/foods.json",
        catalog_retry_delay_seconds=0,
    )


@pytest.fixture
def catalog_client() -> FakeFoodCatalogClient:
    return FakeFoodCatalogClient()


@pytest.fixture
def catalog(catalog_client: FakeFoodCatalogClient) -> FoodCatalogService:
    service = FoodCatalogService(catalog_client, retry_delay_seconds=0)
    asyncio.run(service.load())
    return service


@pytest.fixture
def session(catalog: FoodCatalogService) -> TrackerSession:
    return TrackerSession(catalog=catalog)


@pytest.fixture
def container(
    settings: Settings,
    catalog_client: FakeFoodCatalogClient,
    catalog: FoodCatalogService,
    session: TrackerSession,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_client=catalog_client,
        catalog_service=catalog,
        session=session,
        close_resources=close_resources,
    )
