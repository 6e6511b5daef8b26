"""Dependency container wiring for the application."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_tracker.adapters.catalog_client import (
    FoodCatalogClient,
    HttpxFoodCatalogClient,
)
from calorie_tracker.config import Settings
from calorie_tracker.domain.catalog import FoodRecord
from calorie_tracker.services.catalog import FoodCatalogService
from calorie_tracker.services.session import TrackerSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_client: FoodCatalogClient
    catalog_service: FoodCatalogService
    session: TrackerSession
    close_resources: Callable[[], Awaitable[None]]
    catalog_task: asyncio.Task[list[FoodRecord]] | None = None


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_client = HttpxFoodCatalogClient.create(
        url=resolved_settings.catalog_url,
        timeout_seconds=resolved_settings.catalog_timeout_seconds,
    )
    catalog_service = FoodCatalogService(
        client=catalog_client,
        retry_attempts=resolved_settings.catalog_retry_attempts,
        retry_delay_seconds=resolved_settings.catalog_retry_delay_seconds,
    )
    session = TrackerSession(catalog=catalog_service)

    async def close_resources() -> None:
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_client=catalog_client,
        catalog_service=catalog_service,
        session=session,
        close_resources=close_resources,
    )
