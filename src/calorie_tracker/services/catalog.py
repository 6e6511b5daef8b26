"""Food catalog service with one-time loading and name lookup."""

import asyncio
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from calorie_tracker.adapters.catalog_client import FoodCatalogClient
from calorie_tracker.domain.catalog import CatalogItem, FoodRecord

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalogService:
    """Holds the loaded catalog; empty until the fetch resolves."""

    client: FoodCatalogClient
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    _foods: list[FoodRecord] = field(default_factory=list, init=False)
    _by_name: dict[str, FoodRecord] = field(default_factory=dict, init=False)
    _loaded: bool = field(default=False, init=False)

    @property
    def foods(self) -> list[FoodRecord]:
        """Loaded foods in catalog order."""
        return list(self._foods)

    @property
    def is_loaded(self) -> bool:
        """True once the catalog fetch has resolved."""
        return self._loaded

    async def load(self) -> list[FoodRecord]:
        """Fetch the catalog once; later calls return the loaded foods.

        A fetch that keeps failing is logged and leaves the catalog empty, so
        a later call may try again.
        """
        if self._loaded:
            return self.foods
        try:
            raw_items = await self._fetch_with_retry()
        except Exception:
            _logger.exception("Food catalog fetch failed; catalog stays empty")
            return self.foods
        self._install(parse_catalog(raw_items))
        _logger.info("Food catalog loaded: %s foods", len(self._foods))
        return self.foods

    def _install(self, foods: list[FoodRecord]) -> None:
        """Install a parsed catalog and mark it loaded."""
        by_name: dict[str, FoodRecord] = {}
        for food in foods:
            if food.name in by_name:
                _logger.warning(
                    "Duplicate catalog name %r; keeping the first entry", food.name
                )
                continue
            by_name[food.name] = food
        self._foods = list(foods)
        self._by_name = by_name
        self._loaded = True

    def find(self, name: str) -> FoodRecord | None:
        """Return the first food with exactly this name, if present."""
        return self._by_name.get(name)

    async def _fetch_with_retry(self) -> list[dict[str, object]]:
        attempt = 0
        while True:
            try:
                return await self.client.fetch_foods()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Food catalog fetch failed (attempt %s/%s): %s",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def parse_catalog(raw_items: list[dict[str, object]]) -> list[FoodRecord]:
    """Validate raw catalog records, skipping the ones that cannot be parsed."""
    foods: list[FoodRecord] = []
    for index, raw in enumerate(raw_items):
        try:
            item = CatalogItem.model_validate(raw)
        except ValidationError as exc:
            _logger.warning(
                "Skipping catalog record %s: %s", index, exc.errors()[0]["msg"]
            )
            continue
        foods.append(item.to_record())
    return foods
