"""HTTP client for the static food catalog."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FoodCatalogClient(Protocol):
    """Interface for fetching the raw food catalog."""

    async def fetch_foods(self) -> list[dict[str, object]]:
        """Return the raw catalog records."""


@dataclass
class HttpxFoodCatalogClient(FoodCatalogClient):
    """HTTPX-backed food catalog client."""

    url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, url: str, timeout_seconds: float = 15) -> "HttpxFoodCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            url=url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_foods(self) -> list[dict[str, object]]:
        """Download the catalog JSON array."""
        response = await self.http_client.get(self.url, timeout=self.timeout_seconds)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError("Food catalog payload must be a JSON array")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
