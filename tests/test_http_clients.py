"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from calorie_tracker.adapters.catalog_client import HttpxFoodCatalogClient


def test_catalog_client_fetches_json_array() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/foods.json"
        return httpx.Response(
            200,
            json=[
                {"Alimento": "Banana", "Unidade": "un", "Peso": "1", "Calorias": "89"}
            ],
        )

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxFoodCatalogClient(
        url="https://catalog.test/foods.json", http_client=async_client
    )

    foods = asyncio.run(client.fetch_foods())

    assert foods[0]["Alimento"] == "Banana"


def test_catalog_client_raises_on_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    client = HttpxFoodCatalogClient(
        url="https://catalog.test/foods.json",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_foods())


def test_catalog_client_rejects_non_array_payload() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, json={"foods": []})
    )
    client = HttpxFoodCatalogClient(
        url="https://catalog.test/foods.json",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(ValueError):
        asyncio.run(client.fetch_foods())
