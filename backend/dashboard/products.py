# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Client for the products service (``GET /api/getProductsFast``) and the
manufacturer order summary computed from it.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from core.exceptions import RemoteUnavailable
from core.logger import logger

PRODUCTS_PATH = "/api/getProductsFast"

_IN_PRODUCTION = {"manufactured", "in_production"}


@dataclass(frozen=True)
class ManufacturerSummary:
    total_orders: int
    in_production: int
    dispatched: int
    delivered: int


# Shown until the products service answers with at least one product
MOCK_MANUFACTURER_SUMMARY = ManufacturerSummary(total_orders=47, in_production=12, dispatched=18, delivered=456)


class ProductsClient:
    def __init__(self, base_url: str, client: httpx.AsyncClient):
        self._base_url = base_url.rstrip("/")
        self._client = client

    async def fetch_products(self) -> list[dict[str, Any]]:
        """Raises RemoteUnavailable on transport errors, non-2xx, or a bad body."""
        url = f"{self._base_url}{PRODUCTS_PATH}"
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            products = response.json().get("products") or []
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            raise RemoteUnavailable(f"GET {url}: {exc!r}") from exc
        return [p for p in products if isinstance(p, dict)]


def summarize_products(products: list[dict[str, Any]]) -> ManufacturerSummary:
    statuses = [p.get("status") for p in products]
    return ManufacturerSummary(
        total_orders=len(products),
        in_production=sum(1 for s in statuses if s in _IN_PRODUCTION),
        dispatched=statuses.count("dispatched"),
        delivered=statuses.count("delivered"),
    )


async def load_manufacturer_summary(client: ProductsClient) -> ManufacturerSummary:
    """Live summary, or the mock figures when the service fails or is empty."""
    try:
        products = await client.fetch_products()
    except RemoteUnavailable as exc:
        logger.warning("Using mock data for manufacturer dashboard: %s", exc)
        return MOCK_MANUFACTURER_SUMMARY
    if not products:
        return MOCK_MANUFACTURER_SUMMARY
    return summarize_products(products)
