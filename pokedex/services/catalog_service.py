"""Catalog client: one bounded ``GET /pokemon`` page, published as list items."""

import logging
from typing import Optional

import httpx

from pokedex.config import settings
from pokedex.errors import StatusCodeError
from pokedex.models.fetch_state import FetchState
from pokedex.models.pokemon import CatalogItem
from pokedex.services.decoder import decode_catalog
from pokedex.services.http import BaseFetchClient, build_url, send_get

logger = logging.getLogger(__name__)

CatalogState = FetchState[list[CatalogItem]]


def filter_items(items: list[CatalogItem], query: Optional[str]) -> list[CatalogItem]:
    """Return items whose name contains *query*, ignoring case."""
    if not query or not query.strip():
        return items
    needle = query.strip().casefold()
    return [item for item in items if needle in item.name.casefold()]


class CatalogClient(BaseFetchClient[list[CatalogItem]]):
    """Fetches the catalog list and publishes it as ``CatalogState``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sequence_guard: Optional[bool] = None,
    ) -> None:
        super().__init__("catalog", base_url=base_url, transport=transport, sequence_guard=sequence_guard)

    async def fetch_catalog(self, limit: Optional[int] = None, offset: int = 0) -> CatalogState:
        """Fetch one page of the catalog and publish the outcome.

        ``limit`` defaults to ``CATALOG_PAGE_LIMIT`` (1000).  Both values are
        passed through to the API unchanged.
        """
        if limit is None:
            limit = settings.CATALOG_PAGE_LIMIT
        return await self._run(CatalogState, self._load(limit, offset))

    async def _load(self, limit: int, offset: int) -> list[CatalogItem]:
        url = build_url(self.base_url, "pokemon", params={"limit": limit, "offset": offset})
        response = await send_get(url, self._transport)
        if response.status_code != 200:
            raise StatusCodeError.for_catalog(response.status_code)

        items = [CatalogItem.from_entry(entry) for entry in decode_catalog(response.content)]
        logger.info("Loaded %d catalog items (limit=%d, offset=%d)", len(items), limit, offset)
        return items
