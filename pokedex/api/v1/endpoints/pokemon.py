"""Catalog and detail endpoints.

Every endpoint answers 200 with the client's published FetchState; a failed
fetch is reported in the body (``status: failure``) rather than as an HTTP
error, mirroring what a view model would hand to its view.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from pokedex.config import settings
from pokedex.dependencies import get_catalog_client, get_detail_client
from pokedex.services.catalog_service import CatalogClient, CatalogState, filter_items
from pokedex.services.detail_service import DetailClient, DetailState

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get(
    "/catalog",
    response_model=CatalogState,
    summary="Fetch the catalog",
    description="Fetch one page of the Pokémon list, optionally filtered by name.",
)
@limiter.limit(settings.RATE_LIMIT)
async def fetch_catalog(
    request: Request,
    limit: int = Query(settings.CATALOG_PAGE_LIMIT, ge=0, description="Page size passed to PokeAPI"),
    offset: int = Query(0, ge=0, description="Page offset passed to PokeAPI"),
    search: str | None = Query(None, description="Case-insensitive name filter"),
    client: CatalogClient = Depends(get_catalog_client),
) -> CatalogState:
    """Trigger a catalog fetch and return the published state."""
    state = await client.fetch_catalog(limit=limit, offset=offset)
    if state.is_success and search:
        filtered = filter_items(state.data, search)
        logger.info("Search %r matched %d of %d items", search, len(filtered), len(state.data))
        return state.model_copy(update={"data": filtered})
    return state


@router.get(
    "/catalog/state",
    response_model=CatalogState,
    summary="Current catalog state",
    description="Return the catalog state last published, without fetching.",
)
@limiter.limit(settings.RATE_LIMIT)
async def catalog_state(
    request: Request,
    client: CatalogClient = Depends(get_catalog_client),
) -> CatalogState:
    """Return the current catalog state."""
    return client.state


@router.get(
    "/pokemon/{identifier}",
    response_model=DetailState,
    summary="Fetch a Pokémon",
    description="Fetch a Pokémon by name (case-insensitive) or numeric id.",
)
@limiter.limit(settings.RATE_LIMIT)
async def fetch_pokemon(
    request: Request,
    identifier: str,
    client: DetailClient = Depends(get_detail_client),
) -> DetailState:
    """Trigger a detail fetch and return the published state."""
    return await client.fetch_detail(identifier)


@router.get(
    "/health",
    summary="Health check",
    description="Check that the API is running.",
)
@limiter.limit(settings.RATE_LIMIT)
async def health_check(request: Request) -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}
