"""Shared FastAPI dependencies."""

import logging
from functools import lru_cache

from pokedex.services.catalog_service import CatalogClient
from pokedex.services.detail_service import DetailClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_catalog_client() -> CatalogClient:
    """Return the process-wide catalog client.

    A single instance owns the published catalog state, so
    ``/catalog/state`` reflects the last ``/catalog`` fetch.
    """
    logger.info("Creating catalog client")
    return CatalogClient()


def get_detail_client() -> DetailClient:
    """Return a fresh detail client, one per detail request."""
    return DetailClient()
