"""Decoding of raw PokeAPI response bodies into the data model."""

import logging

from pydantic import ValidationError

from pokedex.errors import DecodeError
from pokedex.models.pokemon import CatalogEntry, CatalogPage, DetailRecord

logger = logging.getLogger(__name__)

# Validation errors quoted in a failure message
_MAX_REPORTED_ERRORS = 3


def _describe(exc: ValidationError) -> str:
    """Condense a ValidationError into ``loc: msg`` pairs."""
    parts = []
    for error in exc.errors()[:_MAX_REPORTED_ERRORS]:
        loc = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{loc}: {error['msg']}")
    remaining = exc.error_count() - _MAX_REPORTED_ERRORS
    if remaining > 0:
        parts.append(f"and {remaining} more")
    return "; ".join(parts)


def decode_catalog(body: bytes | str) -> list[CatalogEntry]:
    """Decode a ``GET /pokemon`` body into its entries, keeping API order."""
    try:
        page = CatalogPage.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Catalog body failed validation (%d errors)", e.error_count())
        raise DecodeError(_describe(e)) from e
    return page.results


def decode_detail(body: bytes | str) -> DetailRecord:
    """Decode a ``GET /pokemon/{identifier}`` body into a DetailRecord."""
    try:
        return DetailRecord.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Detail body failed validation (%d errors)", e.error_count())
        raise DecodeError(_describe(e)) from e
