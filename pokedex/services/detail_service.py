"""Detail client: ``GET /pokemon/{identifier}`` for one Pokémon."""

import logging
from typing import Optional

import httpx

from pokedex.errors import InvalidRequestURLError, StatusCodeError
from pokedex.models.fetch_state import FetchState
from pokedex.models.pokemon import DetailRecord
from pokedex.services.decoder import decode_detail
from pokedex.services.http import BaseFetchClient, build_url, send_get

logger = logging.getLogger(__name__)

DetailState = FetchState[DetailRecord]

_FORBIDDEN_IDENTIFIER_CHARS = frozenset("/?#")


def normalize_identifier(identifier: str) -> str:
    """Lower-case a name or numeric id for the case-sensitive detail endpoint."""
    normalized = identifier.strip().lower()
    if not normalized:
        raise InvalidRequestURLError("empty identifier")
    if any(ch in _FORBIDDEN_IDENTIFIER_CHARS or ch.isspace() for ch in normalized):
        raise InvalidRequestURLError(f"identifier '{identifier}' is not a single path segment")
    # "." and ".." are dot segments; httpx would resolve them away
    if normalized in (".", ".."):
        raise InvalidRequestURLError(f"identifier '{identifier}' is a dot segment")
    return normalized


class DetailClient(BaseFetchClient[DetailRecord]):
    """Fetches one Pokémon record and publishes it as ``DetailState``.

    One instance backs one detail view; a failed fetch replaces any record
    fetched earlier.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sequence_guard: Optional[bool] = None,
    ) -> None:
        super().__init__("detail", base_url=base_url, transport=transport, sequence_guard=sequence_guard)

    async def fetch_detail(self, identifier: str) -> DetailState:
        """Fetch a Pokémon by name or numeric id and publish the outcome."""
        return await self._run(DetailState, self._load(identifier))

    async def _load(self, identifier: str) -> DetailRecord:
        url = build_url(self.base_url, f"pokemon/{normalize_identifier(identifier)}")
        response = await send_get(url, self._transport)
        if response.status_code != 200:
            raise StatusCodeError.for_detail(response.status_code)

        record = decode_detail(response.content)
        logger.info("Loaded detail for %s (#%d)", record.name, record.id)
        return record
