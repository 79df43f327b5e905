"""HTTP plumbing shared by the catalog and detail clients.

Both clients follow the same pipeline: publish ``loading``, build the URL,
issue one GET, check the status, decode, then publish ``success`` or
``failure``.  Only the URL, the status message and the decoder differ.
"""

import logging
from typing import Awaitable, Generic, Optional, TypeVar

import httpx

from pokedex.config import settings
from pokedex.errors import FetchError, InvalidRequestURLError, TransportFailureError
from pokedex.models.fetch_state import FetchState
from pokedex.services.state import StatePublisher

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_url(base_url: str, path: str, params: Optional[dict[str, int]] = None) -> httpx.URL:
    """Join *path* onto *base_url* and validate the result as an http(s) URL."""
    try:
        url = httpx.URL(f"{base_url.rstrip('/')}/{path}", params=params)
    except httpx.InvalidURL as e:
        raise InvalidRequestURLError(str(e)) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidRequestURLError(f"'{base_url}' is not an http(s) base URL")
    return url


async def send_get(url: httpx.URL, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.Response:
    """Issue a single GET and return the response, whatever its status."""
    logger.debug("GET %s", url)
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            return await client.get(url)
    except httpx.UnsupportedProtocol as e:
        raise InvalidRequestURLError(str(e)) from e
    except httpx.HTTPError as e:
        logger.warning("GET %s failed: %r", url, e)
        raise TransportFailureError(str(e) or type(e).__name__) from e


class BaseFetchClient(Generic[T]):
    """Runs fetches and publishes their outcome through a StatePublisher.

    Overlapping fetches are not cancelled: whichever completes last publishes
    last.  With ``sequence_guard`` enabled, a completion that is not the most
    recently started fetch is dropped instead.
    """

    def __init__(
        self,
        name: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sequence_guard: Optional[bool] = None,
    ) -> None:
        self.base_url = (base_url if base_url is not None else settings.POKEAPI_BASE_URL).rstrip("/")
        self.publisher: StatePublisher[T] = StatePublisher(name)
        self._transport = transport
        self._sequence_guard = (
            settings.REQUEST_SEQUENCE_GUARD if sequence_guard is None else sequence_guard
        )
        self._latest_request = 0

    @property
    def state(self) -> FetchState[T]:
        return self.publisher.state

    async def _run(self, state_type: type[FetchState[T]], load: Awaitable[T]) -> FetchState[T]:
        self._latest_request += 1
        request_number = self._latest_request
        self.publisher.publish(state_type.loading())

        try:
            payload = await load
        except FetchError as e:
            logger.warning("%s fetch #%d failed: %s", self.publisher.name, request_number, e.message)
            result = state_type.failure(e.message)
        except Exception as e:
            logger.exception("%s fetch #%d raised unexpectedly", self.publisher.name, request_number)
            result = state_type.failure(f"Unexpected error: {type(e).__name__}")
        else:
            result = state_type.success(payload)

        if self._sequence_guard and request_number != self._latest_request:
            logger.debug(
                "Dropping stale %s fetch #%d (latest is #%d)",
                self.publisher.name,
                request_number,
                self._latest_request,
            )
            return self.publisher.state

        self.publisher.publish(result)
        return result
