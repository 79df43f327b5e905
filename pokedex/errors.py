"""Error taxonomy for catalog and detail fetches.

Every fetch failure is raised as a :class:`FetchError` subclass inside the
clients and converted to a ``failure`` state at the client boundary, so the
presentation layer only ever sees ``FetchError.message``.
"""

NOT_FOUND_STATUS_CODES = frozenset({404, 410})


class FetchError(Exception):
    """Base class for failures that end up as a published failure message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestURLError(FetchError):
    """The request URL could not be built from the base URL and inputs."""

    def __init__(self, detail: str = "") -> None:
        message = f"Invalid URL: {detail}" if detail else "Invalid URL"
        super().__init__(message)
        self.detail = detail


class TransportFailureError(FetchError):
    """The network call itself failed (DNS, connection, timeout)."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Network error: {detail}")
        self.detail = detail


class StatusCodeError(FetchError):
    """A response arrived with a status other than 200."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def for_catalog(cls, status_code: int) -> "StatusCodeError":
        return cls(status_code, f"Could not load the list (HTTP {status_code})")

    @classmethod
    def for_detail(cls, status_code: int) -> "StatusCodeError":
        if status_code in NOT_FOUND_STATUS_CODES:
            return cls(status_code, f"Error {status_code}: Pokémon not found")
        return cls(status_code, f"Error {status_code}: unexpected response")


class DecodeError(FetchError):
    """A 200 response whose body does not match the expected schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid response: {detail}")
        self.detail = detail
