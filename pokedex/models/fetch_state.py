"""Fetch state published by the catalog and detail clients."""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class FetchState(BaseModel, Generic[T]):
    """Tagged state of a fetch: idle, loading, success(data) or failure(error).

    ``data`` is only set on success and ``error`` only on failure, so a failed
    fetch never carries a payload from an earlier one.
    """

    model_config = ConfigDict(frozen=True)

    status: FetchStatus = Field(FetchStatus.IDLE, description="Current phase of the fetch")
    data: Optional[T] = Field(None, description="Payload of a successful fetch")
    error: Optional[str] = Field(None, description="Human-readable failure message")

    @model_validator(mode="after")
    def _check_payload(self) -> "FetchState[T]":
        if self.status is FetchStatus.SUCCESS:
            if self.data is None or self.error is not None:
                raise ValueError("success state requires data and no error")
        elif self.status is FetchStatus.FAILURE:
            if not self.error or self.data is not None:
                raise ValueError("failure state requires an error message and no data")
        elif self.data is not None or self.error is not None:
            raise ValueError(f"{self.status.value} state carries neither data nor error")
        return self

    @classmethod
    def idle(cls) -> "FetchState[T]":
        return cls(status=FetchStatus.IDLE)

    @classmethod
    def loading(cls) -> "FetchState[T]":
        return cls(status=FetchStatus.LOADING)

    @classmethod
    def success(cls, data: T) -> "FetchState[T]":
        return cls(status=FetchStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, message: str) -> "FetchState[T]":
        return cls(status=FetchStatus.FAILURE, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status is FetchStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status is FetchStatus.FAILURE
