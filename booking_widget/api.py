"""
Async client for the hotel REST API.

Every call returns an ApiResult instead of raising: transport errors,
non-2xx responses and bodies that are not a JSON array come back as a
Failure so callers can branch on `result.ok`. Single list items that do
not validate are dropped and logged.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from booking_widget.config import settings
from booking_widget.models import Booking, NewBooking, Room

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    NETWORK = "network"
    REJECTED = "rejected"
    INVALID_PAYLOAD = "invalid_payload"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    endpoint: str
    status_code: Optional[int] = None
    detail: str = ""

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.endpoint}: {self.kind.value} ({self.status_code}) {self.detail}".rstrip()
        return f"{self.endpoint}: {self.kind.value} {self.detail}".rstrip()


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    value: Optional[T] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> "ApiResult[T]":
        return cls(failure=failure)


class HotelApi:
    """Thin wrapper over an httpx.AsyncClient bound to the API base URL."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    @classmethod
    def from_settings(cls, base_url: Optional[str] = None, timeout: Optional[float] = None) -> "HotelApi":
        client = httpx.AsyncClient(
            base_url=base_url or settings.API_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
        )
        return cls(client)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HotelApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _send(self, method: str, path: str, json: Any = None) -> ApiResult[httpx.Response]:
        endpoint = f"{method} {path}"
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as exc:
            logger.debug("transport error on %s: %r", endpoint, exc)
            return ApiResult.fail(Failure(FailureKind.NETWORK, endpoint, detail=str(exc)))
        if not response.is_success:
            return ApiResult.fail(Failure(FailureKind.REJECTED, endpoint, status_code=response.status_code))
        return ApiResult.success(response)

    def _decode_list(self, response: httpx.Response, model: Type[BaseModel], endpoint: str) -> ApiResult:
        """
        Validate a JSON array item by item. Items that do not validate are
        logged and left out; a body that is not an array (or null) fails.
        """
        try:
            payload = response.json()
        except ValueError as exc:
            return ApiResult.fail(Failure(
                FailureKind.INVALID_PAYLOAD, endpoint, status_code=response.status_code, detail=str(exc)
            ))
        if payload is None:
            return ApiResult.success([])
        if not isinstance(payload, list):
            return ApiResult.fail(Failure(
                FailureKind.INVALID_PAYLOAD, endpoint, status_code=response.status_code,
                detail=f"expected a JSON array, got {type(payload).__name__}",
            ))

        items = []
        for raw in payload:
            try:
                items.append(model.model_validate(raw))
            except ValidationError as exc:
                logger.error("Skipping malformed item from %s: %s", endpoint, exc)
        return ApiResult.success(items)

    async def list_rooms(self) -> ApiResult[List[Room]]:
        result = await self._send("GET", "/rooms")
        if not result.ok:
            return result
        return self._decode_list(result.value, Room, "GET /rooms")

    async def list_bookings(self) -> ApiResult[List[Booking]]:
        result = await self._send("GET", "/bookings")
        if not result.ok:
            return result
        return self._decode_list(result.value, Booking, "GET /bookings")

    async def create_booking(self, booking: NewBooking) -> ApiResult[Any]:
        """
        POST /bookings. Only the 2xx/non-2xx signal matters; the response
        body is handed back undecoded.
        """
        result = await self._send("POST", "/bookings", json=booking.to_payload())
        if not result.ok:
            return result
        try:
            body = result.value.json()
        except ValueError:
            body = None
        return ApiResult.success(body)

    async def cancel_booking(self, booking_id: str) -> ApiResult[None]:
        result = await self._send("DELETE", f"/bookings/{booking_id}")
        if not result.ok:
            return result
        return ApiResult.success(None)
