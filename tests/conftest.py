"""
In-process fake of the hotel API, served to the client through
httpx.ASGITransport so no network is involved.
"""
import asyncio
import uuid
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel

from booking_widget.api import HotelApi

BASE_URL = "http://testserver"


class BookingIn(BaseModel):
    room: str
    guestName: str
    checkIn: str
    checkOut: str


class FakeHotel:
    def __init__(self, rooms: Optional[List[Dict[str, Any]]] = None, bookings: Optional[List[Dict[str, Any]]] = None):
        self.rooms = rooms if rooms is not None else []
        self.bookings = bookings if bookings is not None else []
        self.requests: List[Tuple[str, str]] = []
        self.posted: List[Dict[str, Any]] = []
        self.force_status: Optional[int] = None
        self._apis: List[HotelApi] = []
        self.app = self._build_app()

    def _find_room(self, room_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self.rooms if r["id"] == room_id), None)

    def _build_app(self) -> FastAPI:
        app = FastAPI(title="Fake hotel API")

        @app.middleware("http")
        async def forced_failure(request, call_next):
            if self.force_status is not None:
                return Response(status_code=self.force_status)
            return await call_next(request)

        @app.get("/rooms")
        def get_rooms():
            return self.rooms

        @app.get("/bookings")
        def get_bookings():
            return self.bookings

        @app.post("/bookings")
        def create_booking(booking: BookingIn):
            self.posted.append(booking.model_dump())
            room = self._find_room(booking.room)
            if room is not None and not room["available"]:
                raise HTTPException(status_code=409, detail="Room is already booked")
            entry = booking.model_dump()
            entry["_id"] = uuid.uuid4().hex
            self.bookings.append(entry)
            if room is not None:
                room["available"] = False
            return {"InsertedID": entry["_id"]}

        @app.delete("/bookings/{booking_id}")
        def delete_booking(booking_id: str):
            for i, b in enumerate(self.bookings):
                if b.get("_id") == booking_id:
                    removed = self.bookings.pop(i)
                    room = self._find_room(removed["room"])
                    if room is not None:
                        room["available"] = True
                    return {"DeletedCount": 1}
            raise HTTPException(status_code=404, detail="Booking not found")

        return app

    async def record(self, request: httpx.Request) -> None:
        self.requests.append((request.method, request.url.path))

    def api(self) -> HotelApi:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app),
            base_url=BASE_URL,
            event_hooks={"request": [self.record]},
        )
        api = HotelApi(client)
        self._apis.append(api)
        return api

    async def aclose(self) -> None:
        for api in self._apis:
            await api.aclose()
        self._apis.clear()


def make_room(room_id: str, available: bool = True, price: float = 120.0, room_type: str = "Standard Room") -> Dict[str, Any]:
    return {
        "id": room_id,
        "type": room_type,
        "price": price,
        "available": available,
        "imageUrl": f"https://images.example.com/{room_id}.jpg",
    }


def make_booking(booking_id: str, room: str, guest: str = "Bob") -> Dict[str, Any]:
    return {
        "_id": booking_id,
        "room": room,
        "guestName": guest,
        "checkIn": "2024-07-01",
        "checkOut": "2024-07-03",
    }


@pytest.fixture
def hotel():
    hotel = FakeHotel(
        rooms=[
            make_room("101"),
            make_room("201", available=False, price=180.0, room_type="Deluxe Room"),
            make_room("3", price=250.0, room_type="Executive Suite"),
        ],
        bookings=[make_booking("b1", "201")],
    )
    yield hotel
    asyncio.run(hotel.aclose())


@pytest.fixture
def offline_api():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = HotelApi(httpx.AsyncClient(transport=httpx.MockTransport(refuse), base_url=BASE_URL))
    yield api
    asyncio.run(api.aclose())
