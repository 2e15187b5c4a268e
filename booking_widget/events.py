"""
UI events. The view attaches these to interactive elements and the client
dispatches them to the matching handler.
"""
from dataclasses import dataclass

from booking_widget.models import Room


@dataclass(frozen=True)
class OpenBookingForm:
    room: Room


@dataclass(frozen=True)
class CloseBookingForm:
    pass


@dataclass(frozen=True)
class ClickOutsideForm:
    pass


@dataclass(frozen=True)
class SubmitBookingForm:
    pass


@dataclass(frozen=True)
class CancelBooking:
    booking_id: str
