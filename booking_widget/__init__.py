from booking_widget.client import BookingClient
from booking_widget.api import HotelApi, ApiResult, Failure, FailureKind
from booking_widget.models import Room, Booking, NewBooking

__all__ = [
    "BookingClient",
    "HotelApi",
    "ApiResult",
    "Failure",
    "FailureKind",
    "Room",
    "Booking",
    "NewBooking",
]
