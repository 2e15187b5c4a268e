"""
BookingClient: fetches rooms and bookings, keeps the widget state in sync
with the server and turns UI events into API calls.
"""
import asyncio
import logging
from typing import Callable, Optional

from booking_widget.api import FailureKind, HotelApi
from booking_widget.events import (
    CancelBooking,
    ClickOutsideForm,
    CloseBookingForm,
    OpenBookingForm,
    SubmitBookingForm,
)
from booking_widget.models import Room
from booking_widget.notifications import Notifier
from booking_widget.views import (
    BOOKINGS_LOAD_ERROR,
    ROOMS_LOAD_ERROR,
    WidgetState,
    bookings_section,
    error_section,
    rooms_section,
)

logger = logging.getLogger(__name__)

CANCEL_PROMPT = "Are you sure you want to cancel this booking?"

BOOKING_CREATED = "Booking created successfully!"
BOOKING_REJECTED = "Failed to create booking. The room may have just been taken."
BOOKING_ERROR = "An error occurred. Please try again."
BOOKING_CANCELLED = "Booking cancelled."
CANCEL_REJECTED = "Failed to cancel booking."
CANCEL_ERROR = "An error occurred."

Confirm = Callable[[str], bool]


class BookingClient:
    def __init__(
        self,
        api: HotelApi,
        confirm: Confirm,
        state: Optional[WidgetState] = None,
        notification_seconds: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.api = api
        self.confirm = confirm
        self.state = state or WidgetState()
        self.notifier = Notifier(self.state.notification, duration=notification_seconds, loop=loop)

    async def init(self) -> None:
        """Load both lists; the two requests are independent."""
        await asyncio.gather(self.refresh_rooms(), self.refresh_bookings())

    refresh = init

    async def refresh_rooms(self) -> None:
        result = await self.api.list_rooms()
        if not result.ok:
            logger.error("Failed to fetch rooms: %s", result.failure)
            self.state.rooms = error_section(ROOMS_LOAD_ERROR)
            return
        self.state.rooms = rooms_section(result.value)
        logger.debug("rendered %d rooms", len(self.state.rooms.items))

    async def refresh_bookings(self) -> None:
        result = await self.api.list_bookings()
        if not result.ok:
            logger.error("Failed to fetch bookings: %s", result.failure)
            self.state.bookings = error_section(BOOKINGS_LOAD_ERROR)
            return
        self.state.bookings = bookings_section(result.value)
        logger.debug("rendered %d bookings", len(self.state.bookings.items))

    def notify(self, message: str, is_error: bool = False) -> None:
        self.notifier.notify(message, is_error)

    def open_form(self, room: Room) -> None:
        if not room.available:
            return
        self.state.form.open(room)

    def close_form(self) -> None:
        self.state.form.close()

    async def submit_booking(self) -> bool:
        """
        Post the form. Returns True when the server accepted the booking.
        On failure the form stays open with its values.
        """
        form = self.state.form
        if not form.is_open:
            return False
        missing = form.missing_fields()
        if missing:
            logger.debug("submit blocked, missing required fields: %s", missing)
            return False
        try:
            new_booking = form.to_new_booking()
        except ValueError as exc:
            logger.error("Invalid booking form values: %s", exc)
            self.notify(BOOKING_ERROR, True)
            return False

        result = await self.api.create_booking(new_booking)
        if result.ok:
            logger.info("booking created for room %s", new_booking.room)
            self.notify(BOOKING_CREATED)
            self.close_form()
            await self.refresh()
            return True

        logger.error("Failed to create booking: %s", result.failure)
        if result.failure.kind == FailureKind.REJECTED:
            self.notify(BOOKING_REJECTED, True)
        else:
            self.notify(BOOKING_ERROR, True)
        return False

    async def cancel_booking(self, booking_id: str) -> bool:
        if not booking_id:
            logger.error("Refusing to cancel a booking without an id")
            return False
        if not self.confirm(CANCEL_PROMPT):
            return False

        result = await self.api.cancel_booking(booking_id)
        if result.ok:
            logger.info("booking %s cancelled", booking_id)
            self.notify(BOOKING_CANCELLED)
            await self.refresh()
            return True

        logger.error("Failed to cancel booking %s: %s", booking_id, result.failure)
        if result.failure.kind == FailureKind.REJECTED:
            self.notify(CANCEL_REJECTED, True)
        else:
            self.notify(CANCEL_ERROR, True)
        return False

    async def dispatch(self, event) -> None:
        if isinstance(event, OpenBookingForm):
            self.open_form(event.room)
        elif isinstance(event, (CloseBookingForm, ClickOutsideForm)):
            self.close_form()
        elif isinstance(event, SubmitBookingForm):
            await self.submit_booking()
        elif isinstance(event, CancelBooking):
            await self.cancel_booking(event.booking_id)
        else:
            raise ValueError(f"Unhandled event {type(event).__name__}")
