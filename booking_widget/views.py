"""
View state for the widget: what is on screen, independent of how it is
rendered. The client mutates a single WidgetState; render.py turns it
into HTML.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from booking_widget.events import CancelBooking, OpenBookingForm
from booking_widget.models import Booking, NewBooking, Room

ROOMS_LOAD_ERROR = "Could not load rooms. Please ensure the server is running."
ROOMS_EMPTY = "No rooms available."
BOOKINGS_LOAD_ERROR = "Could not load bookings."
BOOKINGS_EMPTY = "No active bookings."

CARD_CLASSES = [
    "room-card", "bg-white", "rounded-lg", "shadow-md", "overflow-hidden", "transform",
    "transition-all", "duration-300", "hover:shadow-xl", "hover:-translate-y-1",
]
AVAILABLE_CLASSES = ["cursor-pointer"]
DISABLED_CLASSES = ["opacity-60", "cursor-not-allowed"]


@dataclass
class RoomCard:
    room: Room
    classes: List[str]
    badge: str
    on_click: Optional[OpenBookingForm] = None

    @property
    def disabled(self) -> bool:
        return self.on_click is None

    @property
    def price_label(self) -> str:
        return self.room.price_label


@dataclass
class BookingRow:
    booking: Booking
    on_cancel: CancelBooking

    @property
    def stay(self) -> str:
        return f"{self.booking.check_in.isoformat()} to {self.booking.check_out.isoformat()}"


@dataclass
class ListSection:
    """
    A rendered list: either items, or a single message in their place
    (empty placeholder or load error).
    """
    items: list = field(default_factory=list)
    message: Optional[str] = None
    is_error: bool = False


def room_card(room: Room) -> RoomCard:
    if room.available:
        return RoomCard(
            room=room,
            classes=CARD_CLASSES + AVAILABLE_CLASSES,
            badge="Available",
            on_click=OpenBookingForm(room),
        )
    return RoomCard(room=room, classes=CARD_CLASSES + DISABLED_CLASSES, badge="Booked")


def rooms_section(rooms: Optional[List[Room]]) -> ListSection:
    if not rooms:
        return ListSection(message=ROOMS_EMPTY)
    return ListSection(items=[room_card(r) for r in rooms])


def bookings_section(bookings: Optional[List[Booking]]) -> ListSection:
    if not bookings:
        return ListSection(message=BOOKINGS_EMPTY)
    return ListSection(items=[BookingRow(b, CancelBooking(b.id)) for b in bookings])


def error_section(message: str) -> ListSection:
    return ListSection(message=message, is_error=True)


@dataclass
class FormSelection:
    room_id: str
    room_type: str
    price_label: str

    @property
    def summary(self) -> str:
        return f"Room {self.room_id} - {self.price_label} per night"


REQUIRED_FIELDS = ("room_id", "guest_name", "check_in", "check_out")


@dataclass
class BookingForm:
    is_open: bool = False
    selection: Optional[FormSelection] = None
    room_id: str = ""
    guest_name: str = ""
    check_in: str = ""
    check_out: str = ""

    def open(self, room: Room) -> None:
        self.selection = FormSelection(room.id, room.type, room.price_label)
        self.room_id = room.id
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.reset()

    def reset(self) -> None:
        self.selection = None
        self.room_id = ""
        self.guest_name = ""
        self.check_in = ""
        self.check_out = ""

    def fill(self, guest_name: Optional[str] = None, check_in: Optional[str] = None, check_out: Optional[str] = None) -> None:
        if guest_name is not None:
            self.guest_name = guest_name
        if check_in is not None:
            self.check_in = check_in
        if check_out is not None:
            self.check_out = check_out

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    def to_new_booking(self) -> NewBooking:
        """
        Build the POST body. Dates go through date.fromisoformat, which is
        what a native date input guarantees; a malformed value raises
        ValueError.
        """
        return NewBooking(
            room=self.room_id,
            guest_name=self.guest_name,
            check_in=date.fromisoformat(self.check_in),
            check_out=date.fromisoformat(self.check_out),
        )


HIDDEN_CLASS = "translate-x-[120%]"
NOTIFICATION_CLASSES = "fixed bottom-5 right-5 text-white py-2 px-4 rounded-lg shadow-xl transition-transform duration-500"


@dataclass
class NotificationBanner:
    message: str = ""
    is_error: bool = False
    visible: bool = False

    @property
    def classes(self) -> str:
        colour = "bg-red-600" if self.is_error else "bg-green-600"
        css = f"{NOTIFICATION_CLASSES} {colour}"
        if not self.visible:
            css += f" {HIDDEN_CLASS}"
        return css


@dataclass
class WidgetState:
    rooms: ListSection = field(default_factory=ListSection)
    bookings: ListSection = field(default_factory=ListSection)
    form: BookingForm = field(default_factory=BookingForm)
    notification: NotificationBanner = field(default_factory=NotificationBanner)
