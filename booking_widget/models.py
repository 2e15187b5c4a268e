from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    price: float = Field(..., ge=0)
    available: bool
    image_url: str = Field("", alias="imageUrl")

    @property
    def price_label(self) -> str:
        return f"${self.price:.2f}"


class NewBooking(BaseModel):
    """Body of POST /bookings."""
    model_config = ConfigDict(populate_by_name=True)

    room: str
    guest_name: str = Field(..., alias="guestName")
    check_in: date = Field(..., alias="checkIn")
    check_out: date = Field(..., alias="checkOut")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Booking(BaseModel):
    """
    A booking as listed by GET /bookings. The id is server assigned and may
    arrive as either "id" or "_id".
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    room: str
    guest_name: str = Field(..., alias="guestName")
    check_in: date = Field(..., alias="checkIn")
    check_out: date = Field(..., alias="checkOut")
