"""
Walk the widget through a full flow against a running API: load, book the
first available room, cancel that booking. Snapshots of the rendered
sections are written to validation-output.json.
"""
import asyncio
import json
import logging
import sys

from booking_widget.api import HotelApi
from booking_widget.client import BookingClient
from booking_widget.config import settings
from booking_widget.render import render_bookings, render_rooms

OUTPUT_FILE = "validation-output.json"

logger = logging.getLogger("validate_flow")


def snapshot(step: str, client: BookingClient) -> dict:
    state = client.state
    return {
        "step": step,
        "rooms": render_rooms(state.rooms),
        "bookings": render_bookings(state.bookings),
        "notification": {"message": state.notification.message, "is_error": state.notification.is_error},
    }


async def run_flow(base_url: str) -> list:
    val = []
    async with HotelApi.from_settings(base_url=base_url) as api:
        client = BookingClient(api, confirm=lambda message: True)

        await client.init()
        val.append(snapshot("init", client))

        card = next((c for c in client.state.rooms.items if not c.disabled), None)
        if card is None:
            logger.warning("no available room to book")
            return val

        await client.dispatch(card.on_click)
        client.state.form.fill(guest_name="Bob", check_in="2025-12-05", check_out="2025-12-07")
        created = await client.submit_booking()
        val.append(snapshot("create", client))
        if not created:
            return val

        row = next((r for r in client.state.bookings.items if r.booking.room == card.room.id), None)
        if row is not None:
            await client.dispatch(row.on_cancel)
            val.append(snapshot("cancel", client))
    return val


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    base_url = sys.argv[1] if len(sys.argv) > 1 else settings.API_URL
    val = asyncio.run(run_flow(base_url))
    with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
        json.dump(val, f, indent=2)
    print(f"Validation complete. See {OUTPUT_FILE}")
