from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from temple_booking.core.errors import InvalidBodyError
from temple_booking.core.logger import logger
from temple_booking.models.booking import BookingCreate
from temple_booking.services.booking_store import BookingStore
from temple_booking.services.validation import parse_iso_date, validate_booking

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"

def get_booking_store(request: Request) -> BookingStore:
    store = getattr(request.app.state, "booking_store", None)
    if store is None:
        raise RuntimeError("Booking store is not initialised")
    return store

async def read_json_body(request: Request) -> Any:
    """
    Decodes a JSON request body. Bodies sent without the application/json
    media type, and empty bodies, count as an empty payload. Only objects
    and arrays are accepted at the top level.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        return {}
    if not await request.body():
        return {}
    try:
        body = await request.json()
    except ValueError:
        raise InvalidBodyError("Request body must be valid JSON")
    if not isinstance(body, (dict, list)):
        raise InvalidBodyError("Request body must be a JSON object or array")
    return body

@router.post("/bookings")
async def create_booking(request: Request, store: BookingStore = Depends(get_booking_store)):
    payload = await read_json_body(request)

    message = validate_booking(payload)
    if message is not None:
        logger.info(f"Booking rejected: {message}")
        return JSONResponse(status_code=400, content={"success": False, "message": message})

    try:
        booking = await store.create(BookingCreate(
            name=payload["name"],
            email=payload["email"],
            date=parse_iso_date(payload["date"]),
            time=payload["time"],
            temple=payload["temple"],
        ))
    except Exception as e:
        logger.error(f"Error creating booking: {e}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error while creating booking"}
        )

    return JSONResponse(
        status_code=201,
        content={
            "success": True,
            "data": booking.model_dump(mode="json"),
            "message": "Booking created successfully"
        }
    )
