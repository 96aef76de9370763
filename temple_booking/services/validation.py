"""
Booking payload validation.

Each rule is a pure function taking the raw payload mapping and returning
either ``None`` (pass) or the message the client should see. Rules run in
the order of ``BOOKING_RULES`` and stop at the first failure.
"""
import re
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Tuple

REQUIRED_FIELDS = ("name", "email", "date", "time", "temple")
TEXT_FIELDS = ("name", "email", "temple")

MSG_REQUIRED = "All fields are required"
MSG_NOT_TEXT = "Name, email, and temple must be strings"
MSG_BAD_DATE = "Date must be a valid ISO date string"
MSG_BAD_TIME = "Time must be in HH:MM 24-hour format"

TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
REDUCED_DATE_PATTERN = re.compile(r"([0-9]{4})(?:-([0-9]{2}))?")

Rule = Callable[[Mapping[str, Any]], Optional[str]]


def is_blank(value: Any) -> bool:
    """True for values a client cannot use to fill a required field."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # NaN is the only value not equal to itself
        return value == 0 or value != value
    return False


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Return the calendar date written in an ISO-8601 string, or None.
    Reduced precision forms (``YYYY``, ``YYYY-MM``) fall on the first
    day of the year or month.
    """
    if not isinstance(value, str):
        return None
    reduced = REDUCED_DATE_PATTERN.fullmatch(value)
    try:
        if reduced:
            return date(int(reduced.group(1)), int(reduced.group(2) or 1), 1)
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def check_required(payload: Mapping[str, Any]) -> Optional[str]:
    if any(is_blank(payload.get(field)) for field in REQUIRED_FIELDS):
        return MSG_REQUIRED
    return None


def check_text_fields(payload: Mapping[str, Any]) -> Optional[str]:
    if not all(isinstance(payload.get(field), str) for field in TEXT_FIELDS):
        return MSG_NOT_TEXT
    return None


def check_date(payload: Mapping[str, Any]) -> Optional[str]:
    if parse_iso_date(payload.get("date")) is None:
        return MSG_BAD_DATE
    return None


def check_time(payload: Mapping[str, Any]) -> Optional[str]:
    value = payload.get("time")
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        return MSG_BAD_TIME
    return None


BOOKING_RULES: Tuple[Rule, ...] = (
    check_required,
    check_text_fields,
    check_date,
    check_time,
)


def validate_booking(payload: Any, rules: Tuple[Rule, ...] = BOOKING_RULES) -> Optional[str]:
    """Run ``rules`` against ``payload``; return the first violation message."""
    if not isinstance(payload, Mapping):
        payload = {}
    for rule in rules:
        message = rule(payload)
        if message is not None:
            return message
    return None
