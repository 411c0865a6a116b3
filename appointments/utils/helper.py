from datetime import date, datetime
from flask import current_app, request
from appointments.extension import db
from appointments.errors import InvalidInput
from appointments.service.store import ReservationStore
from appointments.service.availability import AvailabilityService
from appointments.service.booking import BookingService
from appointments.service.lifecycle import ReservationLifecycle


def parse_json(required_fields=None):
    data = request.get_json(silent=True) or {}

    if required_fields:
        missing = [f for f in required_fields if f not in data or data[f] in (None, "")]
        if missing:
            raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

    return data


def parse_date(value, field="date"):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise InvalidInput(f"Invalid {field}, expected YYYY-MM-DD")


def parse_datetime(value, field="date_time"):
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidInput(f"Invalid {field}, expected an ISO 8601 date and time")


def get_clock():
    return current_app.extensions["clock"]


def get_notifier():
    return current_app.extensions["notifier"]


def get_store():
    return ReservationStore(db.session)


def availability_service():
    return AvailabilityService(get_store(), get_clock())


def booking_service():
    return BookingService(get_store(), get_clock(), get_notifier())


def reservation_lifecycle():
    return ReservationLifecycle(get_store(), get_clock(), get_notifier())
