from appointments.extension import db
from appointments.models.user import User
from appointments.models.business import Business
from appointments.models.service import Service
from appointments.models.reservation import (
    Reservation,
    STATE_PENDING,
    STATE_CONFIRMED,
    STATE_CANCELLED,
)

__all__ = [
    "db",
    "User",
    "Business",
    "Service",
    "Reservation",
    "STATE_PENDING",
    "STATE_CONFIRMED",
    "STATE_CANCELLED",
]
