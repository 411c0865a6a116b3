"""Persistence operations used by the booking core.

A ``ReservationStore`` wraps one SQLAlchemy session; request handlers build
it from ``db.session`` and tests can hand in any session they like.
"""
from sqlalchemy import update
from sqlalchemy.orm import joinedload

from appointments.models import (
    Business,
    Reservation,
    Service,
    User,
    STATE_CANCELLED,
    STATE_PENDING,
)


class ReservationStore:

    def __init__(self, session):
        self.session = session

    # ---------------------------
    # lookups
    # ---------------------------
    def get_user(self, user_id):
        if user_id is None:
            return None
        return self.session.get(User, user_id)

    def get_business(self, business_id):
        if business_id is None:
            return None
        return self.session.get(Business, business_id)

    def get_service(self, service_id):
        if service_id is None:
            return None
        return self.session.get(
            Service,
            service_id,
            options=[joinedload(Service.business)]
        )

    def get_reservation(self, reservation_id):
        if reservation_id is None:
            return None
        return self.session.get(
            Reservation,
            reservation_id,
            options=[joinedload(Reservation.service).joinedload(Service.business)]
        )

    # ---------------------------
    # reservation queries
    # ---------------------------
    def active_reservations_overlapping(self, service_id, start, end, duration):
        """Non-cancelled reservations of a service whose interval meets ``[start, end)``."""
        return (
            self.session.query(Reservation)
            .filter(
                Reservation.service_id == service_id,
                Reservation.state != STATE_CANCELLED,
                Reservation.date_time > start - duration,
                Reservation.date_time < end,
            )
            .order_by(Reservation.date_time.asc())
            .all()
        )

    def find_overlapping(self, service_id, start, end, duration):
        """First non-cancelled reservation whose ``[date_time, date_time + duration)`` meets ``[start, end)``.

        All reservations of a service share its duration, so the overlap test
        reduces to ``start - duration < date_time < end``.
        """
        return (
            self.session.query(Reservation)
            .filter(
                Reservation.service_id == service_id,
                Reservation.state != STATE_CANCELLED,
                Reservation.date_time > start - duration,
                Reservation.date_time < end,
            )
            .order_by(Reservation.date_time.asc())
            .first()
        )

    def reservations_for_client(self, client_id):
        return (
            self.session.query(Reservation)
            .options(joinedload(Reservation.service).joinedload(Service.business))
            .filter(Reservation.client_id == client_id)
            .order_by(Reservation.date_time.asc())
            .all()
        )

    def reservations_for_business(self, business_id):
        return (
            self.session.query(Reservation)
            .join(Service)
            .options(
                joinedload(Reservation.service),
                joinedload(Reservation.client),
            )
            .filter(Service.business_id == business_id)
            .order_by(Reservation.date_time.asc())
            .all()
        )

    # ---------------------------
    # writes
    # ---------------------------
    def lock_service(self, service_id):
        """Take the per-service write lock for the current transaction.

        The row update is held until commit or rollback: a row lock on
        PostgreSQL, the database write lock on SQLite.
        """
        result = self.session.execute(
            update(Service)
            .where(Service.id == service_id)
            .values(booking_count=Service.booking_count + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_stale_for_client(self, client_id, now):
        """Delete past pending/cancelled reservations of a client."""
        return (
            self.session.query(Reservation)
            .filter(
                Reservation.client_id == client_id,
                Reservation.date_time < now,
                Reservation.state.in_([STATE_PENDING, STATE_CANCELLED]),
            )
            .delete(synchronize_session="fetch")
        )

    def add(self, obj):
        self.session.add(obj)

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
