import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from appointments.errors import Conflict, InternalError, InvalidInput, NotFound
from appointments.models import Reservation, STATE_CONFIRMED, STATE_PENDING
from appointments.service.slots import is_weekend

logger = logging.getLogger(__name__)

INITIAL_STATES = (STATE_PENDING, STATE_CONFIRMED)


class BookingService:
    """Create-if-free for reservations.

    The overlap check and the insert run in one transaction that starts by
    locking the service row, so two overlapping bookings on the same service
    can never both commit.
    """

    def __init__(self, store, clock, notifier=None):
        self.store = store
        self.clock = clock
        self.notifier = notifier

    def create_reservation(self, client_id, service_id, requested, state=None):
        client = self.store.get_user(client_id)
        if client is None:
            raise NotFound("User not found")

        if not service_id or requested is None:
            raise InvalidInput("service_id and date_time are required")
        if not isinstance(requested, datetime):
            raise InvalidInput("date_time must be a date and time")
        requested = self.clock.to_local(requested)

        initial_state = state or STATE_PENDING
        if initial_state not in INITIAL_STATES:
            raise InvalidInput(f"Invalid initial state: {initial_state}")

        if is_weekend(requested):
            raise InvalidInput("Reservations are not available on weekends")

        if requested <= self.clock.now():
            raise InvalidInput("Cannot create a reservation in the past")

        service = self.store.get_service(service_id)
        if service is None:
            raise NotFound("Service not found")

        duration = service.duration
        conflict = None
        reservation = None
        try:
            if not self.store.lock_service(service.id):
                # deleted since it was loaded
                self.store.rollback()
                raise NotFound("Service not found")
            conflict = self.store.find_overlapping(
                service.id, requested, requested + duration, duration
            )
            if conflict is None:
                reservation = Reservation(
                    service_id=service.id,
                    client_id=client.id,
                    date_time=requested,
                    state=initial_state,
                )
                self.store.add(reservation)
                self.store.commit()
            else:
                self.store.rollback()
        except SQLAlchemyError as e:
            self.store.rollback()
            logger.error(f"Failed to create reservation for service {service_id}: {e}", exc_info=True)
            raise InternalError("Could not create the reservation")

        if conflict is not None:
            logger.info(
                f"Rejected booking of service {service_id} at {requested.isoformat()}: "
                f"overlaps reservation {conflict.id}"
            )
            raise Conflict("That time is already booked")

        logger.info(
            f"Reservation {reservation.id} created for service {service.id} "
            f"at {requested.isoformat()} by user {client.id}"
        )
        if self.notifier is not None:
            self.notifier.reservation_created(reservation)
        return reservation
