import logging

from sqlalchemy.exc import SQLAlchemyError

from appointments.errors import Forbidden, InternalError, InvalidInput, NotFound
from appointments.models import STATE_CANCELLED, STATE_CONFIRMED

logger = logging.getLogger(__name__)

# owner actions, English and Spanish form values
OWNER_ACTIONS = {
    "confirm": STATE_CONFIRMED,
    "cancel": STATE_CANCELLED,
    "confirmar": STATE_CONFIRMED,
    "cancelar": STATE_CANCELLED,
}

CLIENT_TARGET_STATES = (STATE_CANCELLED, "cancelada")


class ReservationLifecycle:
    def __init__(self, store, clock, notifier=None):
        self.store = store
        self.clock = clock
        self.notifier = notifier

    def _commit(self, what):
        try:
            self.store.commit()
        except SQLAlchemyError as e:
            self.store.rollback()
            logger.error(f"Failed to {what}: {e}", exc_info=True)
            raise InternalError(f"Could not {what}")

    def set_status(self, actor_id, reservation_id, action):
        """Owner confirms or cancels a reservation of one of their services.

        Allowed whatever the reservation date, so owners can clean up past
        pending reservations.
        """
        new_state = OWNER_ACTIONS.get((action or "").strip().lower())
        if new_state is None:
            raise InvalidInput("Invalid action, expected confirm or cancel")

        reservation = self.store.get_reservation(reservation_id)
        if reservation is None or not reservation.service.business.is_owned_by(actor_id):
            raise Forbidden("You are not the owner of this reservation's business")

        if reservation.state == new_state:
            return reservation
        if not reservation.can_transition_to(new_state):
            raise InvalidInput(f"Cannot change a {reservation.state} reservation to {new_state}")

        reservation.state = new_state
        self._commit("update the reservation")
        logger.info(f"Reservation {reservation.id} set to {new_state} by owner {actor_id}")

        if self.notifier is not None:
            self.notifier.status_changed(reservation)
        return reservation

    def cancel_own(self, actor_id, reservation_id, target_state=STATE_CANCELLED):
        if target_state not in CLIENT_TARGET_STATES:
            raise InvalidInput("Clients can only cancel their reservations")

        reservation = self.store.get_reservation(reservation_id)
        if reservation is None or reservation.client_id != actor_id:
            raise Forbidden("You are not allowed to cancel this reservation")

        if reservation.date_time <= self.clock.now():
            raise InvalidInput("Cannot cancel a past reservation")

        if reservation.state == STATE_CANCELLED:
            return reservation

        reservation.state = STATE_CANCELLED
        self._commit("cancel the reservation")
        logger.info(f"Reservation {reservation.id} cancelled by client {actor_id}")
        return reservation

    def list_for_client(self, client_id):
        """Client's reservations, after deleting past pending/cancelled ones.

        Confirmed reservations stay as history once their date has passed.
        """
        if self.store.get_user(client_id) is None:
            raise NotFound("User not found")

        deleted = self.store.delete_stale_for_client(client_id, self.clock.now())
        self._commit("clean up past reservations")
        if deleted:
            logger.info(f"Deleted {deleted} stale reservation(s) of user {client_id}")

        return self.store.reservations_for_client(client_id)

    def list_for_business(self, actor_id, business_id):
        business = self.store.get_business(business_id)
        if business is None:
            raise NotFound("Business not found")
        if not business.is_owned_by(actor_id):
            raise Forbidden("Only the business owner can see its reservations")
        return self.store.reservations_for_business(business.id)
