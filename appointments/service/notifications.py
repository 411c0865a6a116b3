import logging

from appointments.models import STATE_CANCELLED, STATE_CONFIRMED
from appointments.tasks.notifications import send_notification_email
from appointments.utils.email_templates import subject_for_reservation, reservation_email_html

logger = logging.getLogger(__name__)


def enqueue_email(to, subject, html):
    send_notification_email.delay(to, subject, html)


def _build_reservation_details(reservation):
    service = reservation.service
    business = service.business if service else None
    return {
        "business_name": business.name if business else "N/A",
        "service_name": service.name if service else "N/A",
        "client_name": reservation.client.name if reservation.client else "N/A",
        "date": reservation.date_time.strftime("%Y-%m-%d"),
        "time": reservation.date_time.strftime("%H:%M"),
        "state": reservation.state,
    }


class ReservationNotifier:
    """Best-effort e-mails about reservations.

    Messages are handed to ``dispatch`` (a Celery task by default) after the
    reservation is committed; any failure is logged and swallowed.
    """

    def __init__(self, dispatch=None):
        self.dispatch = dispatch or enqueue_email

    def _send(self, reservation, to, subject, html):
        if not to:
            logger.warning(f"Reservation {reservation.id}: no recipient address, notification skipped")
            return False
        try:
            self.dispatch(to, subject, html)
            logger.info(f"Reservation {reservation.id}: notification queued for {to}")
            return True
        except Exception as e:
            logger.error(f"Reservation {reservation.id}: failed to queue notification -> {e}")
            return False

    def reservation_created(self, reservation):
        try:
            details = _build_reservation_details(reservation)
            owner = reservation.service.business.owner
        except Exception as e:
            logger.error(f"Reservation {reservation.id}: could not build owner notification -> {e}")
            return False
        subject = subject_for_reservation(details["business_name"], "created")
        html = reservation_email_html(owner.name, details, "created")
        return self._send(reservation, owner.email, subject, html)

    def status_changed(self, reservation):
        if reservation.state not in (STATE_CONFIRMED, STATE_CANCELLED):
            return False
        try:
            details = _build_reservation_details(reservation)
            client = reservation.client
        except Exception as e:
            logger.error(f"Reservation {reservation.id}: could not build client notification -> {e}")
            return False
        subject = subject_for_reservation(details["business_name"], reservation.state)
        html = reservation_email_html(client.name, details, reservation.state)
        return self._send(reservation, client.email, subject, html)
