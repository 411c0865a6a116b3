import logging

from appointments.tasks import celery
from appointments.service.email_sender import send_email

logger = logging.getLogger(__name__)


@celery.task(
    name="appointments.send_notification_email",
    autoretry_for=(Exception,),
    retry_backoff=True,
    max_retries=3,
)
def send_notification_email(to, subject, html):
    response = send_email(to=to, subject=subject, html=html)
    logger.info(f"Notification email sent to {to}. Response: {response}")
    return response
