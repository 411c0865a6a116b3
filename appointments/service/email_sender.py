# sends the email using resend
import os
import logging
from typing import Dict, Optional
import resend

logger = logging.getLogger(__name__)

resend.api_key = os.getenv("RESEND_API_KEY")
DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", "no-reply@example.com")


def send_email(
    to: str,
    subject: str,
    html: str,
    sender: Optional[str] = None,
) -> Dict:
    payload = {
        "from": sender or DEFAULT_SENDER,
        "to": to,
        "subject": subject,
        "html": html,
    }
    logger.info(f"Sending email to {to} with subject '{subject}'")
    return resend.Emails.send(payload)
