from typing import Dict, Literal

# email templates for reservation notifications

NotificationType = Literal["created", "confirmed", "cancelled"]


def subject_for_reservation(business_name: str, notification_type: NotificationType) -> str:
    if notification_type == "created":
        return f"New reservation – {business_name}"
    if notification_type == "confirmed":
        return f"Your reservation is confirmed – {business_name}"
    if notification_type == "cancelled":
        return f"Your reservation was cancelled – {business_name}"
    return f"Reservation update – {business_name}"


def reservation_email_html(recipient_name: str, details: Dict, notification_type: NotificationType) -> str:
    if notification_type == "created":
        message_block = f"""
            <p><strong>{details.get('client_name', 'A client')}</strong> booked
            <strong>{details.get('service_name', '')}</strong>.</p>
            <p>Confirm or cancel it from your reservations page.</p>
        """
    elif notification_type == "confirmed":
        message_block = "<p>Your reservation has been confirmed. See you soon!</p>"
    elif notification_type == "cancelled":
        message_block = "<p>Your reservation has been cancelled by the business.</p>"
    else:
        message_block = "<p>Please review your reservation details below.</p>"

    return f"""
    <html>
    <body style="font-family: Arial, sans-serif; color: #333;">
        <h2 style="text-align:center; color:#444;">{details.get('business_name', '')}</h2>
        <hr>

        <p>Hello <strong>{recipient_name}</strong>,</p>
        {message_block}

        <table style="border-collapse: collapse; width: 100%; margin: 20px 0;">
            <tr><td style="border:1px solid #ddd; padding:8px; font-weight:bold;">Service</td>
                <td style="border:1px solid #ddd; padding:8px;">{details.get('service_name','N/A')}</td></tr>
            <tr><td style="border:1px solid #ddd; padding:8px; font-weight:bold;">Date</td>
                <td style="border:1px solid #ddd; padding:8px;">{details.get('date','N/A')}</td></tr>
            <tr><td style="border:1px solid #ddd; padding:8px; font-weight:bold;">Time</td>
                <td style="border:1px solid #ddd; padding:8px;">{details.get('time','N/A')}</td></tr>
            <tr><td style="border:1px solid #ddd; padding:8px; font-weight:bold;">Status</td>
                <td style="border:1px solid #ddd; padding:8px;">{details.get('state','N/A')}</td></tr>
        </table>

        <hr>
        <p style="text-align:center; font-size:12px; color:#888;">
            This is an automated message, please do not reply.
        </p>
    </body>
    </html>
    """
