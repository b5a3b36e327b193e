import logging
from flask import current_app
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

logger = logging.getLogger(__name__)


def send_email(subject, body, recipient=None):
    """
    Sendet eine E-Mail ueber SendGrid.

    :param subject: Betreff
    :param body: Plain-Text Nachricht
    :param recipient: Empfaenger, Standard ist EMAIL_SENDER
    :return: True wenn versendet, sonst False
    """
    api_key = current_app.config.get("SENDGRID_API_KEY")
    sender = current_app.config.get("EMAIL_SENDER")

    if not api_key or not sender:
        logger.warning("SENDGRID_API_KEY oder EMAIL_SENDER ist nicht gesetzt, keine E-Mail versendet")
        return False

    if not recipient:
        recipient = sender

    message = Mail(
        from_email=sender,
        to_emails=recipient,
        subject=subject,
        plain_text_content=body
    )

    try:
        sg = SendGridAPIClient(api_key)
        response = sg.send(message)
        logger.info(f"E-Mail erfolgreich an {recipient} gesendet! Status: {response.status_code}")
        return True
    except Exception as e:
        logger.error(f"E-Mail Fehler an {recipient}: {e}")
        return False


def send_order_confirmation(recipient, order_id, total):
    return send_email(
        subject="Your order",
        body=f"Thank you for your order!\n\nOrder number: {order_id}\nTotal: {total:.2f}\n",
        recipient=recipient,
    )
