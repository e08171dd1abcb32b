# edgeblog/services/notifications.py
import logging

from flask import current_app
from flask_mail import Message
from markupsafe import escape

from edgeblog.errors import InternalConfigError, UpstreamFailure, ValidationError
from edgeblog.extensions import mail

logger = logging.getLogger(__name__)


def _recipient():
    recipient = current_app.config.get("CONTACT_RECIPIENT")
    if not recipient:
        raise InternalConfigError("Server configuration error: contact recipient is missing.")
    return recipient


def _send(subject, html, reply_to=None):
    message = Message(subject=subject, recipients=[_recipient()], html=html, reply_to=reply_to)
    try:
        mail.send(message)
    except Exception as e:
        logger.error("Error sending email %r: %s", subject, e)
        raise UpstreamFailure("Server error. Failed to send message.") from e
    logger.info("Email sent: %s", subject)


def _details_html(name, email, message):
    return (
        "<h3>Contact Details</h3>"
        "<ul>"
        f"<li><strong>Name:</strong> {escape(name or '')}</li>"
        f"<li><strong>Email:</strong> {escape(email)}</li>"
        "</ul>"
        "<h3>Message</h3>"
        f"<p>{escape(message or '')}</p>"
    )


def send_subscription(email, name=None, message=None):
    email = str(email or "").strip()
    if not email:
        raise ValidationError("Please enter your email.")
    _send("New Subscription", _details_html(name, email, message), reply_to=email)


def send_contact_message(name, email, message, subject=None):
    values = {"name": name, "email": email, "message": message}
    missing = [key for key, value in values.items() if not str(value or "").strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}.")

    name, email, message = (str(values[key]).strip() for key in ("name", "email", "message"))
    subject = str(subject or "").strip() or "New Message from Contact Form"
    _send(subject, _details_html(name, email, message), reply_to=email)
