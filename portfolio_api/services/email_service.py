import html
import logging

import requests

from portfolio_api.config import (
    EMAIL_TIMEOUT,
    MAIL_FROM_EMAIL,
    MAIL_FROM_NAME,
    RESEND_API_KEY,
    RESEND_API_URL,
)

logger = logging.getLogger(__name__)


def send_email(to: str, subject: str, text: str, html_body: str) -> bool:
    """
    Send one email through the Resend API.

    A single attempt is made. Any failure (no API key, network error,
    non-2xx answer) is logged and reported as False; nothing is raised, so
    callers can carry on with the request that triggered the email.
    """
    if not RESEND_API_KEY:
        logger.error(f"Cannot send email to {to}: RESEND_API_KEY is not configured")
        return False

    payload = {
        "from": f"{MAIL_FROM_NAME} <{MAIL_FROM_EMAIL}>",
        "to": [to],
        "subject": subject,
        "text": text,
        "html": html_body,
    }

    headers = {
        "Authorization": f"Bearer {RESEND_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            RESEND_API_URL, json=payload, headers=headers, timeout=EMAIL_TIMEOUT
        )
    except requests.RequestException as e:
        logger.error(f"Error sending email to {to}: {e}")
        return False

    if not response.ok:
        logger.error(
            f"Email to {to} rejected by mail API: {response.status_code} {response.text}"
        )
        return False

    logger.info(f"Email sent to {to}: {subject}")
    return True


def send_contact_confirmation(name: str, email: str) -> bool:
    """Thank a visitor for their contact form submission."""
    text = (
        f"Hi {name},\n\n"
        "Thank you for reaching out. I have received your message and will get "
        "back to you soon.\n\n"
        f"Best regards,\n{MAIL_FROM_NAME}"
    )
    html_body = (
        f"<p>Hi {html.escape(name)},</p>"
        "<p>Thank you for reaching out. I have received your message and will get "
        "back to you soon.</p>"
        f"<p>Best regards,<br>{html.escape(MAIL_FROM_NAME)}</p>"
    )
    return send_email(email, "Thank you for contacting me", text, html_body)


def send_reply_notification(name: str, email: str, message: str) -> bool:
    """Forward an admin reply to the original sender."""
    text = (
        f"Hi {name},\n\n"
        "Thank you for your message. Here's my reply:\n\n"
        f"{message}\n\n"
        f"Best regards,\n{MAIL_FROM_NAME}"
    )
    reply_html = html.escape(message).replace("\n", "<br>")
    html_body = (
        f"<p>Hi {html.escape(name)},</p>"
        "<p>Thank you for your message. Here's my reply:</p>"
        f"<p>{reply_html}</p>"
        f"<p>Best regards,<br>{html.escape(MAIL_FROM_NAME)}</p>"
    )
    return send_email(email, "Reply to your message", text, html_body)
