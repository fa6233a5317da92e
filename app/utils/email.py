"""
Email utilities for sending messages
"""
import logging
import requests
from app.core.config import settings

logger = logging.getLogger(__name__)


def send_email(to: str, subject: str, text: str, html: str) -> bool:
    """
    Send email via configured provider

    Returns True only when the provider accepted the message.
    Never raises: misconfiguration and delivery errors report False.
    """
    if settings.EMAIL_PROVIDER == "sendgrid":
        return send_sendgrid_email(to, subject, text, html)

    # Add other providers here
    logger.error(f"[EMAIL] Unknown email provider: {settings.EMAIL_PROVIDER}")
    return False


def send_sendgrid_email(to: str, subject: str, text: str, html: str) -> bool:
    """
    Send email via SendGrid v3 API
    """
    if not settings.email_configured:
        logger.info("[EMAIL] SendGrid not configured, message not sent")
        return False

    payload = {
        "personalizations": [{"to": [{"email": to}]}],
        "from": {"email": settings.EMAIL_FROM, "name": settings.EMAIL_FROM_NAME},
        "subject": subject,
        "content": [
            {"type": "text/plain", "value": text},
            {"type": "text/html", "value": html},
        ],
    }

    try:
        response = requests.post(
            settings.SENDGRID_API_URL,
            headers={
                "Authorization": f"Bearer {settings.SENDGRID_API_KEY}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=settings.EMAIL_TIMEOUT,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"[EMAIL] SendGrid error: {e}")
        return False

    logger.info("[EMAIL] Message accepted by SendGrid")
    return True
