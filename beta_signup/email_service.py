"""
Email Service using Resend
Welcome emails are compiled from MJML and delivered through the
EmailSender interface so the registration flow can run without the provider
"""

import logging
from io import BytesIO
from typing import Optional, Protocol

import resend
from mjml import mjml_to_html
from resend.exceptions import ResendError

from .config import EMAIL_FROM_ADDRESS, RESEND_API_KEY
from .email_templates import welcome_email_subject, welcome_email_template

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """The provider did not accept the message"""


class EmailSender(Protocol):
    def send(self, from_address: str, to: str, subject: str, html_content: str) -> str:
        """Deliver one HTML email and return the provider message id"""
        ...


class ResendEmailSender:
    """Send email via the Resend transactional API"""

    def __init__(self, api_key: Optional[str]):
        self.api_key = api_key

    def send(self, from_address: str, to: str, subject: str, html_content: str) -> str:
        if not self.api_key:
            logger.error("❌ No email service configured - RESEND_API_KEY missing")
            raise EmailDeliveryError("Email service not configured")

        # The SDK reads its key from module state
        resend.api_key = self.api_key

        params: resend.Emails.SendParams = {
            "from": from_address,
            "to": [to],
            "subject": subject,
            "html": html_content,
        }

        try:
            logger.info(f"📧 Sending email via Resend to: {to}")
            response = resend.Emails.send(params)
        except ResendError as e:
            logger.error(f"❌ Resend rejected email to {to}: status {e.code} - {e.message}")
            raise EmailDeliveryError(f"Resend error: status code {e.code}") from e
        except Exception as e:
            logger.error(f"❌ Email send error to {to}: {e}")
            raise EmailDeliveryError(f"Failed to send email: {str(e)}") from e

        email_id = response.get("id") if response else None
        if not email_id:
            logger.error(f"❌ Resend returned no message id for {to}: {response}")
            raise EmailDeliveryError("Resend returned no message id")

        logger.info(f"✅ Email sent successfully via Resend: {email_id}")
        return email_id


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(BytesIO(mjml_content.encode("utf-8")))
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise EmailDeliveryError(f"Failed to compile MJML template: {str(e)}") from e

    if result.get("errors"):
        logger.warning(f"MJML compilation warnings: {result['errors']}")
    return result.get("html", "")


def get_email_sender() -> EmailSender:
    return ResendEmailSender(api_key=RESEND_API_KEY)


def send_welcome_email(
    sender: EmailSender,
    to: str,
    language: str,
    from_address: str = EMAIL_FROM_ADDRESS,
) -> str:
    """Render the welcome email for a beta signup and send it once"""
    html_content = compile_mjml_to_html(welcome_email_template(language))
    return sender.send(
        from_address=from_address,
        to=to,
        subject=welcome_email_subject(language),
        html_content=html_content,
    )
