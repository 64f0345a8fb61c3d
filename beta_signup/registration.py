"""
Beta Registration
Validates a signup payload, picks the welcome email for the requested
language and hands it to the email sender exactly once.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from .config import DEFAULT_LANGUAGE, EMAIL_FROM_ADDRESS, SUPPORTED_LANGUAGES
from .email_service import EmailDeliveryError, EmailSender, send_welcome_email
from .schemas import RegistrationRequest, RegistrationResponse

logger = logging.getLogger(__name__)

# Signup form is embedded on public landing pages
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

LANGUAGE_ERROR = "Language must be " + " or ".join(f"'{code}'" for code in SUPPORTED_LANGUAGES)

_json_decoder = json.JSONDecoder()


class RegistrationError(Exception):
    """Client error in a registration request"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class RegistrationHandler:
    def __init__(
        self,
        email_sender: EmailSender,
        from_address: str = EMAIL_FROM_ADDRESS,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self.email_sender = email_sender
        self.from_address = from_address
        self.default_language = default_language

    def handle(self, method: str, body: bytes) -> tuple[int, Optional[RegistrationResponse]]:
        """
        Process one registration request.

        Returns the HTTP status code and the response body. Preflight
        requests get no body.
        """
        method = method.upper()

        if method == "OPTIONS":
            return 200, None

        if method != "POST":
            return 405, RegistrationResponse(success=False, message="Method not allowed")

        try:
            email, language = self.parse(body)
        except RegistrationError as e:
            logger.warning(f"Rejected beta registration: {e.message}")
            return e.status_code, RegistrationResponse(success=False, message=e.message)

        try:
            send_welcome_email(
                self.email_sender,
                to=email,
                language=language,
                from_address=self.from_address,
            )
        except EmailDeliveryError as e:
            logger.error(f"Error sending welcome email to {email}: {e}")
            return 500, RegistrationResponse(success=False, message="Failed to send welcome email")

        logger.info(f"Beta registration welcome email ({language}) sent to {email}")
        return 200, RegistrationResponse(success=True, message="Welcome email sent successfully!")

    def parse(self, body: bytes) -> tuple[str, str]:
        """
        Validate the JSON body and return (email, language).

        Only the first JSON value is read, anything after it is ignored.
        A null body is an empty request.
        """
        try:
            payload, _ = _json_decoder.raw_decode(body.decode("utf-8").lstrip())
            data = RegistrationRequest.model_validate(payload if payload is not None else {})
        except (ValueError, ValidationError) as e:
            raise RegistrationError(400, "Invalid request body") from e

        if not data.email:
            raise RegistrationError(400, "Email is required")

        language = data.language or self.default_language
        if language not in SUPPORTED_LANGUAGES:
            raise RegistrationError(400, LANGUAGE_ERROR)

        return data.email, language
