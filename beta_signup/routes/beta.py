"""
Beta Routes - Public signup endpoint for the GoalHero beta
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..email_service import get_email_sender
from ..registration import CORS_HEADERS, RegistrationHandler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Beta"])


def get_registration_handler() -> RegistrationHandler:
    return RegistrationHandler(email_sender=get_email_sender())


# Every verb is routed here so the handler answers 405 in its own JSON shape
@router.api_route(
    "/beta-register",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
)
async def beta_register(
    request: Request,
    handler: RegistrationHandler = Depends(get_registration_handler),
):
    """Register an email for the beta and send the welcome email"""
    body = await request.body() if request.method == "POST" else b""
    logger.debug(f"Beta registration {request.method} request, {len(body)} byte body")

    # Resend SDK call is blocking
    status_code, result = await asyncio.to_thread(handler.handle, request.method, body)

    if result is None:
        return Response(status_code=status_code, headers=CORS_HEADERS)

    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(),
        headers=CORS_HEADERS,
    )
