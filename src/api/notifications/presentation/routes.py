"""HTTP routes for the Notifications context."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notifications.application.services import WelcomeEmailService
from notifications.dependencies import get_welcome_email_service
from notifications.presentation.models import (
    SendWelcomeEmailRequest,
    SendWelcomeEmailResponse,
)

router = APIRouter(prefix="/api/v1/emails", tags=["notifications"])


@router.post("/welcome", response_model=SendWelcomeEmailResponse)
def send_welcome_email(
    request: SendWelcomeEmailRequest,
    service: Annotated[WelcomeEmailService, Depends(get_welcome_email_service)],
) -> SendWelcomeEmailResponse | JSONResponse:
    """Send a welcome email to a prospective student.

    Declared sync so the blocking provider call runs in the threadpool.

    Returns:
        The provider results, or a 500 body with ``success: false`` when
        delivery raised
    """
    try:
        results = service.send_welcome(
            email=request.email,
            name=request.name,
            course_title=request.course_title,
            course_id=request.course_id,
        )
    except Exception as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "Failed to send welcome email",
                "error": str(e),
            },
        )

    return SendWelcomeEmailResponse(
        success=True,
        message="Welcome email sent",
        data=[result.as_dict() if result is not None else None for result in results],
    )
