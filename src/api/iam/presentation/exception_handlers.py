"""Exception handlers for IAM errors whose body is not FastAPI's ``detail`` shape."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from iam.ports.exceptions import InactiveUserError

INACTIVE_USER_MESSAGE = "Usuário inativo"

# Existing clients match on 405 for this rejection
INACTIVE_USER_STATUS = status.HTTP_405_METHOD_NOT_ALLOWED


async def inactive_user_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render InactiveUserError as ``405 {"error": "Usuário inativo"}``."""
    return JSONResponse(
        status_code=INACTIVE_USER_STATUS,
        content={"error": INACTIVE_USER_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register IAM exception handlers on an application."""
    app.add_exception_handler(InactiveUserError, inactive_user_handler)
