"""HTTP routes for IAM bounded context.

Provides login, logout, password reset links and the current user's profile.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import LoginService, PasswordResetService
from iam.application.value_objects import AuthenticatedPrincipal
from iam.dependencies import (
    get_access_token_repository,
    get_login_service,
    get_password_reset_service,
    require_active_principal,
    require_active_user,
)
from iam.domain.aggregates import User
from iam.infrastructure.access_token_repository import AccessTokenRepository
from iam.ports.exceptions import InvalidCredentialsError
from iam.presentation.models import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    LoginResponse,
    UserProfileResponse,
)
from infrastructure.database.dependencies import get_session

router = APIRouter(prefix="/api/v1", tags=["iam"])

RESET_LINK_MESSAGE = "Um link de redefinição será enviado se a conta existir."
RESET_LINK_ERROR_MESSAGE = "Erro ao enviar o link de redefinição de senha."


@router.post("/login", status_code=status.HTTP_201_CREATED)
async def login(
    request: LoginRequest,
    service: Annotated[LoginService, Depends(get_login_service)],
) -> LoginResponse:
    """Exchange email and password for a personal access token.

    Args:
        request: Credentials and device name
        service: Login service

    Returns:
        LoginResponse with the plaintext token

    Raises:
        HTTPException: 401 if the credentials do not match
        InactiveUserError: If the account is inactive (rendered as 405)
    """
    try:
        issued = await service.login(
            email=request.email,
            password=request.password,
            device_name=request.device_name,
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return LoginResponse.from_issued(issued)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    principal: Annotated[AuthenticatedPrincipal, Depends(require_active_principal)],
    session: Annotated[AsyncSession, Depends(get_session)],
    token_repository: Annotated[
        AccessTokenRepository, Depends(get_access_token_repository)
    ],
) -> Response:
    """Revoke the token used for this request."""
    token = principal.access_token
    if token is not None and token.id is not None:
        await token_repository.delete(token.id)
        await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user")
async def get_current_user_profile(
    user: Annotated[User, Depends(require_active_user)],
) -> UserProfileResponse:
    """Return the authenticated, active user's profile."""
    return UserProfileResponse.from_domain(user)


@router.post("/forgot-password", response_model=ForgotPasswordResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    service: Annotated[PasswordResetService, Depends(get_password_reset_service)],
):
    """Send a password reset link to the account using this email.

    Unknown emails get the same answer as known ones.

    Returns:
        ForgotPasswordResponse, or a 500 JSON body if delivery failed
    """
    try:
        await service.send_reset_link(request.email)
    except Exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": 500, "message": RESET_LINK_ERROR_MESSAGE},
        )

    return ForgotPasswordResponse(status=200, message=RESET_LINK_MESSAGE)
