"""Password reset dependencies.

The notifier is installed on ``app.state.password_reset_notifier`` by the
application factory; IAM only knows its port.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import PasswordResetService
from iam.dependencies.authentication import get_user_repository
from iam.infrastructure.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from iam.infrastructure.user_repository import UserRepository
from iam.ports.notifications import PasswordResetNotifier
from infrastructure.database.dependencies import get_session
from shared_kernel.middleware.tenant_context import current_tenant_id


def get_password_reset_notifier(request: Request) -> PasswordResetNotifier:
    """Get the notifier configured for the application.

    Raises:
        RuntimeError: If the application did not install one
    """
    notifier = getattr(request.app.state, "password_reset_notifier", None)
    if notifier is None:
        raise RuntimeError("No password reset notifier is configured")
    return notifier


def get_password_reset_token_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PasswordResetTokenRepository:
    """Get PasswordResetTokenRepository bound to the request session and tenant."""
    return PasswordResetTokenRepository(session=session, tenant_id=current_tenant_id())


def get_password_reset_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    token_repository: Annotated[
        PasswordResetTokenRepository, Depends(get_password_reset_token_repository)
    ],
    notifier: Annotated[PasswordResetNotifier, Depends(get_password_reset_notifier)],
) -> PasswordResetService:
    """Get PasswordResetService instance."""
    return PasswordResetService(
        session=session,
        user_repository=user_repository,
        token_repository=token_repository,
        notifier=notifier,
    )
