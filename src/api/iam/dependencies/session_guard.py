"""Active-session guard dependencies for protected routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import ActiveSessionGuard
from iam.application.value_objects import AuthenticatedPrincipal
from iam.dependencies.authentication import (
    get_access_token_repository,
    get_authenticated_principal,
)
from iam.domain.aggregates import User
from iam.infrastructure.access_token_repository import AccessTokenRepository
from infrastructure.database.dependencies import get_session


def get_active_session_guard(
    session: Annotated[AsyncSession, Depends(get_session)],
    token_repository: Annotated[
        AccessTokenRepository, Depends(get_access_token_repository)
    ],
) -> ActiveSessionGuard:
    """Get ActiveSessionGuard bound to the request session."""
    return ActiveSessionGuard(session=session, token_repository=token_repository)


async def require_active_principal(
    guard: Annotated[ActiveSessionGuard, Depends(get_active_session_guard)],
    principal: Annotated[
        AuthenticatedPrincipal | None, Depends(get_authenticated_principal)
    ],
) -> AuthenticatedPrincipal:
    """Require an active principal, keeping the token it authenticated with.

    Raises:
        InactiveUserError: If the principal is missing or inactive
    """
    await guard.ensure_active(principal)
    assert principal is not None
    return principal


async def require_active_user(
    principal: Annotated[AuthenticatedPrincipal, Depends(require_active_principal)],
) -> User:
    """Require an active user.

    Raises:
        InactiveUserError: If the principal is missing or inactive
    """
    return principal.user
