"""Authentication dependencies.

Resolves the optional principal behind a ``Authorization: Bearer`` header.
Missing or invalid credentials yield ``None`` rather than 401: protected
routes delegate the rejection to the active-session guard.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import AuthenticationService, LoginService
from iam.application.value_objects import AuthenticatedPrincipal
from iam.infrastructure.access_token_repository import AccessTokenRepository
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.dependencies import get_session
from shared_kernel.middleware.tenant_context import current_tenant_id

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    """Get UserRepository bound to the request session and tenant."""
    return UserRepository(session=session, tenant_id=current_tenant_id())


def get_access_token_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AccessTokenRepository:
    """Get AccessTokenRepository bound to the request session."""
    return AccessTokenRepository(session=session)


def get_authentication_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    token_repository: Annotated[
        AccessTokenRepository, Depends(get_access_token_repository)
    ],
) -> AuthenticationService:
    """Get AuthenticationService instance."""
    return AuthenticationService(
        user_repository=user_repository,
        token_repository=token_repository,
        tenant_id=current_tenant_id(),
    )


def get_login_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    token_repository: Annotated[
        AccessTokenRepository, Depends(get_access_token_repository)
    ],
) -> LoginService:
    """Get LoginService instance."""
    return LoginService(
        session=session,
        user_repository=user_repository,
        token_repository=token_repository,
    )


async def get_authenticated_principal(
    service: Annotated[AuthenticationService, Depends(get_authentication_service)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> AuthenticatedPrincipal | None:
    """Resolve the principal of the current request, if any.

    Args:
        service: Authentication service
        credentials: Bearer credentials, or None when the header is absent

    Returns:
        The authenticated principal, or None
    """
    if credentials is None:
        return None
    return await service.authenticate(credentials.credentials)
