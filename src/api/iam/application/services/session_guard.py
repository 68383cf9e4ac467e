"""Active-session guard.

Lets a request through only when its principal is an active user. Inactive
users lose their credentials on the way out.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultSessionGuardProbe,
    SessionGuardProbe,
)
from iam.application.value_objects import AuthenticatedPrincipal
from iam.domain.aggregates import User
from iam.ports.exceptions import InactiveUserError
from iam.ports.repositories import IAccessTokenRepository


class ActiveSessionGuard:
    """Rejects missing or inactive principals.

    For an inactive principal the guard revokes the token used for the
    current request, or every token of the user when the request was not
    made with a token. Revocation is best effort: its failure is logged and
    the request is rejected all the same.
    """

    def __init__(
        self,
        session: AsyncSession,
        token_repository: IAccessTokenRepository,
        probe: SessionGuardProbe | None = None,
    ) -> None:
        """Initialize the guard.

        Args:
            session: Request session, committed after revocation
            token_repository: Repository bound to the same session
            probe: Optional domain probe for observability
        """
        self._session = session
        self._tokens = token_repository
        self._probe = probe or DefaultSessionGuardProbe()

    async def ensure_active(self, principal: AuthenticatedPrincipal | None) -> User:
        """Return the principal's user if it is active.

        Args:
            principal: The authenticated principal, or None

        Returns:
            The active user

        Raises:
            InactiveUserError: If the principal is missing or inactive
        """
        if principal is None:
            self._probe.unauthenticated_request_rejected()
            raise InactiveUserError()

        user = principal.user
        if user.is_active:
            return user

        self._probe.inactive_user_rejected(user_id=user.id.value)
        await self._revoke_credentials(principal)
        raise InactiveUserError(user_id=user.id.value)

    async def _revoke_credentials(self, principal: AuthenticatedPrincipal) -> None:
        user_id = principal.user.id
        token = principal.access_token

        try:
            if token is not None and token.id is not None:
                await self._tokens.delete(token.id)
                await self._session.commit()
                self._probe.access_token_revoked(
                    user_id=user_id.value, token_id=str(token.id)
                )
            else:
                count = await self._tokens.delete_all_for_user(user_id)
                await self._session.commit()
                self._probe.all_access_tokens_revoked(
                    user_id=user_id.value, count=count
                )
        except Exception as e:
            # The rejection stands whether or not revocation worked
            self._probe.token_revocation_failed(user_id=user_id.value, error=e)
