"""Bearer token authentication service."""

from __future__ import annotations

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.security import (
    PlaintextToken,
    hash_token_secret,
    verify_token_secret,
)
from iam.application.value_objects import AuthenticatedPrincipal
from iam.domain.aggregates import AccessToken
from iam.domain.value_objects import AccessTokenId
from iam.ports.exceptions import MalformedAccessTokenError
from iam.ports.repositories import IAccessTokenRepository, IUserRepository


class AuthenticationService:
    """Resolves the principal behind a personal access token.

    Authentication never raises for bad credentials: it returns None and
    leaves the decision to the caller (the active-session guard answers
    missing principals itself).
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        token_repository: IAccessTokenRepository,
        tenant_id: str | None = None,
        probe: AuthenticationProbe | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            user_repository: Repository for token owners
            token_repository: Repository for personal access tokens
            tenant_id: Tenant serving the request; tokens of users from any
                other tenant are rejected. None accepts only central accounts
            probe: Optional domain probe for observability
        """
        self._users = user_repository
        self._tokens = token_repository
        self._tenant_id = tenant_id
        self._probe = probe or DefaultAuthenticationProbe()

    async def authenticate(
        self, bearer_token: str | None
    ) -> AuthenticatedPrincipal | None:
        """Authenticate a bearer token.

        Args:
            bearer_token: Token from the Authorization header, without the
                ``Bearer`` scheme

        Returns:
            The authenticated principal, or None when the token is missing,
            malformed, unknown, expired, orphaned or owned by another tenant
        """
        if not bearer_token:
            return None

        try:
            plaintext = PlaintextToken.parse(bearer_token)
        except MalformedAccessTokenError:
            self._probe.authentication_failed(reason="malformed")
            return None

        token = await self._find_token(plaintext)
        if token is None or token.id is None:
            self._probe.authentication_failed(reason="unknown_token")
            return None

        if token.is_expired():
            self._probe.authentication_failed(reason="expired")
            return None

        user = await self._users.get_by_id(token.user_id)
        if user is None:
            self._probe.authentication_failed(reason="owner_not_found")
            return None

        if user.tenant_id != self._tenant_id:
            self._probe.authentication_failed(reason="tenant_mismatch")
            return None

        self._probe.user_authenticated(
            user_id=user.id.value, token_id=str(token.id)
        )
        return AuthenticatedPrincipal(user=user, access_token=token)

    async def _find_token(self, plaintext: PlaintextToken) -> AccessToken | None:
        if plaintext.token_id is None:
            return await self._tokens.get_by_hash(hash_token_secret(plaintext.secret))

        token = await self._tokens.get_by_id(AccessTokenId(value=plaintext.token_id))
        if token is None or not verify_token_secret(plaintext.secret, token.token_hash):
            return None
        return token
