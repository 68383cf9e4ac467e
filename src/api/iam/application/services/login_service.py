"""Login service issuing personal access tokens."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.security import (
    PlaintextToken,
    generate_token_secret,
    hash_token_secret,
    verify_password,
)
from iam.application.value_objects import IssuedToken
from iam.domain.aggregates import AccessToken
from iam.ports.exceptions import InactiveUserError, InvalidCredentialsError
from iam.ports.repositories import IAccessTokenRepository, IUserRepository


class LoginService:
    """Exchanges email and password for a personal access token."""

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        token_repository: IAccessTokenRepository,
        probe: AuthenticationProbe | None = None,
    ) -> None:
        self._session = session
        self._users = user_repository
        self._tokens = token_repository
        self._probe = probe or DefaultAuthenticationProbe()

    async def login(
        self,
        email: str,
        password: str,
        device_name: str = "api",
        expires_at: datetime | None = None,
    ) -> IssuedToken:
        """Verify credentials and issue a token.

        Args:
            email: Account email (case-insensitive)
            password: Plaintext password
            device_name: Name stored on the token
            expires_at: Optional token expiration

        Returns:
            The issued token including its plaintext form

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match
            InactiveUserError: If the account is inactive
        """
        user = await self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            self._probe.login_failed(reason="invalid_credentials")
            raise InvalidCredentialsError("These credentials do not match our records")

        if not user.is_active:
            self._probe.login_failed(reason="inactive_user")
            raise InactiveUserError(user_id=user.id.value)

        secret = generate_token_secret()
        token = await self._tokens.add(
            AccessToken.create(
                user_id=user.id,
                name=device_name,
                token_hash=hash_token_secret(secret),
                expires_at=expires_at,
            )
        )
        await self._session.commit()

        assert token.id is not None
        plaintext = PlaintextToken(token_id=token.id.value, secret=secret)
        self._probe.login_succeeded(user_id=user.id.value, token_id=str(token.id))

        return IssuedToken(user=user, access_token=token, plaintext=str(plaintext))
