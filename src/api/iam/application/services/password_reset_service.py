"""Password reset link requests."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultPasswordResetProbe,
    PasswordResetProbe,
)
from iam.application.security import generate_token_secret, hash_password
from iam.ports.notifications import PasswordResetNotifier
from iam.ports.repositories import IPasswordResetTokenRepository, IUserRepository


class PasswordResetService:
    """Issues password reset tokens and sends them to their owners."""

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        token_repository: IPasswordResetTokenRepository,
        notifier: PasswordResetNotifier,
        probe: PasswordResetProbe | None = None,
    ) -> None:
        self._session = session
        self._users = user_repository
        self._tokens = token_repository
        self._notifier = notifier
        self._probe = probe or DefaultPasswordResetProbe()

    async def send_reset_link(self, email: str) -> bool:
        """Send a reset link if an account uses ``email``.

        The token is stored (bcrypt-hashed) and committed before delivery,
        so the link is valid as soon as it arrives.

        Args:
            email: Account email (case-insensitive)

        Returns:
            True if a link was sent, False if no account matched. Callers
            should answer both cases alike.

        Raises:
            Exception: Any delivery failure, after it is logged
        """
        user = await self._users.get_by_email(email)
        if user is None or not user.email:
            self._probe.reset_requested_for_unknown_email()
            return False

        secret = generate_token_secret()
        await self._tokens.replace(user.email, hash_password(secret))
        await self._session.commit()

        try:
            await self._notifier.send_password_reset(user, secret)
        except Exception as e:
            self._probe.reset_link_failed(user_id=user.id.value, error=e)
            raise

        self._probe.reset_link_sent(user_id=user.id.value)
        return True
