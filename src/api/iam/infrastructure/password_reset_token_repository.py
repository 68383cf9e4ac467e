"""PostgreSQL implementation of IPasswordResetTokenRepository."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from iam.infrastructure.models import PasswordResetTokenModel
from iam.ports.repositories import IPasswordResetTokenRepository


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """Repository for pending password reset tokens of one tenant.

    The repository never commits; the calling service owns the transaction.
    """

    def __init__(self, session: AsyncSession, tenant_id: str | None = None) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            tenant_id: Tenant the tokens belong to; None for central accounts
        """
        self._session = session
        self._tenant_id = tenant_id

    @property
    def tenant_id(self) -> str | None:
        """Tenant whose tokens this repository manages."""
        return self._tenant_id

    async def replace(self, email: str, token_hash: str) -> None:
        """Store the reset token for an email, discarding any previous one."""
        scope = (
            PasswordResetTokenModel.tenant_id.is_(None)
            if self._tenant_id is None
            else PasswordResetTokenModel.tenant_id == self._tenant_id
        )
        await self._session.execute(
            delete(PasswordResetTokenModel).where(
                PasswordResetTokenModel.email == email, scope
            )
        )
        self._session.add(
            PasswordResetTokenModel(
                tenant_id=self._tenant_id, email=email, token=token_hash
            )
        )
        await self._session.flush()
