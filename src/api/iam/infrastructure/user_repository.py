"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from iam.domain.aggregates import User
from iam.domain.value_objects import UserId
from iam.infrastructure.models import UserModel
from iam.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates.

    Users flagged as deleted (``excluido``/``deletado``) are invisible, and so
    are users of any tenant other than the one the repository is scoped to.
    """

    def __init__(self, session: AsyncSession, tenant_id: str | None = None) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            tenant_id: Tenant whose users are visible; None scopes the
                repository to central accounts
        """
        self._session = session
        self._tenant_id = tenant_id

    @property
    def tenant_id(self) -> str | None:
        """Tenant the repository is scoped to."""
        return self._tenant_id

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(
            UserModel.id == user_id.value, UserModel.visible(), self._in_scope()
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by email address (case-insensitive).

        Args:
            email: Email address

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower(),
            UserModel.visible(),
            self._in_scope(),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    def _in_scope(self) -> ColumnElement[bool]:
        if self._tenant_id is None:
            return UserModel.tenant_id.is_(None)
        return UserModel.tenant_id == self._tenant_id

    def _to_domain(self, model: UserModel) -> User:
        """Convert a UserModel to a User aggregate."""
        return User(
            id=UserId(value=model.id),
            name=model.name,
            tenant_id=model.tenant_id,
            email=model.email,
            status=model.status,
            ativo=model.ativo,
            password_hash=model.password,
        )
