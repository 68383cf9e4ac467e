"""PostgreSQL implementation of IAccessTokenRepository.

Stores user personal access tokens. The repository never commits; the
calling service owns the transaction.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import AccessToken
from iam.domain.value_objects import AccessTokenId, UserId
from iam.infrastructure.models import USER_TOKENABLE_TYPE, PersonalAccessTokenModel
from iam.ports.repositories import IAccessTokenRepository


class AccessTokenRepository(IAccessTokenRepository):
    """Repository for AccessToken aggregates."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
        """
        self._session = session

    async def add(self, token: AccessToken) -> AccessToken:
        """Persist a new token and return it with its assigned id.

        Flushes so that the database assigns the id before the plaintext
        token is built.
        """
        model = PersonalAccessTokenModel(
            tokenable_type=USER_TOKENABLE_TYPE,
            tokenable_id=token.user_id.value,
            name=token.name,
            token=token.token_hash,
            abilities=list(token.abilities),
            expires_at=token.expires_at,
            last_used_at=token.last_used_at,
        )
        self._session.add(model)
        await self._session.flush()

        token.id = AccessTokenId(value=model.id)
        return token

    async def get_by_id(self, token_id: AccessTokenId) -> AccessToken | None:
        """Retrieve a user token by ID."""
        stmt = select(PersonalAccessTokenModel).where(
            PersonalAccessTokenModel.id == token_id.value,
            PersonalAccessTokenModel.tokenable_type == USER_TOKENABLE_TYPE,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def get_by_hash(self, token_hash: str) -> AccessToken | None:
        """Retrieve a user token by the digest of its secret."""
        stmt = select(PersonalAccessTokenModel).where(
            PersonalAccessTokenModel.token == token_hash,
            PersonalAccessTokenModel.tokenable_type == USER_TOKENABLE_TYPE,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def delete(self, token_id: AccessTokenId) -> None:
        """Delete one token."""
        stmt = delete(PersonalAccessTokenModel).where(
            PersonalAccessTokenModel.id == token_id.value
        )
        await self._session.execute(stmt)

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every token owned by a user.

        Returns:
            Number of deleted tokens
        """
        stmt = delete(PersonalAccessTokenModel).where(
            PersonalAccessTokenModel.tokenable_type == USER_TOKENABLE_TYPE,
            PersonalAccessTokenModel.tokenable_id == user_id.value,
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    def _to_domain(self, model: PersonalAccessTokenModel) -> AccessToken:
        """Convert a PersonalAccessTokenModel to an AccessToken aggregate."""
        return AccessToken(
            id=AccessTokenId(value=model.id),
            user_id=UserId(value=model.tokenable_id),
            name=model.name,
            token_hash=model.token,
            abilities=list(model.abilities) if model.abilities is not None else ["*"],
            expires_at=model.expires_at,
            last_used_at=model.last_used_at,
            created_at=model.created_at,
        )
