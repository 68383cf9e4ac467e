"""PostgreSQL implementation of ITenantRepository.

Tenant lookups happen in middleware, before FastAPI dependency injection
runs, so the repository opens its own short-lived session per lookup.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantId
from tenancy.infrastructure.models import DomainModel, TenantModel
from tenancy.ports.repositories import ITenantRepository


class TenantRepository(ITenantRepository):
    """Read-only repository for Tenant aggregates."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory producing sessions bound to the engine
        """
        self._session_factory = session_factory

    async def get_by_domain(self, domain: str) -> Tenant | None:
        """Retrieve the tenant owning a domain.

        Args:
            domain: Normalized (lower-case, port-less) domain

        Returns:
            The Tenant aggregate, or None if no tenant owns the domain
        """
        stmt = (
            select(TenantModel)
            .join(TenantModel.domains)
            .where(func.lower(DomainModel.domain) == domain.lower())
            .options(selectinload(TenantModel.domains))
        )

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    def _to_domain(self, model: TenantModel) -> Tenant:
        """Convert a TenantModel to a Tenant aggregate."""
        return Tenant(
            id=TenantId(value=model.id),
            data=dict(model.data or {}),
            domains=tuple(d.domain for d in model.domains),
        )
