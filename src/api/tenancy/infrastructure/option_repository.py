"""PostgreSQL implementation of IOptionRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tenancy.domain.value_objects import TenantId
from tenancy.infrastructure.models import OptionModel
from tenancy.ports.repositories import IOptionRepository


class OptionRepository(IOptionRepository):
    """Read-only repository for per-tenant options.

    Opens its own session per lookup; options are read while the tenancy
    lifecycle runs, outside request dependency injection. Data access errors
    are not translated: callers decide which ones they can tolerate.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_value(self, tenant_id: TenantId, key: str) -> str | None:
        """Retrieve the most recent visible value stored under ``key``."""
        stmt = (
            select(OptionModel.value)
            .where(
                OptionModel.tenant_id == tenant_id.value,
                OptionModel.url == key,
                OptionModel.visible(),
            )
            .order_by(OptionModel.id.desc())
            .limit(1)
        )

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()
