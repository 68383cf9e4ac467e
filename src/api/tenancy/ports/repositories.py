"""Repository port interfaces for the Tenancy context.

These protocols define the contracts for reading tenants and their options.
Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantId


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository interface for Tenant lookups."""

    async def get_by_domain(self, domain: str) -> Tenant | None:
        """Retrieve the tenant owning a domain.

        Args:
            domain: Normalized (lower-case, port-less) domain

        Returns:
            The Tenant aggregate, or None if no tenant owns the domain
        """
        ...


@runtime_checkable
class IOptionRepository(Protocol):
    """Repository interface for per-tenant configuration options."""

    async def get_value(self, tenant_id: TenantId, key: str) -> str | None:
        """Retrieve an option value.

        Deleted options (``excluido`` or ``deletado`` set to ``"s"``) are
        never returned.

        Args:
            tenant_id: Owner of the option
            key: Option key

        Returns:
            The stored value, or None if the option does not exist

        Raises:
            sqlalchemy.exc.DBAPIError: On any data access failure, including
                a missing ``options`` table
        """
        ...
