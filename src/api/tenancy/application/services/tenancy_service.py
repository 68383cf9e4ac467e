"""Tenancy application service.

Identifies tenants by domain and runs the tenancy lifecycle: activate the
request-scoped tenant context, notify listeners, and restore the previous
context when the unit of work is over.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import AsyncIterator, Sequence

from shared_kernel.middleware.tenant_context import (
    TenantContext,
    reset_tenant_context,
    set_tenant_context,
)
from tenancy.application.observability import (
    DefaultTenancyServiceProbe,
    TenancyServiceProbe,
)
from tenancy.domain.aggregates import Tenant
from tenancy.domain.events import TenancyInitialized
from tenancy.domain.value_objects import TenancySource, normalize_domain
from tenancy.ports.exceptions import TenantCouldNotBeIdentifiedError
from tenancy.ports.listeners import TenancyInitializedListener
from tenancy.ports.repositories import ITenantRepository


class TenancyService:
    """Application service for tenant identification and tenancy lifecycle."""

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        listeners: Sequence[TenancyInitializedListener] = (),
        central_domains: Sequence[str] = (),
        probe: TenancyServiceProbe | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            tenant_repository: Repository for tenant lookups by domain
            listeners: Called, in order, after each tenant context activation
            central_domains: Domains served without tenant context
            probe: Optional domain probe for observability
        """
        self._tenants = tenant_repository
        self._listeners = tuple(listeners)
        self._central_domains = frozenset(d.lower() for d in central_domains)
        self._probe = probe or DefaultTenancyServiceProbe()

    def is_central_domain(self, host: str | None) -> bool:
        """Check whether a host is served without tenant context."""
        domain = normalize_domain(host)
        if domain in self._central_domains:
            self._probe.central_domain_requested(domain=domain)
            return True
        return False

    async def identify(self, host: str | None) -> Tenant:
        """Find the tenant owning the domain of a ``Host`` header.

        Args:
            host: Raw ``Host`` header value (port allowed)

        Returns:
            The owning tenant

        Raises:
            TenantCouldNotBeIdentifiedError: If no tenant owns the domain
        """
        domain = normalize_domain(host)
        if domain is None:
            self._probe.tenant_not_identified(domain=None)
            raise TenantCouldNotBeIdentifiedError(host)

        tenant = await self._tenants.get_by_domain(domain)
        if tenant is None:
            self._probe.tenant_not_identified(domain=domain)
            raise TenantCouldNotBeIdentifiedError(domain)

        self._probe.tenant_identified(tenant_id=tenant.id.value, domain=domain)
        return tenant

    @asynccontextmanager
    async def initialized(
        self,
        tenant: Tenant,
        source: TenancySource = TenancySource.HTTP,
        domain: str | None = None,
    ) -> AsyncIterator[TenantContext]:
        """Run a block of work inside a tenant's context.

        The context is activated before listeners run, so listeners observe
        the tenant as current. It is restored on exit even if a listener or
        the block raises.

        Args:
            tenant: Tenant to activate
            source: Whether the work is an HTTP request or a console job
            domain: Domain the tenant was identified on, if any

        Yields:
            The active tenant context
        """
        context = tenant.to_context(domain)
        token = set_tenant_context(context)
        self._probe.tenancy_initialized(
            tenant_id=context.tenant_id,
            slug=tenant.slug,
            source=source.value,
        )

        try:
            event = TenancyInitialized(
                tenant=tenant, source=source, occurred_at=datetime.now(UTC)
            )
            for listener in self._listeners:
                try:
                    await listener.handle(event)
                except Exception as e:
                    self._probe.tenancy_listener_failed(
                        tenant_id=context.tenant_id,
                        listener=type(listener).__name__,
                        error=e,
                    )
                    raise

            yield context
        finally:
            reset_tenant_context(token)
            self._probe.tenancy_ended(tenant_id=context.tenant_id, source=source.value)
