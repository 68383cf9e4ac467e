"""Domain probe for tenant identification and the tenancy lifecycle.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenancyServiceProbe(Protocol):
    """Domain probe for tenancy operations."""

    def tenant_identified(self, tenant_id: str, domain: str) -> None:
        """Record that a domain was matched to a tenant."""
        ...

    def tenant_not_identified(self, domain: str | None) -> None:
        """Record that no tenant owns the requested domain."""
        ...

    def central_domain_requested(self, domain: str | None) -> None:
        """Record that a request was served without tenant context."""
        ...

    def tenancy_initialized(self, tenant_id: str, slug: str, source: str) -> None:
        """Record that a tenant context became active."""
        ...

    def tenancy_listener_failed(
        self, tenant_id: str, listener: str, error: Exception
    ) -> None:
        """Record that a tenancy listener raised."""
        ...

    def tenancy_ended(self, tenant_id: str, source: str) -> None:
        """Record that a tenant context was deactivated."""
        ...

    def with_context(self, context: ObservationContext) -> TenancyServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenancyServiceProbe:
    """Default implementation of TenancyServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenancyServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenancyServiceProbe(logger=self._logger, context=context)

    def tenant_identified(self, tenant_id: str, domain: str) -> None:
        """Record that a domain was matched to a tenant."""
        self._logger.debug(
            "tenant_identified",
            tenant_id=tenant_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def tenant_not_identified(self, domain: str | None) -> None:
        """Record that no tenant owns the requested domain."""
        self._logger.warning(
            "tenant_not_identified",
            domain=domain,
            **self._get_context_kwargs(),
        )

    def central_domain_requested(self, domain: str | None) -> None:
        """Record that a request was served without tenant context."""
        self._logger.debug(
            "central_domain_requested",
            domain=domain,
            **self._get_context_kwargs(),
        )

    def tenancy_initialized(self, tenant_id: str, slug: str, source: str) -> None:
        """Record that a tenant context became active."""
        self._logger.debug(
            "tenancy_initialized",
            tenant_id=tenant_id,
            slug=slug,
            source=source,
            **self._get_context_kwargs(),
        )

    def tenancy_listener_failed(
        self, tenant_id: str, listener: str, error: Exception
    ) -> None:
        """Record that a tenancy listener raised."""
        self._logger.error(
            "tenancy_listener_failed",
            tenant_id=tenant_id,
            listener=listener,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def tenancy_ended(self, tenant_id: str, source: str) -> None:
        """Record that a tenant context was deactivated."""
        self._logger.debug(
            "tenancy_ended",
            tenant_id=tenant_id,
            source=source,
            **self._get_context_kwargs(),
        )
