"""Domain probe for reading the request tenant context.

Following Domain-Oriented Observability patterns, this probe captures
events raised while the tenant context is read on behalf of clients.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantContextProbe(Protocol):
    """Domain probe for tenant context reads."""

    def tenant_lookup_failed(self, header: str, error: Exception) -> None:
        """Record that a tenant lookup raised and its header was omitted."""
        ...

    def with_context(self, context: ObservationContext) -> TenantContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantContextProbe:
    """Default implementation of TenantContextProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantContextProbe(logger=self._logger, context=context)

    def tenant_lookup_failed(self, header: str, error: Exception) -> None:
        """Record that a tenant lookup raised and its header was omitted."""
        self._logger.debug(
            "tenant_header_lookup_failed",
            header=header,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
