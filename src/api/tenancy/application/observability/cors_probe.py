"""Domain probe for the CORS origin registry and its tenant bootstrapper.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class CorsOriginProbe(Protocol):
    """Domain probe for CORS origin registration."""

    def origin_registered(self, origin: str, tenant_id: str | None) -> None:
        """Record that an origin was appended to the allow-list."""
        ...

    def frontend_url_missing(self, tenant_id: str) -> None:
        """Record that a tenant has no frontend URL configured."""
        ...

    def options_table_missing(self, tenant_id: str) -> None:
        """Record that the options table does not exist yet."""
        ...

    def bootstrap_skipped(self, tenant_id: str, source: str) -> None:
        """Record that bootstrapping was skipped outside a web request."""
        ...

    def with_context(self, context: ObservationContext) -> CorsOriginProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultCorsOriginProbe:
    """Default implementation of CorsOriginProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultCorsOriginProbe:
        """Create a new probe with observation context bound."""
        return DefaultCorsOriginProbe(logger=self._logger, context=context)

    def origin_registered(self, origin: str, tenant_id: str | None) -> None:
        """Record that an origin was appended to the allow-list."""
        self._logger.info(
            "cors_origin_registered",
            origin=origin,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def frontend_url_missing(self, tenant_id: str) -> None:
        """Record that a tenant has no frontend URL configured."""
        self._logger.debug(
            "cors_frontend_url_missing",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def options_table_missing(self, tenant_id: str) -> None:
        """Record that the options table does not exist yet."""
        self._logger.warning(
            "cors_options_table_missing",
            tenant_id=tenant_id,
            message="options table not found; tenant frontend origin not registered",
            **self._get_context_kwargs(),
        )

    def bootstrap_skipped(self, tenant_id: str, source: str) -> None:
        """Record that bootstrapping was skipped outside a web request."""
        self._logger.debug(
            "cors_bootstrap_skipped",
            tenant_id=tenant_id,
            source=source,
            **self._get_context_kwargs(),
        )
