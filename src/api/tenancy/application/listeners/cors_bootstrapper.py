"""Registers a tenant's frontend origin when its tenancy is initialized."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError

from infrastructure.database.exceptions import is_missing_table_error
from tenancy.application.cors import CorsOriginRegistry
from tenancy.application.observability import (
    CorsOriginProbe,
    DefaultCorsOriginProbe,
)
from tenancy.domain.events import TenancyInitialized
from tenancy.domain.value_objects import TenancySource
from tenancy.ports.repositories import IOptionRepository

OPTIONS_TABLE = "options"
DEFAULT_FRONTEND_URL_OPTION = "default_frontend_url"


class TenantCorsBootstrapper:
    """Adds the tenant's ``default_frontend_url`` option to the CORS registry.

    Runs for every HTTP tenancy initialization; console initializations are
    ignored. The lookup tolerates exactly one failure: the options table not
    existing yet (tenant still being provisioned). Every other data access
    error propagates so that a broken database never silently disables CORS.
    """

    def __init__(
        self,
        registry: CorsOriginRegistry,
        option_repository: IOptionRepository,
        option_key: str = DEFAULT_FRONTEND_URL_OPTION,
        probe: CorsOriginProbe | None = None,
    ) -> None:
        """Initialize the bootstrapper.

        Args:
            registry: The process-wide origin registry
            option_repository: Source of the tenant's options
            option_key: Option holding the tenant frontend origin
            probe: Optional domain probe for observability
        """
        self._registry = registry
        self._options = option_repository
        self._option_key = option_key
        self._probe = probe or DefaultCorsOriginProbe()

    async def handle(self, event: TenancyInitialized) -> None:
        """Register the tenant frontend origin, if configured.

        Args:
            event: The tenancy initialization event

        Raises:
            DBAPIError: On any option lookup failure other than a missing
                options table
        """
        tenant_id = event.tenant.id

        if event.source is not TenancySource.HTTP:
            self._probe.bootstrap_skipped(
                tenant_id=tenant_id.value, source=event.source.value
            )
            return

        try:
            frontend_url = await self._options.get_value(tenant_id, self._option_key)
        except DBAPIError as e:
            if not is_missing_table_error(e, OPTIONS_TABLE):
                raise
            self._probe.options_table_missing(tenant_id=tenant_id.value)
            return

        if not isinstance(frontend_url, str) or not frontend_url:
            self._probe.frontend_url_missing(tenant_id=tenant_id.value)
            return

        self._registry.register(frontend_url, tenant_id=tenant_id.value)
