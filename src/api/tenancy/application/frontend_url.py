"""Frontend URL of the tenant serving the current request."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError

from infrastructure.database.exceptions import is_missing_table_error
from shared_kernel.middleware.tenant_context import current_tenant_id
from tenancy.application.listeners.cors_bootstrapper import (
    DEFAULT_FRONTEND_URL_OPTION,
    OPTIONS_TABLE,
)
from tenancy.domain.value_objects import TenantId
from tenancy.ports.repositories import IOptionRepository


class TenantFrontendUrlResolver:
    """Reads the active tenant's frontend URL option.

    Falls back to the configured URL on central domains, when the tenant
    has no (or an empty) option, and while the options table does not exist.
    """

    def __init__(
        self,
        option_repository: IOptionRepository,
        fallback: str,
        option_key: str = DEFAULT_FRONTEND_URL_OPTION,
    ) -> None:
        self._options = option_repository
        self._fallback = fallback
        self._option_key = option_key

    async def resolve(self) -> str:
        """Return the frontend URL used in links sent to the current tenant.

        Raises:
            DBAPIError: On any option lookup failure other than a missing
                options table
        """
        tenant_id = current_tenant_id()
        if tenant_id is None:
            return self._fallback

        try:
            value = await self._options.get_value(
                TenantId(tenant_id), self._option_key
            )
        except DBAPIError as e:
            if not is_missing_table_error(e, OPTIONS_TABLE):
                raise
            return self._fallback

        if isinstance(value, str) and value:
            return value
        return self._fallback
