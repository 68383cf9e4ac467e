"""Response middleware reporting the resolved tenant to clients.

Adds ``X-Tenant-Id`` and ``X-Tenant-Slug`` to every response whose tenant can
be resolved. The headers are informational: a failing lookup drops the
header and never fails the request.
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shared_kernel.middleware.observability import (
    DefaultTenantContextProbe,
    TenantContextProbe,
)
from shared_kernel.middleware.tenant_context import (
    current_tenant_id,
    current_tenant_slug,
)

TENANT_ID_HEADER = "X-Tenant-Id"
TENANT_SLUG_HEADER = "X-Tenant-Slug"

TenantLookup = Callable[[], str | None]


def _lookup_or_none(
    header: str, lookup: TenantLookup, probe: TenantContextProbe
) -> str | None:
    try:
        return lookup()
    except Exception as e:
        probe.tenant_lookup_failed(header=header, error=e)
        return None


def annotate_tenant_headers(
    response: Response,
    tenant_id_lookup: TenantLookup = current_tenant_id,
    tenant_slug_lookup: TenantLookup = current_tenant_slug,
    probe: TenantContextProbe | None = None,
) -> Response:
    """Set tenant identity headers on a response.

    A header is only set when its lookup returns a non-empty value. Status,
    body and all other headers are left as they are.

    Args:
        response: The response produced by the downstream handler
        tenant_id_lookup: Returns the current tenant id
        tenant_slug_lookup: Returns the current tenant slug
        probe: Optional domain probe for observability

    Returns:
        The same response object, annotated
    """
    probe = probe or DefaultTenantContextProbe()

    for header, lookup in (
        (TENANT_ID_HEADER, tenant_id_lookup),
        (TENANT_SLUG_HEADER, tenant_slug_lookup),
    ):
        value = _lookup_or_none(header, lookup, probe)
        if value:
            response.headers[header] = str(value)

    return response


class TenantHeadersMiddleware(BaseHTTPMiddleware):
    """Annotates responses with the current tenant's id and slug."""

    def __init__(
        self,
        app: ASGIApp,
        tenant_id_lookup: TenantLookup = current_tenant_id,
        tenant_slug_lookup: TenantLookup = current_tenant_slug,
        probe: TenantContextProbe | None = None,
    ) -> None:
        super().__init__(app)
        self._tenant_id_lookup = tenant_id_lookup
        self._tenant_slug_lookup = tenant_slug_lookup
        self._probe = probe or DefaultTenantContextProbe()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        return annotate_tenant_headers(
            response,
            tenant_id_lookup=self._tenant_id_lookup,
            tenant_slug_lookup=self._tenant_slug_lookup,
            probe=self._probe,
        )
