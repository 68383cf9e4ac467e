"""ASGI middleware for tenant identification and tenant-aware CORS.

Registration order matters: ``TenancyMiddleware`` must wrap
``TenantCorsMiddleware`` so that a tenant's frontend origin is registered
before the origin of the same request is evaluated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from tenancy.application.cors import CorsOriginRegistry
from tenancy.application.services import TenancyService
from tenancy.domain.value_objects import TenancySource, normalize_domain
from tenancy.ports.exceptions import TenantCouldNotBeIdentifiedError

if TYPE_CHECKING:
    from infrastructure.settings import CorsSettings


class TenancyMiddleware(BaseHTTPMiddleware):
    """Initializes tenancy from the request's ``Host`` header.

    - Central domains pass through without tenant context.
    - Unknown domains are answered with 404.
    - Otherwise the downstream app runs inside the tenant's context.
    """

    def __init__(self, app: ASGIApp, tenancy: TenancyService) -> None:
        super().__init__(app)
        self._tenancy = tenancy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        host = request.headers.get("host")

        if self._tenancy.is_central_domain(host):
            return await call_next(request)

        try:
            tenant = await self._tenancy.identify(host)
        except TenantCouldNotBeIdentifiedError as e:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"detail": str(e)},
            )

        async with self._tenancy.initialized(
            tenant, source=TenancySource.HTTP, domain=normalize_domain(host)
        ):
            return await call_next(request)


class TenantCorsMiddleware(CORSMiddleware):
    """Starlette CORS middleware backed by the process-wide origin registry.

    An origin is allowed when it is in the registry (static origins plus
    every tenant frontend registered so far) or matches one of the
    configured origin patterns.
    """

    def __init__(
        self,
        app: ASGIApp,
        registry: CorsOriginRegistry,
        settings: CorsSettings,
    ) -> None:
        super().__init__(
            app,
            allow_origins=["*"] if "*" in registry else [],
            allow_methods=settings.allowed_methods,
            allow_headers=settings.allowed_headers,
            allow_credentials=settings.supports_credentials,
            allow_origin_regex=settings.origin_regex,
            expose_headers=settings.exposed_headers,
            max_age=settings.max_age,
        )
        self._registry = registry

    def is_allowed_origin(self, origin: str) -> bool:
        if origin in self._registry:
            return True
        return super().is_allowed_origin(origin=origin)
