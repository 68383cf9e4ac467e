"""Wiring for the Tenancy context.

Tenancy runs in middleware, outside FastAPI's per-request dependency
injection, so its collaborators are assembled once at application startup.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.settings import CorsSettings, TenancySettings
from tenancy.application.cors import CorsOriginRegistry
from tenancy.application.frontend_url import TenantFrontendUrlResolver
from tenancy.application.listeners import TenantCorsBootstrapper
from tenancy.application.services import TenancyService
from tenancy.infrastructure.option_repository import OptionRepository
from tenancy.infrastructure.tenant_repository import TenantRepository


def build_cors_registry(settings: CorsSettings) -> CorsOriginRegistry:
    """Create the origin registry seeded with the static origins."""
    return CorsOriginRegistry(origins=settings.allowed_origins)


def build_tenancy_service(
    session_factory: async_sessionmaker[AsyncSession],
    registry: CorsOriginRegistry,
    settings: TenancySettings,
) -> TenancyService:
    """Create the tenancy service with its CORS bootstrapper listener.

    Args:
        session_factory: Factory for the sessions used by tenant and option lookups
        registry: The application's origin registry
        settings: Tenancy settings

    Returns:
        A configured TenancyService
    """
    bootstrapper = TenantCorsBootstrapper(
        registry=registry,
        option_repository=OptionRepository(session_factory),
        option_key=settings.frontend_url_option,
    )
    return TenancyService(
        tenant_repository=TenantRepository(session_factory),
        listeners=[bootstrapper],
        central_domains=settings.central_domains,
    )


def build_frontend_url_resolver(
    session_factory: async_sessionmaker[AsyncSession],
    settings: TenancySettings,
    fallback: str,
) -> TenantFrontendUrlResolver:
    """Create the resolver for the active tenant's frontend URL.

    Args:
        session_factory: Factory for the sessions used by option lookups
        settings: Tenancy settings naming the frontend option
        fallback: URL used when no tenant option applies

    Returns:
        A configured TenantFrontendUrlResolver
    """
    return TenantFrontendUrlResolver(
        option_repository=OptionRepository(session_factory),
        fallback=fallback,
        option_key=settings.frontend_url_option,
    )
