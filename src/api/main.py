"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from iam.ports.notifications import PasswordResetNotifier
from iam.presentation import routes as iam_routes
from iam.presentation.exception_handlers import register_exception_handlers
from infrastructure.database.dependencies import (
    close_database_connections,
    get_session_factory,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import (
    get_brevo_settings,
    get_cors_settings,
    get_settings,
    get_tenancy_settings,
)
from infrastructure.version import __version__
from notifications.dependencies import build_password_reset_mailer
from notifications.presentation import routes as notification_routes
from shared_kernel.middleware.tenant_headers import TenantHeadersMiddleware
from tenancy.application.services import TenancyService
from tenancy.dependencies import (
    build_cors_registry,
    build_frontend_url_resolver,
    build_tenancy_service,
)
from tenancy.presentation import routes as tenancy_routes
from tenancy.presentation.middleware import TenancyMiddleware, TenantCorsMiddleware


@asynccontextmanager
async def eadcontrol_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Startup logging (version, static CORS origins, email configuration)
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    settings = get_settings()
    probe = DefaultStartupProbe()

    if not get_brevo_settings().is_configured:
        probe.brevo_not_configured()
    probe.application_started(
        app_name=settings.app_name,
        version=__version__,
        static_origins=len(get_cors_settings().allowed_origins),
    )

    yield

    await close_database_connections()
    probe.application_stopped(app_name=settings.app_name)


def create_app(
    tenancy: TenancyService | None = None,
    password_reset_notifier: PasswordResetNotifier | None = None,
) -> FastAPI:
    """Build the application.

    Middleware runs, outermost first: tenancy, CORS, tenant headers. The
    tenant's frontend origin is therefore registered before CORS evaluates
    the request, and headers are annotated while the tenant is active.

    Args:
        tenancy: Tenancy service; built from the database settings when None
        password_reset_notifier: Delivers reset links; defaults to email
            through the configured notification channels

    Returns:
        The configured FastAPI application
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    cors_settings = get_cors_settings()
    registry = build_cors_registry(cors_settings)
    if tenancy is None:
        tenancy = build_tenancy_service(
            session_factory=get_session_factory(),
            registry=registry,
            settings=get_tenancy_settings(),
        )
    if password_reset_notifier is None:
        password_reset_notifier = build_password_reset_mailer(
            build_frontend_url_resolver(
                session_factory=get_session_factory(),
                settings=get_tenancy_settings(),
                fallback=settings.frontend_url,
            )
        )

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant API for the EAD Control learning platform",
        version=__version__,
        debug=settings.debug,
        lifespan=eadcontrol_lifespan,
    )
    app.state.cors_origins = registry
    app.state.password_reset_notifier = password_reset_notifier

    # Added innermost first
    app.add_middleware(TenantHeadersMiddleware)
    app.add_middleware(TenantCorsMiddleware, registry=registry, settings=cors_settings)
    app.add_middleware(TenancyMiddleware, tenancy=tenancy)

    register_exception_handlers(app)

    app.include_router(iam_routes.router)
    app.include_router(tenancy_routes.router)
    app.include_router(notification_routes.router)

    @app.get("/health")
    def health():
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
