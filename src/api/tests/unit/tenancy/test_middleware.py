"""Unit tests for tenancy and CORS middleware."""

from unittest.mock import AsyncMock, create_autospec

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.settings import CorsSettings
from shared_kernel.middleware.tenant_context import current_tenant_id
from shared_kernel.middleware.tenant_headers import TenantHeadersMiddleware
from tenancy.application.cors import CorsOriginRegistry
from tenancy.application.listeners import TenantCorsBootstrapper
from tenancy.application.observability import TenancyServiceProbe
from tenancy.application.services import TenancyService
from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenantId
from tenancy.ports.repositories import IOptionRepository, ITenantRepository
from tenancy.presentation.middleware import TenancyMiddleware, TenantCorsMiddleware

TENANT_ORIGIN = "https://app.acme.test"


@pytest.fixture
def cors_settings():
    """CORS settings without origin patterns."""
    return CorsSettings(
        allowed_origins=["https://eadcontrol.com.br"],
        allowed_origin_patterns=[],
    )


@pytest.fixture
def registry(cors_settings):
    """Registry seeded from the settings."""
    return CorsOriginRegistry(origins=cors_settings.allowed_origins)


@pytest.fixture
def mock_tenant_repository():
    """Tenant repository knowing only acme.test."""
    tenant = Tenant(id=TenantId("42"), data={"slug": "acme"}, domains=("acme.test",))

    async def get_by_domain(domain):
        return tenant if domain == "acme.test" else None

    repository = create_autospec(ITenantRepository, instance=True)
    repository.get_by_domain = AsyncMock(side_effect=get_by_domain)
    return repository


@pytest.fixture
def mock_option_repository():
    """Option repository returning the tenant frontend."""
    repository = create_autospec(IOptionRepository, instance=True)
    repository.get_value = AsyncMock(return_value=TENANT_ORIGIN)
    return repository


@pytest.fixture
def app(registry, cors_settings, mock_tenant_repository, mock_option_repository):
    """Application wired with the full middleware chain."""
    tenancy = TenancyService(
        tenant_repository=mock_tenant_repository,
        listeners=[
            TenantCorsBootstrapper(
                registry=registry, option_repository=mock_option_repository
            )
        ],
        central_domains=["localhost"],
        probe=create_autospec(TenancyServiceProbe, instance=True),
    )

    app = FastAPI()
    app.add_middleware(TenantHeadersMiddleware)
    app.add_middleware(TenantCorsMiddleware, registry=registry, settings=cors_settings)
    app.add_middleware(TenancyMiddleware, tenancy=tenancy)

    @app.get("/whoami")
    async def whoami():
        return {"tenant_id": current_tenant_id()}

    return app


@pytest.fixture
def client(app):
    """Test client for the app."""
    return TestClient(app)


class TestTenancyMiddleware:
    """Tests for tenant identification."""

    def test_central_domain_has_no_tenant(self, client):
        """Central domains are served without tenant context."""
        response = client.get("/whoami", headers={"host": "localhost:8000"})

        assert response.status_code == 200
        assert response.json() == {"tenant_id": None}
        assert "x-tenant-id" not in response.headers

    def test_tenant_domain_initializes_tenancy(self, client):
        """Tenant domains run the request inside the tenant context."""
        response = client.get("/whoami", headers={"host": "acme.test"})

        assert response.status_code == 200
        assert response.json() == {"tenant_id": "42"}
        assert response.headers["x-tenant-id"] == "42"
        assert response.headers["x-tenant-slug"] == "acme"

    def test_unknown_domain_is_404(self, client):
        """Unknown domains cannot be served."""
        response = client.get("/whoami", headers={"host": "nobody.test"})

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Tenant could not be identified on domain nobody.test"
        }


class TestTenantCorsMiddleware:
    """Tests for tenant-aware CORS."""

    def test_static_origin_is_allowed(self, client):
        """Static origins are allowed on central domains."""
        response = client.get(
            "/whoami",
            headers={"host": "localhost", "origin": "https://eadcontrol.com.br"},
        )

        assert (
            response.headers["access-control-allow-origin"]
            == "https://eadcontrol.com.br"
        )
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_tenant_frontend_allowed_on_first_request(self, client, registry):
        """The tenant's frontend is registered before CORS evaluates it."""
        response = client.get(
            "/whoami", headers={"host": "acme.test", "origin": TENANT_ORIGIN}
        )

        assert response.headers["access-control-allow-origin"] == TENANT_ORIGIN
        assert TENANT_ORIGIN in registry

    def test_registered_origin_stays_allowed(self, client):
        """Registered origins are allowed process-wide."""
        client.get("/whoami", headers={"host": "acme.test"})

        response = client.get(
            "/whoami", headers={"host": "localhost", "origin": TENANT_ORIGIN}
        )

        assert response.headers["access-control-allow-origin"] == TENANT_ORIGIN

    def test_unknown_origin_is_not_allowed(self, client):
        """Other origins get no CORS headers."""
        response = client.get(
            "/whoami", headers={"host": "localhost", "origin": "https://evil.test"}
        )

        assert "access-control-allow-origin" not in response.headers

    def test_preflight_for_tenant_frontend(self, client):
        """Preflight requests are answered for the tenant frontend."""
        response = client.options(
            "/whoami",
            headers={
                "host": "acme.test",
                "origin": TENANT_ORIGIN,
                "access-control-request-method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == TENANT_ORIGIN

    def test_exposes_tenant_headers(self, client):
        """Browsers may read the tenant headers."""
        response = client.get(
            "/whoami", headers={"host": "acme.test", "origin": TENANT_ORIGIN}
        )

        exposed = response.headers["access-control-expose-headers"]
        assert "X-Tenant-Id" in exposed
        assert "X-Tenant-Slug" in exposed

    def test_origin_pattern_is_allowed(self, registry):
        """Origins matching a configured pattern are allowed."""
        settings = CorsSettings(
            allowed_origins=[],
            allowed_origin_patterns=[r"^https://.*\.eadcontrol\.com\.br$"],
        )
        app = FastAPI()
        app.add_middleware(TenantCorsMiddleware, registry=registry, settings=settings)

        @app.get("/ping")
        def ping():
            return {}

        response = TestClient(app).get(
            "/ping", headers={"origin": "https://x.eadcontrol.com.br"}
        )

        assert (
            response.headers["access-control-allow-origin"]
            == "https://x.eadcontrol.com.br"
        )
