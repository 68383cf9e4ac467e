"""Unit tests for tenancy routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shared_kernel.middleware.tenant_context import (
    TenantContext,
    reset_tenant_context,
    set_tenant_context,
)
from tenancy.presentation import routes


@pytest.fixture
def client():
    """Test client with only the tenancy routes."""
    app = FastAPI()
    app.include_router(routes.router)
    return TestClient(app)


class TestGetCurrentTenant:
    """Tests for GET /api/v1/tenant."""

    def test_without_tenant_is_404(self, client):
        """Central domains have no tenant to describe."""
        response = client.get("/api/v1/tenant")

        assert response.status_code == 404
        assert response.json() == {"detail": "No tenant is active for this request"}

    @pytest.mark.asyncio
    async def test_describes_active_tenant(self):
        """The active tenant context is returned."""
        token = set_tenant_context(
            TenantContext(tenant_id="42", slug="acme", domain="acme.test")
        )
        try:
            response = await routes.get_current_tenant()
        finally:
            reset_tenant_context(token)

        assert response.model_dump() == {
            "id": "42",
            "slug": "acme",
            "domain": "acme.test",
        }
