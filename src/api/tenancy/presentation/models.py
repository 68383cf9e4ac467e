"""Response models for Tenancy routes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shared_kernel.middleware.tenant_context import TenantContext


class TenantResponse(BaseModel):
    """The tenant serving the current request."""

    id: str = Field(..., description="Tenant identifier")
    slug: str | None = Field(None, description="Tenant slug")
    domain: str | None = Field(None, description="Domain the tenant was identified on")

    @classmethod
    def from_context(cls, context: TenantContext) -> TenantResponse:
        """Build the response from the request tenant context."""
        return cls(id=context.tenant_id, slug=context.slug, domain=context.domain)
