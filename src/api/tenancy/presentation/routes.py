"""HTTP routes for the Tenancy context."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from shared_kernel.middleware.tenant_context import (
    TenancyNotInitializedError,
    require_tenant_context,
)
from tenancy.presentation.models import TenantResponse

router = APIRouter(prefix="/api/v1", tags=["tenancy"])


@router.get("/tenant", response_model=TenantResponse)
async def get_current_tenant() -> TenantResponse:
    """Describe the tenant serving this request.

    Returns:
        The tenant id, slug and domain

    Raises:
        HTTPException: 404 when the request arrived on a central domain
    """
    try:
        context = require_tenant_context()
    except TenancyNotInitializedError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No tenant is active for this request",
        ) from e

    return TenantResponse.from_context(context)
