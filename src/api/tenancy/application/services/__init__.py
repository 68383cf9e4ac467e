"""Application services for the Tenancy context."""

from tenancy.application.services.tenancy_service import TenancyService

__all__ = [
    "TenancyService",
]
