"""Domain aggregates for the Tenancy context."""

from tenancy.domain.aggregates.tenant import Tenant

__all__ = [
    "Tenant",
]
