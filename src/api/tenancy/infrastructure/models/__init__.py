"""SQLAlchemy ORM models for the Tenancy context."""

from tenancy.infrastructure.models.option import OptionModel
from tenancy.infrastructure.models.tenant import DomainModel, TenantModel

__all__ = [
    "DomainModel",
    "OptionModel",
    "TenantModel",
]
