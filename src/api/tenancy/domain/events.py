"""Domain events for the tenancy lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tenancy.domain.aggregates import Tenant
from tenancy.domain.value_objects import TenancySource


@dataclass(frozen=True)
class TenancyInitialized:
    """Emitted once a tenant context has been activated.

    Attributes:
        tenant: The tenant that became active
        source: Whether the activation came from an HTTP request or a
            console job
        occurred_at: When the context was activated
    """

    tenant: Tenant
    source: TenancySource
    occurred_at: datetime

