"""Domain probes for Tenancy application services."""

from tenancy.application.observability.cors_probe import (
    CorsOriginProbe,
    DefaultCorsOriginProbe,
)
from tenancy.application.observability.tenancy_service_probe import (
    DefaultTenancyServiceProbe,
    TenancyServiceProbe,
)

__all__ = [
    "CorsOriginProbe",
    "DefaultCorsOriginProbe",
    "DefaultTenancyServiceProbe",
    "TenancyServiceProbe",
]
