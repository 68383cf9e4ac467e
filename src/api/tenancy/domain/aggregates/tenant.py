"""Tenant aggregate for the Tenancy context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.domain.value_objects import TenantId


@dataclass(frozen=True)
class Tenant:
    """Tenant aggregate representing an organization served by the platform.

    Tenants are provisioned outside this service. Free-form attributes
    (including ``slug``) live in the JSON ``data`` column; ``domains`` holds
    the tenant's domains in registration order.
    """

    id: TenantId
    data: dict[str, Any] = field(default_factory=dict)
    domains: tuple[str, ...] = ()

    @property
    def slug(self) -> str:
        """Short tenant name.

        Resolution order:
        1. ``data["slug"]`` when it is a non-empty string
        2. The first label (text before the first ``.``) of the first domain
        3. The tenant id
        """
        slug = self.data.get("slug")
        if isinstance(slug, str) and slug:
            return slug

        if self.domains:
            first_label = self.domains[0].split(".", 1)[0]
            if first_label:
                return first_label

        return self.id.value

    def to_context(self, domain: str | None = None) -> TenantContext:
        """Build the request-scoped context for this tenant.

        Args:
            domain: The domain the tenant was identified on, if any
        """
        return TenantContext(tenant_id=self.id.value, slug=self.slug, domain=domain)

    def __str__(self) -> str:
        """Return string representation."""
        return f"Tenant({self.id.value})"

    def __eq__(self, other: object) -> bool:
        """Tenants are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, Tenant):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
