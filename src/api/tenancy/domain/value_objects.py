"""Value objects for the Tenancy domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant aggregate.

    Tenant ids are opaque strings assigned when the tenant is provisioned.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class TenancySource(StrEnum):
    """Where a tenancy initialization originated."""

    HTTP = "http"
    CONSOLE = "console"


def normalize_domain(host: str | None) -> str | None:
    """Reduce a ``Host`` header value to a bare, lower-case domain.

    Drops a trailing ``:port`` (including for bracketed IPv6 literals) and
    a trailing dot.

    Returns:
        The domain, or None for a missing or blank host
    """
    if host is None:
        return None

    value = host.strip().lower()
    if value.startswith("["):
        value = value[1 : value.find("]")] if "]" in value else value[1:]
    elif ":" in value:
        value = value.split(":", 1)[0]

    value = value.rstrip(".")
    return value or None
