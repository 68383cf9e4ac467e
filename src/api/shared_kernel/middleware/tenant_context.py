"""Request-scoped tenant context.

The tenant context is a pure value object stored in a ``ContextVar`` so that
it follows the request across ``await`` points and never leaks between
concurrently handled requests. Resolution (domain lookup, lifecycle events)
lives in the tenancy bounded context; this module only stores and reads it.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass


class TenancyNotInitializedError(Exception):
    """Raised when tenant context is required but none was initialized.

    This happens on central domains, in console jobs, or before the
    tenancy middleware has run.
    """

    pass


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    Attributes:
        tenant_id: The tenant identifier.
        slug: Short tenant name used in URLs and headers.
        domain: The domain the tenant was identified on, if any.
    """

    tenant_id: str
    slug: str | None = None
    domain: str | None = None


_current_tenant: ContextVar[TenantContext | None] = ContextVar(
    "current_tenant", default=None
)


def set_tenant_context(context: TenantContext) -> Token[TenantContext | None]:
    """Activate a tenant context, returning the token to restore the previous one."""
    return _current_tenant.set(context)


def reset_tenant_context(token: Token[TenantContext | None]) -> None:
    """Restore the tenant context that was active before ``set_tenant_context``."""
    _current_tenant.reset(token)


def require_tenant_context() -> TenantContext:
    """Return the active tenant context.

    Raises:
        TenancyNotInitializedError: If no tenant is active
    """
    context = _current_tenant.get()
    if context is None:
        raise TenancyNotInitializedError("Tenancy has not been initialized")
    return context


def current_tenant_id() -> str | None:
    """Return the active tenant id, or None when no tenant is active."""
    try:
        return require_tenant_context().tenant_id
    except TenancyNotInitializedError:
        return None


def current_tenant_slug() -> str | None:
    """Return the active tenant slug, or None when no tenant is active."""
    try:
        return require_tenant_context().slug
    except TenancyNotInitializedError:
        return None
