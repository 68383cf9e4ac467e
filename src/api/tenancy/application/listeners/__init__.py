"""Listeners reacting to tenancy lifecycle events."""

from tenancy.application.listeners.cors_bootstrapper import TenantCorsBootstrapper

__all__ = [
    "TenantCorsBootstrapper",
]
