"""Listener port for tenancy lifecycle events."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.events import TenancyInitialized


@runtime_checkable
class TenancyInitializedListener(Protocol):
    """Reacts to a tenant context becoming active.

    Listeners run in registration order, inside the tenant context, before
    the request reaches its handler. An exception raised by a listener
    aborts the request.
    """

    async def handle(self, event: TenancyInitialized) -> None:
        """Handle the event."""
        ...
