"""Capability protocols for notifications, notifiables and channels.

A notification advertises what it can render by implementing these
protocols; channels check the capability instead of probing for methods.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from notifications.domain.value_objects import BrevoPayload, DeliveryResult


@runtime_checkable
class RoutesMailNotifications(Protocol):
    """A notifiable that decides which address receives its email."""

    def route_notification_for_mail(self) -> str | None:
        """Return the delivery address."""
        ...


@runtime_checkable
class Notification(Protocol):
    """A message that knows which channels deliver it."""

    def via(self, notifiable: Any) -> list[str]:
        """Return the names of the channels to deliver through."""
        ...


@runtime_checkable
class SupportsBrevo(Protocol):
    """A notification renderable as a Brevo transactional email."""

    def to_brevo(self, notifiable: Any) -> BrevoPayload:
        """Render the payload for a notifiable.

        The payload must not contain credentials.
        """
        ...


@runtime_checkable
class ResolvesFrontendUrl(Protocol):
    """Supplies the frontend base URL that links in notifications point to."""

    async def resolve(self) -> str:
        """Return the frontend base URL for the current request."""
        ...


@runtime_checkable
class NotificationChannel(Protocol):
    """Delivers a notification to one notifiable."""

    def send(self, notifiable: Any, notification: Any) -> DeliveryResult | None:
        """Deliver, returning the provider outcome or None when skipped."""
        ...


def mail_route(notifiable: Any) -> str | None:
    """Resolve the delivery address of a notifiable.

    Prefers ``route_notification_for_mail`` and falls back to an ``email``
    attribute.
    """
    if isinstance(notifiable, RoutesMailNotifications):
        return notifiable.route_notification_for_mail()
    return getattr(notifiable, "email", None)
