"""Ports (interfaces) for the Notifications context."""

from notifications.ports.exceptions import NotificationDeliveryError
from notifications.ports.notifications import (
    Notification,
    NotificationChannel,
    ResolvesFrontendUrl,
    RoutesMailNotifications,
    SupportsBrevo,
    mail_route,
)

__all__ = [
    "Notification",
    "NotificationChannel",
    "NotificationDeliveryError",
    "ResolvesFrontendUrl",
    "RoutesMailNotifications",
    "SupportsBrevo",
    "mail_route",
]
