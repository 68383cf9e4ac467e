"""Domain probes for Notifications application services."""

from notifications.application.observability.dispatcher_probe import (
    DefaultNotificationDispatcherProbe,
    NotificationDispatcherProbe,
)
from notifications.application.observability.welcome_email_probe import (
    DefaultWelcomeEmailProbe,
    WelcomeEmailProbe,
)

__all__ = [
    "DefaultNotificationDispatcherProbe",
    "DefaultWelcomeEmailProbe",
    "NotificationDispatcherProbe",
    "WelcomeEmailProbe",
]
