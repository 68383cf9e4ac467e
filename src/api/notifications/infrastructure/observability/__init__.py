"""Domain probes for Notifications infrastructure."""

from notifications.infrastructure.observability.brevo_channel_probe import (
    BrevoChannelProbe,
    DefaultBrevoChannelProbe,
)

__all__ = [
    "BrevoChannelProbe",
    "DefaultBrevoChannelProbe",
]
