"""Routes notifications to the channels they ask for."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from notifications.application.observability import (
    DefaultNotificationDispatcherProbe,
    NotificationDispatcherProbe,
)
from notifications.domain.value_objects import DeliveryResult
from notifications.ports.notifications import Notification, NotificationChannel


class NotificationDispatcher:
    """Sends a notification to notifiables through named channels."""

    def __init__(
        self,
        channels: Mapping[str, NotificationChannel],
        probe: NotificationDispatcherProbe | None = None,
    ):
        self._channels = dict(channels)
        self._probe = probe or DefaultNotificationDispatcherProbe()

    def send(
        self, notifiables: Any | Iterable[Any], notification: Notification
    ) -> list[DeliveryResult | None]:
        """Deliver a notification to one or more notifiables.

        Channels the notification asks for but that are not registered are
        logged and skipped. Channel exceptions propagate.

        Args:
            notifiables: A notifiable, or a list or tuple of them
            notification: Notification to deliver

        Returns:
            One entry per (notifiable, channel) delivery, None when skipped
        """
        if not isinstance(notifiables, (list, tuple)):
            notifiables = [notifiables]

        kind = type(notification).__name__
        results: list[DeliveryResult | None] = []
        for notifiable in notifiables:
            for name in notification.via(notifiable):
                channel = self._channels.get(name)
                if channel is None:
                    self._probe.channel_not_configured(channel=name, notification=kind)
                    continue

                result = channel.send(notifiable, notification)
                self._probe.notification_dispatched(
                    channel=name, notification=kind, delivered=result is not None
                )
                results.append(result)
        return results
