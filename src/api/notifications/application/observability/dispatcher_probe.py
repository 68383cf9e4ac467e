"""Domain probe for notification dispatch.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class NotificationDispatcherProbe(Protocol):
    """Domain probe for notification dispatch."""

    def channel_not_configured(self, channel: str, notification: str) -> None:
        """Record that a notification asked for an unknown channel."""
        ...

    def notification_dispatched(
        self, channel: str, notification: str, delivered: bool
    ) -> None:
        """Record that a channel handled a notification."""
        ...

    def with_context(self, context: ObservationContext) -> NotificationDispatcherProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultNotificationDispatcherProbe:
    """Default implementation of NotificationDispatcherProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultNotificationDispatcherProbe:
        """Create a new probe with observation context bound."""
        return DefaultNotificationDispatcherProbe(logger=self._logger, context=context)

    def channel_not_configured(self, channel: str, notification: str) -> None:
        """Record that a notification asked for an unknown channel."""
        self._logger.warning(
            "notification_channel_not_configured",
            channel=channel,
            notification=notification,
            **self._get_context_kwargs(),
        )

    def notification_dispatched(
        self, channel: str, notification: str, delivered: bool
    ) -> None:
        """Record that a channel handled a notification."""
        self._logger.debug(
            "notification_dispatched",
            channel=channel,
            notification=notification,
            delivered=delivered,
            **self._get_context_kwargs(),
        )
