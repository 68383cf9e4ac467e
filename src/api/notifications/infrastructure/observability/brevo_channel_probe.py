"""Domain probe for the Brevo email channel.

Payload previews are logged, never the API key.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class BrevoChannelProbe(Protocol):
    """Domain probe for Brevo deliveries."""

    def api_key_missing(self) -> None:
        """Record that delivery was skipped because no API key is set."""
        ...

    def delivery_prepared(
        self, to: list[str], subject: str | None, html_preview: str
    ) -> None:
        """Record the payload about to be sent."""
        ...

    def delivery_succeeded(
        self, to: list[str], status: int, message_id: str | None
    ) -> None:
        """Record that Brevo accepted the message."""
        ...

    def delivery_failed(self, to: list[str], status: int, error: Any) -> None:
        """Record that Brevo rejected the message."""
        ...

    def transport_failed(self, to: list[str], error: Exception) -> None:
        """Record that Brevo could not be reached."""
        ...

    def with_context(self, context: ObservationContext) -> BrevoChannelProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultBrevoChannelProbe:
    """Default implementation of BrevoChannelProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultBrevoChannelProbe:
        """Create a new probe with observation context bound."""
        return DefaultBrevoChannelProbe(logger=self._logger, context=context)

    def api_key_missing(self) -> None:
        """Record that delivery was skipped because no API key is set."""
        self._logger.warning(
            "brevo_api_key_missing",
            message="BREVO_API_KEY is not set; notification not sent",
            **self._get_context_kwargs(),
        )

    def delivery_prepared(
        self, to: list[str], subject: str | None, html_preview: str
    ) -> None:
        """Record the payload about to be sent."""
        self._logger.info(
            "brevo_delivery_prepared",
            to=to,
            subject=subject,
            html_preview=html_preview,
            **self._get_context_kwargs(),
        )

    def delivery_succeeded(
        self, to: list[str], status: int, message_id: str | None
    ) -> None:
        """Record that Brevo accepted the message."""
        self._logger.info(
            "brevo_delivery_succeeded",
            to=to,
            status=status,
            message_id=message_id,
            **self._get_context_kwargs(),
        )

    def delivery_failed(self, to: list[str], status: int, error: Any) -> None:
        """Record that Brevo rejected the message."""
        self._logger.error(
            "brevo_delivery_failed",
            to=to,
            status=status,
            error=error,
            **self._get_context_kwargs(),
        )

    def transport_failed(self, to: list[str], error: Exception) -> None:
        """Record that Brevo could not be reached."""
        self._logger.error(
            "brevo_transport_failed",
            to=to,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
