"""Domain probe for the welcome email use case.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class WelcomeEmailProbe(Protocol):
    """Domain probe for welcome emails."""

    def welcome_email_sent(self, email: str, course_id: str | None) -> None:
        """Record that a welcome email was handed to the channels."""
        ...

    def welcome_email_failed(self, email: str, error: Exception) -> None:
        """Record that a welcome email could not be sent."""
        ...

    def with_context(self, context: ObservationContext) -> WelcomeEmailProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultWelcomeEmailProbe:
    """Default implementation of WelcomeEmailProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultWelcomeEmailProbe:
        """Create a new probe with observation context bound."""
        return DefaultWelcomeEmailProbe(logger=self._logger, context=context)

    def welcome_email_sent(self, email: str, course_id: str | None) -> None:
        """Record that a welcome email was handed to the channels."""
        self._logger.info(
            "welcome_email_sent",
            email=email,
            course_id=course_id,
            **self._get_context_kwargs(),
        )

    def welcome_email_failed(self, email: str, error: Exception) -> None:
        """Record that a welcome email could not be sent."""
        self._logger.error(
            "welcome_email_failed",
            email=email,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
