"""Domain probe for password reset requests.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PasswordResetProbe(Protocol):
    """Domain probe for password reset requests."""

    def reset_requested_for_unknown_email(self) -> None:
        """Record a reset request for an email with no account."""
        ...

    def reset_link_sent(self, user_id: str) -> None:
        """Record that a reset link was delivered."""
        ...

    def reset_link_failed(self, user_id: str, error: Exception) -> None:
        """Record that the reset link could not be delivered."""
        ...

    def with_context(self, context: ObservationContext) -> PasswordResetProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPasswordResetProbe:
    """Default implementation of PasswordResetProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultPasswordResetProbe:
        """Create a new probe with observation context bound."""
        return DefaultPasswordResetProbe(logger=self._logger, context=context)

    def reset_requested_for_unknown_email(self) -> None:
        """Record a reset request for an email with no account."""
        self._logger.info(
            "password_reset_requested_for_unknown_email",
            **self._get_context_kwargs(),
        )

    def reset_link_sent(self, user_id: str) -> None:
        """Record that a reset link was delivered."""
        self._logger.info(
            "password_reset_link_sent",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def reset_link_failed(self, user_id: str, error: Exception) -> None:
        """Record that the reset link could not be delivered."""
        self._logger.error(
            "password_reset_link_failed",
            user_id=user_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
