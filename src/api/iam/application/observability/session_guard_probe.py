"""Domain probe for the active-session guard.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SessionGuardProbe(Protocol):
    """Domain probe for active-session checks."""

    def unauthenticated_request_rejected(self) -> None:
        """Record that a protected route was called without a principal."""
        ...

    def inactive_user_rejected(self, user_id: str) -> None:
        """Record that an inactive user was turned away."""
        ...

    def access_token_revoked(self, user_id: str, token_id: str) -> None:
        """Record that the token used by an inactive user was deleted."""
        ...

    def all_access_tokens_revoked(self, user_id: str, count: int) -> None:
        """Record that every token of an inactive user was deleted."""
        ...

    def token_revocation_failed(self, user_id: str, error: Exception) -> None:
        """Record that revoking an inactive user's tokens failed."""
        ...

    def with_context(self, context: ObservationContext) -> SessionGuardProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSessionGuardProbe:
    """Default implementation of SessionGuardProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSessionGuardProbe:
        """Create a new probe with observation context bound."""
        return DefaultSessionGuardProbe(logger=self._logger, context=context)

    def unauthenticated_request_rejected(self) -> None:
        """Record that a protected route was called without a principal."""
        self._logger.info(
            "unauthenticated_request_rejected",
            **self._get_context_kwargs(),
        )

    def inactive_user_rejected(self, user_id: str) -> None:
        """Record that an inactive user was turned away."""
        self._logger.info(
            "inactive_user_rejected",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def access_token_revoked(self, user_id: str, token_id: str) -> None:
        """Record that the token used by an inactive user was deleted."""
        self._logger.info(
            "access_token_revoked",
            user_id=user_id,
            token_id=token_id,
            **self._get_context_kwargs(),
        )

    def all_access_tokens_revoked(self, user_id: str, count: int) -> None:
        """Record that every token of an inactive user was deleted."""
        self._logger.info(
            "all_access_tokens_revoked",
            user_id=user_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def token_revocation_failed(self, user_id: str, error: Exception) -> None:
        """Record that revoking an inactive user's tokens failed."""
        self._logger.warning(
            "token_revocation_failed",
            user_id=user_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
