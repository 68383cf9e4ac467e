"""Protocol for authentication observability.

Defines the interface for domain probes that capture bearer token
authentication and login events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def user_authenticated(self, user_id: str, token_id: str) -> None:
        """Record successful authentication via personal access token."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record authentication failure.

        Args:
            reason: Failure reason (malformed, unknown_token, expired,
                owner_not_found, tenant_mismatch)
        """
        ...

    def login_succeeded(self, user_id: str, token_id: str) -> None:
        """Record that a user logged in and received a token."""
        ...

    def login_failed(self, reason: str) -> None:
        """Record a rejected login attempt."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def user_authenticated(self, user_id: str, token_id: str) -> None:
        """Record successful authentication via personal access token."""
        self._logger.debug(
            "user_authenticated",
            user_id=user_id,
            token_id=token_id,
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        """Record authentication failure."""
        self._logger.info(
            "authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def login_succeeded(self, user_id: str, token_id: str) -> None:
        """Record that a user logged in and received a token."""
        self._logger.info(
            "login_succeeded",
            user_id=user_id,
            token_id=token_id,
            **self._get_context_kwargs(),
        )

    def login_failed(self, reason: str) -> None:
        """Record a rejected login attempt."""
        self._logger.info(
            "login_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )
