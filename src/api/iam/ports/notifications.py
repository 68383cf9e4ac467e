"""Outbound notification ports for the IAM context.

IAM decides when a user must be notified; the delivery mechanism is
provided by the application at startup.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import User


@runtime_checkable
class PasswordResetNotifier(Protocol):
    """Delivers password reset links to users."""

    async def send_password_reset(self, user: User, token: str) -> None:
        """Send the reset link carrying ``token`` to the user."""
        ...
