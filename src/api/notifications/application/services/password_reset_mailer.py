"""Delivers password reset links as email notifications."""

from __future__ import annotations

import asyncio
from typing import Any

from notifications.application.dispatcher import NotificationDispatcher
from notifications.application.notifications import ResetPasswordNotification
from notifications.ports.notifications import ResolvesFrontendUrl


class PasswordResetMailer:
    """Sends ``ResetPasswordNotification`` to users who asked for a reset.

    Links point to the frontend resolved for the current request. Delivery
    runs in a worker thread because channels make blocking HTTP calls.
    """

    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        frontend_url: ResolvesFrontendUrl,
    ):
        self._dispatcher = dispatcher
        self._frontend_url = frontend_url

    async def send_password_reset(self, user: Any, token: str) -> None:
        """Send the reset link carrying ``token`` to the user.

        Raises:
            NotificationDeliveryError: If a channel could not reach its provider
        """
        notification = ResetPasswordNotification(
            token=token, frontend_url=await self._frontend_url.resolve()
        )
        await asyncio.to_thread(self._dispatcher.send, user, notification)
