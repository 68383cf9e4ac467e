"""FastAPI dependencies for the Notifications context."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from infrastructure.settings import get_brevo_settings
from notifications.application.dispatcher import NotificationDispatcher
from notifications.application.notifications import BREVO_CHANNEL
from notifications.application.services import (
    PasswordResetMailer,
    WelcomeEmailService,
)
from notifications.infrastructure.brevo_channel import BrevoChannel
from notifications.ports.notifications import ResolvesFrontendUrl


@lru_cache
def get_brevo_channel() -> BrevoChannel:
    """Get the cached Brevo channel."""
    return BrevoChannel(settings=get_brevo_settings())


def get_notification_dispatcher(
    brevo: Annotated[BrevoChannel, Depends(get_brevo_channel)],
) -> NotificationDispatcher:
    """Get a dispatcher with the configured channels."""
    return NotificationDispatcher(channels={BREVO_CHANNEL: brevo})


def get_welcome_email_service(
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> WelcomeEmailService:
    """Get WelcomeEmailService instance."""
    return WelcomeEmailService(dispatcher=dispatcher)


def build_password_reset_mailer(
    frontend_url: ResolvesFrontendUrl,
) -> PasswordResetMailer:
    """Create the mailer for password reset links.

    Args:
        frontend_url: Source of the frontend base URL used in the links

    Returns:
        A PasswordResetMailer delivering through the configured channels
    """
    return PasswordResetMailer(
        dispatcher=get_notification_dispatcher(get_brevo_channel()),
        frontend_url=frontend_url,
    )
