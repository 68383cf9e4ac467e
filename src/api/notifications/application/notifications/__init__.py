"""Notifications delivered through the Brevo channel."""

from notifications.application.notifications.base import BREVO_CHANNEL
from notifications.application.notifications.reset_password import (
    ResetPasswordNotification,
)
from notifications.application.notifications.welcome import WelcomeNotification
from notifications.application.notifications.welcome_email import (
    WelcomeEmailNotification,
)

__all__ = [
    "BREVO_CHANNEL",
    "ResetPasswordNotification",
    "WelcomeEmailNotification",
    "WelcomeNotification",
]
