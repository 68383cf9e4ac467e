"""Application services for the Notifications context."""

from notifications.application.services.password_reset_mailer import (
    PasswordResetMailer,
)
from notifications.application.services.welcome_email_service import (
    WelcomeEmailService,
)

__all__ = ["PasswordResetMailer", "WelcomeEmailService"]
