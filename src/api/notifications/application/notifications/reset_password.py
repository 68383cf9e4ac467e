"""Password reset notification."""

from __future__ import annotations

from html import escape
from typing import Any
from urllib.parse import urlencode

from notifications.application.notifications.base import (
    BrevoNotification,
    display_name,
)
from notifications.domain.value_objects import BrevoPayload
from notifications.ports.notifications import mail_route

RESET_PASSWORD_SUBJECT = "Redefinição de Senha"


class ResetPasswordNotification(BrevoNotification):
    """Sends a link to the frontend's password reset page.

    Args:
        token: Password reset token
        frontend_url: Tenant frontend hosting the reset page
    """

    def __init__(self, token: str, frontend_url: str):
        self.token = token
        self.frontend_url = frontend_url.rstrip("/")

    def reset_url(self, notifiable: Any) -> str:
        """Link to the reset page, carrying the token and the account email."""
        query = urlencode({"email": mail_route(notifiable) or ""})
        return f"{self.frontend_url}/reset-password/{self.token}?{query}"

    def to_brevo(self, notifiable: Any) -> BrevoPayload:
        """Render the reset message for a notifiable."""
        url = escape(self.reset_url(notifiable))
        html = (
            f"<p>Olá {escape(display_name(notifiable))},</p>"
            "<p>Você está recebendo este e-mail porque recebemos uma solicitação "
            "de redefinição de senha para sua conta.</p>"
            f'<p><a href="{url}">Redefinir Senha</a></p>'
            "<p>Se você não solicitou a redefinição de senha, "
            "nenhuma ação adicional é necessária.</p>"
        )
        return {"subject": RESET_PASSWORD_SUBJECT, "htmlContent": html}
