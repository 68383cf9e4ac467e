"""Welcome notification sent after enrollment."""

from __future__ import annotations

from html import escape
from typing import Any

from notifications.application.notifications.base import (
    BrevoNotification,
    display_name,
)
from notifications.domain.value_objects import BrevoPayload


class WelcomeNotification(BrevoNotification):
    """Welcomes a newly enrolled student and links to the login page.

    Args:
        course_id: Enrolled course identifier
        frontend_url: Tenant frontend the login link points to
        app_name: Application name shown in the subject
        course_slug: Course slug, if known
        course_name: Course name shown in the body, if known
    """

    def __init__(
        self,
        course_id: str | int,
        frontend_url: str,
        app_name: str,
        course_slug: str = "",
        course_name: str = "",
    ):
        self.course_id = course_id
        self.frontend_url = frontend_url.rstrip("/")
        self.app_name = app_name
        self.course_slug = course_slug
        self.course_name = course_name

    @property
    def login_url(self) -> str:
        return f"{self.frontend_url}/login"

    def to_brevo(self, notifiable: Any) -> BrevoPayload:
        """Render the welcome message for a notifiable."""
        name = escape(display_name(notifiable))
        app_name = escape(self.app_name)
        course_line = ""
        if self.course_name:
            course_line = (
                "<p>Sua matrícula no curso "
                f"<strong>{escape(self.course_name)}</strong> foi confirmada.</p>"
            )
        html = (
            f"<p>Olá {name},</p>"
            f"<p>Seja bem-vindo(a) ao {app_name}!</p>"
            f"{course_line}"
            "<p>Acesse a plataforma para começar seus estudos:</p>"
            f'<p><a href="{escape(self.login_url)}">Acessar plataforma</a></p>'
            f"<p>Atenciosamente,<br/>Equipe {app_name}</p>"
        )
        return {"subject": f"Boas-vindas ao {self.app_name}", "htmlContent": html}
