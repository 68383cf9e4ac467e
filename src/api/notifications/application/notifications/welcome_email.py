"""Welcome email sent to prospective students of a course."""

from __future__ import annotations

from html import escape
from typing import Any

from notifications.application.notifications.base import BrevoNotification
from notifications.domain.value_objects import BrevoPayload

DEFAULT_COURSE_TITLE = "seu curso"


class WelcomeEmailNotification(BrevoNotification):
    """Thanks a prospective student for their interest in a course.

    Args:
        recipient_name: Name used in the greeting
        course_title: Course shown in the subject and body
        course_id: Optional course identifier appended to the body
    """

    def __init__(
        self,
        recipient_name: str,
        course_title: str = DEFAULT_COURSE_TITLE,
        course_id: str | int | None = None,
    ):
        self.recipient_name = recipient_name
        self.course_title = course_title
        self.course_id = course_id

    @property
    def subject(self) -> str:
        return f"Bem-vindo(a) ao curso {self.course_title}"

    def to_brevo(self, notifiable: Any) -> BrevoPayload:
        """Render the subject with HTML and plain text bodies."""
        return {
            "subject": self.subject,
            "htmlContent": self._html(),
            "textContent": self._text(),
        }

    def _html(self) -> str:
        name = escape(self.recipient_name)
        title = escape(self.course_title)
        course_line = ""
        if self.course_id:
            course_line = (
                f"<p><small>ID do curso: {escape(str(self.course_id))}</small></p>"
            )
        return (
            f"<p>Olá {name},</p>"
            f"<p>Obrigado pelo seu interesse no curso <strong>{title}</strong>.</p>"
            "<p>Nossa equipe entrará em contato em breve com mais detalhes "
            "e próximos passos.</p>"
            f"{course_line}"
            "<p>Atenciosamente,<br/>Equipe Incluir &amp; Educar</p>"
        )

    def _text(self) -> str:
        lines = [
            f"Olá {self.recipient_name},",
            "",
            f"Obrigado pelo seu interesse no curso {self.course_title}.",
            "Nossa equipe entrará em contato em breve com mais detalhes "
            "e próximos passos.",
        ]
        if self.course_id:
            lines.append(f"ID do curso: {self.course_id}")
        lines += ["", "Atenciosamente,", "Equipe Incluir & Educar"]
        return "\n".join(lines)
