"""Shared helpers for email notifications."""

from __future__ import annotations

from typing import Any

BREVO_CHANNEL = "brevo"


def display_name(notifiable: Any) -> str:
    """Name used in greetings, empty when the notifiable has none."""
    return str(getattr(notifiable, "name", None) or "")


class BrevoNotification:
    """Base class for notifications delivered only through Brevo."""

    def via(self, notifiable: Any) -> list[str]:
        """Deliver through the Brevo channel."""
        return [BREVO_CHANNEL]
