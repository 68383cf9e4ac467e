"""Value objects for the Notifications domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict


class BrevoContact(TypedDict, total=False):
    """An address entry of a Brevo payload."""

    email: str
    name: str


class BrevoPayload(TypedDict, total=False):
    """Body of ``POST /smtp/email``.

    Notifications render ``subject`` and ``htmlContent`` (optionally
    ``textContent``, ``sender`` and ``to``); the channel fills in the rest.
    """

    sender: BrevoContact
    to: list[BrevoContact]
    subject: str
    htmlContent: str
    textContent: str


@dataclass(frozen=True)
class NotificationRecipient:
    """An ad-hoc notifiable addressed only by email.

    Used when the target of a notification is not a stored user, e.g. a
    prospective student who filled a public form.
    """

    email: str
    name: str | None = None

    def route_notification_for_mail(self) -> str:
        """Address used by email channels."""
        return self.email


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of one delivery attempt as reported by the provider.

    Attributes:
        status: Provider HTTP status code
        message_id: Provider message id on success
        error: Provider response body on failure
    """

    status: int
    message_id: str | None = None
    error: Any = None

    @property
    def succeeded(self) -> bool:
        """Whether the provider accepted the message."""
        return 200 <= self.status < 300

    def as_dict(self) -> dict[str, Any]:
        """Provider-style record: ``{status, messageId}`` or ``{status, error}``."""
        if self.succeeded:
            return {"status": self.status, "messageId": self.message_id}
        return {"status": self.status, "error": self.error}
