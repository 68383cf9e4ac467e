"""Brevo transactional email channel.

Sends notifications that implement ``to_brevo`` through Brevo's
``POST /smtp/email`` endpoint.
"""

from __future__ import annotations

import re
from typing import Any

import httpx

from infrastructure.settings import BrevoSettings
from notifications.domain.value_objects import BrevoContact, DeliveryResult
from notifications.infrastructure.observability import (
    BrevoChannelProbe,
    DefaultBrevoChannelProbe,
)
from notifications.ports.exceptions import NotificationDeliveryError
from notifications.ports.notifications import SupportsBrevo, mail_route

PREVIEW_LIMIT = 180
SEND_EMAIL_PATH = "/smtp/email"

_TAG_RE = re.compile(r"<[^>]*>")


def html_preview(html: str, limit: int = PREVIEW_LIMIT) -> str:
    """Strip tags and truncate, appending "..." only when text was cut."""
    text = _TAG_RE.sub("", html)
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


class BrevoChannel:
    """Delivers notifications as Brevo transactional emails.

    Delivery is skipped (returns None) when no API key is configured or the
    notification cannot render a Brevo payload. Provider rejections are
    returned as a failed DeliveryResult; only transport failures raise.
    """

    def __init__(
        self,
        settings: BrevoSettings,
        client: httpx.Client | None = None,
        probe: BrevoChannelProbe | None = None,
    ):
        """Initialize the channel.

        Args:
            settings: Brevo credentials, base URL and default sender
            client: HTTP client; module-level httpx is used when None
            probe: Optional domain probe for observability
        """
        self._settings = settings
        self._client = client
        self._probe = probe or DefaultBrevoChannelProbe()

    def send(self, notifiable: Any, notification: Any) -> DeliveryResult | None:
        """Deliver a notification to one notifiable.

        Args:
            notifiable: Object routed by ``route_notification_for_mail`` or ``email``
            notification: Notification implementing ``to_brevo``

        Returns:
            The provider outcome, or None when delivery was skipped

        Raises:
            NotificationDeliveryError: If Brevo could not be reached
        """
        api_key = self._settings.api_key.get_secret_value()
        if not api_key:
            self._probe.api_key_missing()
            return None

        if not isinstance(notification, SupportsBrevo):
            return None

        payload: dict[str, Any] = dict(notification.to_brevo(notifiable))
        if payload.get("sender") is None:
            payload["sender"] = BrevoContact(
                email=self._settings.from_email or "",
                name=self._settings.from_name or "",
            )

        to: list[BrevoContact] = list(payload.get("to") or [])
        email = mail_route(notifiable)
        if email:
            to.append(
                BrevoContact(
                    email=str(email),
                    name=str(getattr(notifiable, "name", None) or ""),
                )
            )
        payload["to"] = to

        recipients = [contact.get("email", "") for contact in to]
        self._probe.delivery_prepared(
            to=recipients,
            subject=payload.get("subject"),
            html_preview=html_preview(str(payload.get("htmlContent") or "")),
        )

        try:
            response = self._post(payload, api_key)
        except httpx.TransportError as e:
            self._probe.transport_failed(to=recipients, error=e)
            raise NotificationDeliveryError(
                f"Could not reach Brevo: {e}", channel="brevo"
            ) from e

        if response.is_success:
            body = _json_or_none(response)
            message_id = body.get("messageId") if isinstance(body, dict) else None
            self._probe.delivery_succeeded(
                to=recipients, status=response.status_code, message_id=message_id
            )
            return DeliveryResult(status=response.status_code, message_id=message_id)

        error = _json_or_none(response)
        if error is None:
            error = response.text
        self._probe.delivery_failed(
            to=recipients, status=response.status_code, error=error
        )
        return DeliveryResult(status=response.status_code, error=error)

    def _post(self, payload: dict[str, Any], api_key: str) -> httpx.Response:
        url = f"{self._settings.api_url}{SEND_EMAIL_PATH}"
        headers = {
            "api-key": api_key,
            "accept": "application/json",
            "content-type": "application/json",
        }
        if self._client is not None:
            return self._client.post(url, json=payload, headers=headers)
        return httpx.post(url, json=payload, headers=headers)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
