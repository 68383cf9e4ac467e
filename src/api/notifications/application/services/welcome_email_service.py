"""Sends welcome emails to prospective students."""

from __future__ import annotations

from notifications.application.dispatcher import NotificationDispatcher
from notifications.application.notifications import WelcomeEmailNotification
from notifications.application.notifications.welcome_email import (
    DEFAULT_COURSE_TITLE,
)
from notifications.application.observability import (
    DefaultWelcomeEmailProbe,
    WelcomeEmailProbe,
)
from notifications.domain.value_objects import DeliveryResult, NotificationRecipient


class WelcomeEmailService:
    """Application service for the public welcome email form."""

    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        probe: WelcomeEmailProbe | None = None,
    ):
        self._dispatcher = dispatcher
        self._probe = probe or DefaultWelcomeEmailProbe()

    def send_welcome(
        self,
        email: str,
        name: str,
        course_title: str | None = None,
        course_id: str | int | None = None,
    ) -> list[DeliveryResult | None]:
        """Send the welcome email to an ad-hoc recipient.

        Args:
            email: Recipient address
            name: Recipient name
            course_title: Course the recipient is interested in
            course_id: Optional course identifier

        Returns:
            Delivery results from the channels

        Raises:
            Exception: Any channel failure, after it is logged
        """
        recipient = NotificationRecipient(email=email, name=name)
        notification = WelcomeEmailNotification(
            recipient_name=name,
            course_title=course_title or DEFAULT_COURSE_TITLE,
            course_id=course_id,
        )

        try:
            results = self._dispatcher.send(recipient, notification)
        except Exception as e:
            self._probe.welcome_email_failed(email=email, error=e)
            raise

        self._probe.welcome_email_sent(
            email=email,
            course_id=str(course_id) if course_id is not None else None,
        )
        return results
