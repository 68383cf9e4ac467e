"""Unit tests for the welcome email service and route."""

from unittest.mock import create_autospec

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from notifications.application.dispatcher import NotificationDispatcher
from notifications.application.notifications import WelcomeEmailNotification
from notifications.application.observability import WelcomeEmailProbe
from notifications.application.services import WelcomeEmailService
from notifications.dependencies import get_welcome_email_service
from notifications.domain.value_objects import DeliveryResult, NotificationRecipient
from notifications.ports.exceptions import NotificationDeliveryError
from notifications.presentation import routes


@pytest.fixture
def mock_dispatcher():
    """Create mock dispatcher reporting one success."""
    dispatcher = create_autospec(NotificationDispatcher, instance=True)
    dispatcher.send.return_value = [DeliveryResult(status=201, message_id="m")]
    return dispatcher


@pytest.fixture
def mock_probe():
    """Create mock welcome email probe."""
    return create_autospec(WelcomeEmailProbe, instance=True)


@pytest.fixture
def service(mock_dispatcher, mock_probe):
    """Create WelcomeEmailService with mock dependencies."""
    return WelcomeEmailService(dispatcher=mock_dispatcher, probe=mock_probe)


class TestWelcomeEmailService:
    """Tests for send_welcome."""

    def test_sends_to_ad_hoc_recipient(self, service, mock_dispatcher, mock_probe):
        """The form data becomes a recipient and a notification."""
        results = service.send_welcome(
            email="ana@example.com", name="Ana", course_title="Python", course_id=3
        )

        assert results == [DeliveryResult(status=201, message_id="m")]
        recipient, notification = mock_dispatcher.send.call_args.args
        assert recipient == NotificationRecipient("ana@example.com", "Ana")
        assert isinstance(notification, WelcomeEmailNotification)
        assert notification.course_title == "Python"
        assert notification.course_id == 3
        mock_probe.welcome_email_sent.assert_called_once_with(
            email="ana@example.com", course_id="3"
        )

    def test_defaults_course_title(self, service, mock_dispatcher):
        """Without a course title the generic one is used."""
        service.send_welcome(email="ana@example.com", name="Ana")

        notification = mock_dispatcher.send.call_args.args[1]
        assert notification.course_title == "seu curso"

    def test_failure_is_logged_and_raised(self, service, mock_dispatcher, mock_probe):
        """Delivery errors are logged and propagated."""
        error = NotificationDeliveryError("down", channel="brevo")
        mock_dispatcher.send.side_effect = error

        with pytest.raises(NotificationDeliveryError):
            service.send_welcome(email="ana@example.com", name="Ana")

        mock_probe.welcome_email_failed.assert_called_once_with(
            email="ana@example.com", error=error
        )


@pytest.fixture
def client(service):
    """Test client with the notification routes."""
    app = FastAPI()
    app.include_router(routes.router)
    app.dependency_overrides[get_welcome_email_service] = lambda: service
    return TestClient(app)


class TestSendWelcomeEmailRoute:
    """Tests for POST /api/v1/emails/welcome."""

    def test_success(self, client):
        """Provider results are returned in data."""
        response = client.post(
            "/api/v1/emails/welcome",
            json={"email": "ana@example.com", "name": "Ana", "course_title": "Python"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Welcome email sent",
            "data": [{"status": 201, "messageId": "m"}],
        }

    def test_skipped_delivery_is_null(self, client, mock_dispatcher):
        """Skipped deliveries appear as null."""
        mock_dispatcher.send.return_value = [None]

        response = client.post(
            "/api/v1/emails/welcome", json={"email": "ana@example.com", "name": "Ana"}
        )

        assert response.json()["data"] == [None]

    def test_provider_rejection_is_reported(self, client, mock_dispatcher):
        """A provider rejection is data, not an error."""
        mock_dispatcher.send.return_value = [
            DeliveryResult(status=400, error={"code": "invalid_parameter"})
        ]

        response = client.post(
            "/api/v1/emails/welcome", json={"email": "ana@example.com", "name": "Ana"}
        )

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"status": 400, "error": {"code": "invalid_parameter"}}
        ]

    def test_delivery_error_is_500(self, client, mock_dispatcher):
        """Exceptions become a 500 with the error message."""
        mock_dispatcher.send.side_effect = NotificationDeliveryError(
            "Could not reach Brevo", channel="brevo"
        )

        response = client.post(
            "/api/v1/emails/welcome", json={"email": "ana@example.com", "name": "Ana"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to send welcome email",
            "error": "Could not reach Brevo",
        }

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "not-an-email", "name": "Ana"},
            {"email": "ana@example.com", "name": "A"},
            {"name": "Ana"},
        ],
    )
    def test_validation(self, client, body):
        """Invalid input is rejected before sending."""
        response = client.post("/api/v1/emails/welcome", json=body)

        assert response.status_code == 422
