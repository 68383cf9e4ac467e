"""Unit tests for IAM domain objects."""

from datetime import UTC, datetime, timedelta

import pytest

from iam.domain.aggregates import AccessToken, User
from iam.domain.value_objects import AccessTokenId, UserId, is_active_principal


class TestIsActivePrincipal:
    """Tests for the activity rule."""

    @pytest.mark.parametrize(
        ("status", "ativo", "expected"),
        [
            ("actived", None, True),
            ("ACTIVED", "n", True),
            (None, "s", True),
            ("inactived", "S", True),
            ("inactived", "n", False),
            ("pre_registred", None, False),
            (None, None, False),
            ("", "", False),
        ],
    )
    def test_either_marker_is_sufficient(self, status, ativo, expected):
        """status == actived or ativo == s, case-insensitively."""
        assert is_active_principal(status, ativo) is expected


class TestUser:
    """Tests for the User aggregate."""

    def test_is_active(self):
        """Activity follows the legacy markers."""
        assert User(id=UserId("u1"), name="Ana", ativo="s").is_active is True
        assert User(id=UserId("u1"), name="Ana", ativo="n").is_active is False

    def test_routes_mail_to_email(self):
        """Users are addressed by their email."""
        user = User(id=UserId("u1"), name="Ana", email="ana@example.com")
        assert user.route_notification_for_mail() == "ana@example.com"

    def test_equality_by_id(self):
        """Users with the same id are equal."""
        assert User(id=UserId("u1"), name="Ana") == User(id=UserId("u1"), name="B")


class TestAccessToken:
    """Tests for the AccessToken aggregate."""

    def test_create_has_no_id(self):
        """New tokens are not persisted yet."""
        token = AccessToken.create(user_id=UserId("u1"), name="api", token_hash="h")

        assert token.id is None
        assert token.abilities == ["*"]
        assert token.created_at is not None

    def test_without_expiry_never_expires(self):
        """A token with no expiry stays valid."""
        token = AccessToken(
            id=AccessTokenId(1), user_id=UserId("u1"), name="api", token_hash="h"
        )
        assert token.is_expired() is False

    def test_past_expiry_is_expired(self):
        """A token past its expiry is invalid."""
        token = AccessToken(
            id=AccessTokenId(1),
            user_id=UserId("u1"),
            name="api",
            token_hash="h",
            expires_at=datetime.now(UTC) - timedelta(minutes=1),
        )
        assert token.is_expired() is True

    def test_naive_expiry_is_utc(self):
        """Naive database timestamps are read as UTC."""
        now = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        token = AccessToken(
            id=AccessTokenId(1),
            user_id=UserId("u1"),
            name="api",
            token_hash="h",
            expires_at=datetime(2025, 1, 1, 13, 0),
        )

        assert token.is_expired(now=now) is False
        assert token.is_expired(now=now + timedelta(hours=1)) is True
