"""Unit tests for ActiveSessionGuard."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from iam.application.observability import SessionGuardProbe
from iam.application.services import ActiveSessionGuard
from iam.application.value_objects import AuthenticatedPrincipal
from iam.domain.aggregates import AccessToken, User
from iam.domain.value_objects import AccessTokenId, UserId
from iam.ports.exceptions import InactiveUserError
from iam.ports.repositories import IAccessTokenRepository


@pytest.fixture
def mock_session():
    """Create mock async session."""
    return AsyncMock()


@pytest.fixture
def mock_token_repository():
    """Create mock token repository."""
    repository = create_autospec(IAccessTokenRepository, instance=True)
    repository.delete = AsyncMock()
    repository.delete_all_for_user = AsyncMock(return_value=3)
    return repository


@pytest.fixture
def mock_probe():
    """Create mock session guard probe."""
    return create_autospec(SessionGuardProbe, instance=True)


@pytest.fixture
def guard(mock_session, mock_token_repository, mock_probe):
    """Create ActiveSessionGuard with mock dependencies."""
    return ActiveSessionGuard(
        session=mock_session,
        token_repository=mock_token_repository,
        probe=mock_probe,
    )


@pytest.fixture
def token():
    """The token used for the request."""
    return AccessToken(
        id=AccessTokenId(7), user_id=UserId("u1"), name="api", token_hash="h"
    )


def _user(status=None, ativo=None) -> User:
    return User(id=UserId("u1"), name="Ana", status=status, ativo=ativo)


class TestActiveUser:
    """Active users pass through untouched."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "ativo"), [("actived", None), (None, "s"), ("actived", "n")]
    )
    async def test_returns_user(
        self, guard, token, mock_token_repository, mock_session, status, ativo
    ):
        """Nothing is revoked for active users."""
        user = _user(status, ativo)

        result = await guard.ensure_active(
            AuthenticatedPrincipal(user=user, access_token=token)
        )

        assert result is user
        mock_token_repository.delete.assert_not_awaited()
        mock_token_repository.delete_all_for_user.assert_not_awaited()
        mock_session.commit.assert_not_awaited()


class TestInactiveUser:
    """Inactive users are rejected and lose their credentials."""

    @pytest.mark.asyncio
    async def test_revokes_current_token(
        self, guard, token, mock_token_repository, mock_session, mock_probe
    ):
        """The token used for the request is deleted."""
        principal = AuthenticatedPrincipal(
            user=_user("inactived", "n"), access_token=token
        )

        with pytest.raises(InactiveUserError) as exc_info:
            await guard.ensure_active(principal)

        assert exc_info.value.user_id == "u1"
        mock_token_repository.delete.assert_awaited_once_with(AccessTokenId(7))
        mock_token_repository.delete_all_for_user.assert_not_awaited()
        mock_session.commit.assert_awaited_once()
        mock_probe.inactive_user_rejected.assert_called_once_with(user_id="u1")
        mock_probe.access_token_revoked.assert_called_once_with(
            user_id="u1", token_id="7"
        )

    @pytest.mark.asyncio
    async def test_revokes_all_tokens_without_current_token(
        self, guard, mock_token_repository, mock_session, mock_probe
    ):
        """Without a current token every token of the user is deleted."""
        principal = AuthenticatedPrincipal(user=_user(None, None))

        with pytest.raises(InactiveUserError):
            await guard.ensure_active(principal)

        mock_token_repository.delete_all_for_user.assert_awaited_once_with(
            UserId("u1")
        )
        mock_session.commit.assert_awaited_once()
        mock_probe.all_access_tokens_revoked.assert_called_once_with(
            user_id="u1", count=3
        )

    @pytest.mark.asyncio
    async def test_revocation_failure_still_rejects(
        self, guard, token, mock_token_repository, mock_probe
    ):
        """A failed revocation is logged and the request is rejected anyway."""
        mock_token_repository.delete.side_effect = RuntimeError("db down")
        principal = AuthenticatedPrincipal(
            user=_user("inactived", "n"), access_token=token
        )

        with pytest.raises(InactiveUserError):
            await guard.ensure_active(principal)

        mock_probe.token_revocation_failed.assert_called_once()
        kwargs = mock_probe.token_revocation_failed.call_args.kwargs
        assert kwargs["user_id"] == "u1"
        assert isinstance(kwargs["error"], RuntimeError)


class TestMissingPrincipal:
    """Requests without a principal are rejected."""

    @pytest.mark.asyncio
    async def test_rejects(self, guard, mock_token_repository, mock_probe):
        """No principal, no revocation."""
        with pytest.raises(InactiveUserError) as exc_info:
            await guard.ensure_active(None)

        assert exc_info.value.user_id is None
        mock_token_repository.delete.assert_not_awaited()
        mock_probe.unauthenticated_request_rejected.assert_called_once_with()
