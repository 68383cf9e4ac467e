"""Unit tests for LoginService."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from iam.application.observability import AuthenticationProbe
from iam.application.security import (
    PlaintextToken,
    hash_password,
    verify_token_secret,
)
from iam.application.services import LoginService
from iam.domain.aggregates import AccessToken, User
from iam.domain.value_objects import AccessTokenId, UserId
from iam.ports.exceptions import InactiveUserError, InvalidCredentialsError
from iam.ports.repositories import IAccessTokenRepository, IUserRepository

PASSWORD = "correct horse"


@pytest.fixture(scope="module")
def password_hash():
    """bcrypt hash of the test password."""
    return hash_password(PASSWORD)


@pytest.fixture
def user(password_hash):
    """An active user with a password."""
    return User(
        id=UserId("u1"),
        name="Ana",
        email="ana@example.com",
        status="actived",
        password_hash=password_hash,
    )


@pytest.fixture
def mock_session():
    """Create mock async session."""
    return AsyncMock()


@pytest.fixture
def mock_user_repository(user):
    """User repository returning the user."""
    repository = create_autospec(IUserRepository, instance=True)
    repository.get_by_email = AsyncMock(return_value=user)
    return repository


@pytest.fixture
def mock_token_repository():
    """Token repository assigning id 12 on add."""

    async def add(token: AccessToken) -> AccessToken:
        token.id = AccessTokenId(12)
        return token

    repository = create_autospec(IAccessTokenRepository, instance=True)
    repository.add = AsyncMock(side_effect=add)
    return repository


@pytest.fixture
def mock_probe():
    """Create mock authentication probe."""
    return create_autospec(AuthenticationProbe, instance=True)


@pytest.fixture
def service(mock_session, mock_user_repository, mock_token_repository, mock_probe):
    """Create LoginService with mock dependencies."""
    return LoginService(
        session=mock_session,
        user_repository=mock_user_repository,
        token_repository=mock_token_repository,
        probe=mock_probe,
    )


class TestLogin:
    """Tests for login."""

    @pytest.mark.asyncio
    async def test_issues_token(self, service, user, mock_session, mock_probe):
        """A valid login issues an id|secret token whose digest is stored."""
        issued = await service.login("ana@example.com", PASSWORD, device_name="web")

        plaintext = PlaintextToken.parse(issued.plaintext)
        assert plaintext.token_id == 12
        assert verify_token_secret(plaintext.secret, issued.access_token.token_hash)
        assert issued.access_token.name == "web"
        assert issued.user == user
        mock_session.commit.assert_awaited_once()
        mock_probe.login_succeeded.assert_called_once_with(user_id="u1", token_id="12")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service, mock_token_repository, mock_probe):
        """Wrong passwords are rejected without issuing a token."""
        with pytest.raises(InvalidCredentialsError):
            await service.login("ana@example.com", "wrong")

        mock_token_repository.add.assert_not_awaited()
        mock_probe.login_failed.assert_called_once_with(reason="invalid_credentials")

    @pytest.mark.asyncio
    async def test_unknown_email(self, service, mock_user_repository):
        """Unknown emails get the same error as wrong passwords."""
        mock_user_repository.get_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await service.login("nobody@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_inactive_user(
        self, service, mock_user_repository, mock_token_repository, password_hash
    ):
        """Inactive users cannot log in."""
        mock_user_repository.get_by_email.return_value = User(
            id=UserId("u1"),
            name="Ana",
            status="inactived",
            ativo="n",
            password_hash=password_hash,
        )

        with pytest.raises(InactiveUserError):
            await service.login("ana@example.com", PASSWORD)

        mock_token_repository.add.assert_not_awaited()
