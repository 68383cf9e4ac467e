"""Repository port interfaces for IAM bounded context.

These protocols define the contracts for persisting and retrieving
users and their access tokens. Implementations live in the
infrastructure layer.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import AccessToken, User
from iam.domain.value_objects import AccessTokenId, UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Repository interface for User aggregate reads."""

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found or deleted
        """
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by email address (case-insensitive).

        Args:
            email: Email address

        Returns:
            The User aggregate, or None if not found or deleted
        """
        ...


@runtime_checkable
class IAccessTokenRepository(Protocol):
    """Repository interface for AccessToken persistence."""

    async def add(self, token: AccessToken) -> AccessToken:
        """Persist a new token.

        Args:
            token: Token without an id

        Returns:
            The token with its assigned id
        """
        ...

    async def get_by_id(self, token_id: AccessTokenId) -> AccessToken | None:
        """Retrieve a token by ID."""
        ...

    async def get_by_hash(self, token_hash: str) -> AccessToken | None:
        """Retrieve a token by the digest of its secret."""
        ...

    async def delete(self, token_id: AccessTokenId) -> None:
        """Delete one token."""
        ...

    async def delete_all_for_user(self, user_id: UserId) -> int:
        """Delete every token owned by a user.

        Returns:
            Number of deleted tokens
        """
        ...


@runtime_checkable
class IPasswordResetTokenRepository(Protocol):
    """Repository interface for password reset tokens."""

    async def replace(self, email: str, token_hash: str) -> None:
        """Store the reset token for an email, discarding any previous one.

        Args:
            email: Account email the token resets
            token_hash: bcrypt hash of the token
        """
        ...
