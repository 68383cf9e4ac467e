"""AccessToken aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from iam.domain.value_objects import AccessTokenId, UserId


@dataclass
class AccessToken:
    """Personal access token issued to a user.

    Only the SHA-256 digest of the token secret is stored. The plaintext
    form handed to clients is ``"<id>|<secret>"``.

    Business rules:
    - A token with no expiry never expires
    - Expired tokens are invalid
    """

    id: AccessTokenId | None
    user_id: UserId
    name: str
    token_hash: str
    abilities: list[str] = field(default_factory=lambda: ["*"])
    expires_at: datetime | None = None
    last_used_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        name: str,
        token_hash: str,
        expires_at: datetime | None = None,
    ) -> AccessToken:
        """Factory method for a new, not yet persisted token.

        Args:
            user_id: Owner of the token
            name: Descriptive name (e.g. the client device)
            token_hash: SHA-256 hex digest of the secret
            expires_at: Optional expiration datetime

        Returns:
            A new AccessToken without an id
        """
        return cls(
            id=None,
            user_id=user_id,
            name=name,
            token_hash=token_hash,
            expires_at=expires_at,
            created_at=datetime.now(UTC),
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the token has expired."""
        if self.expires_at is None:
            return False

        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            # Naive timestamps are stored in UTC
            expires_at = expires_at.replace(tzinfo=UTC)
        return (now or datetime.now(UTC)) >= expires_at
