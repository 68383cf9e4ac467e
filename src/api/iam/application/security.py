"""Security utilities for personal access tokens and passwords.

Token secrets are random strings stored as SHA-256 digests, so existing
tokens stay valid when they were issued by the legacy backend. Passwords
are verified against bcrypt hashes.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass

import bcrypt

from iam.ports.exceptions import MalformedAccessTokenError

TOKEN_SECRET_LENGTH = 40


def generate_token_secret() -> str:
    """Generate a random alphanumeric token secret."""
    alphabet = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    return "".join(secrets.choice(alphabet) for _ in range(TOKEN_SECRET_LENGTH))


def hash_token_secret(secret: str) -> str:
    """Hash a token secret with SHA-256.

    Args:
        secret: The plaintext secret (without the ``<id>|`` prefix)

    Returns:
        Lower-case hex digest
    """
    return hashlib.sha256(secret.encode()).hexdigest()


def verify_token_secret(secret: str, token_hash: str) -> bool:
    """Check a plaintext secret against a stored digest in constant time."""
    return hmac.compare_digest(hash_token_secret(secret), token_hash)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Verify a password against a bcrypt hash.

    Hashes produced by other bcrypt implementations (``$2y$`` prefix) are
    accepted.

    Args:
        password: The plaintext password
        password_hash: The stored bcrypt hash

    Returns:
        True if the password matches, False otherwise
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Not a bcrypt hash
        return False


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


@dataclass(frozen=True)
class PlaintextToken:
    """A bearer token as presented by a client.

    Attributes:
        token_id: Database id when the ``"<id>|<secret>"`` form is used
        secret: The secret part
    """

    token_id: int | None
    secret: str

    @classmethod
    def parse(cls, raw: str) -> PlaintextToken:
        """Parse ``"<id>|<secret>"`` or a bare ``"<secret>"``.

        Raises:
            MalformedAccessTokenError: If the id is not numeric or the
                secret is empty
        """
        if "|" not in raw:
            if not raw:
                raise MalformedAccessTokenError("Empty access token")
            return cls(token_id=None, secret=raw)

        id_part, secret = raw.split("|", 1)
        if not id_part.isdigit() or not secret:
            raise MalformedAccessTokenError("Malformed access token")
        return cls(token_id=int(id_part), secret=secret)

    def __str__(self) -> str:
        """Return the client-facing form."""
        if self.token_id is None:
            return self.secret
        return f"{self.token_id}|{self.secret}"
