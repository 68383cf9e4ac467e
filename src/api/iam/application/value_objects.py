"""Application-layer value objects for IAM context."""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.aggregates import AccessToken, User


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The user behind the current request and the token they used.

    ``access_token`` is None when the principal was authenticated by a
    mechanism other than a personal access token.
    """

    user: User
    access_token: AccessToken | None = None


@dataclass(frozen=True)
class IssuedToken:
    """Result of a successful login.

    The plaintext token is only available here; it is never persisted.
    """

    user: User
    access_token: AccessToken
    plaintext: str
