"""Domain exceptions for IAM bounded context."""


class InactiveUserError(Exception):
    """Raised when a protected route is reached without an active user.

    Covers both a missing principal and an authenticated but inactive one;
    clients receive the same response for both.
    """

    def __init__(self, user_id: str | None = None):
        super().__init__(
            "Inactive user" if user_id is None else f"Inactive user {user_id}"
        )
        self.user_id = user_id


class InvalidCredentialsError(Exception):
    """Raised when an email/password pair does not match an account."""

    pass


class MalformedAccessTokenError(ValueError):
    """Raised when a bearer token is neither ``"<id>|<secret>"`` nor ``"<secret>"``."""

    pass
