"""User aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass

from iam.domain.value_objects import UserId, is_active_principal


@dataclass(frozen=True)
class User:
    """User aggregate representing a person who can call the API.

    Activity is carried by two legacy columns, ``status`` and ``ativo``;
    see ``is_active_principal`` for the rule combining them.
    """

    id: UserId
    name: str
    tenant_id: str | None = None
    email: str | None = None
    status: str | None = None
    ativo: str | None = None
    password_hash: str | None = None

    @property
    def is_active(self) -> bool:
        """Whether the user may keep using the API."""
        return is_active_principal(self.status, self.ativo)

    def route_notification_for_mail(self) -> str | None:
        """Address used when the user is the target of an email notification."""
        return self.email

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.id.value})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
