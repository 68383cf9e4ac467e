"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass

# Legacy activity markers: ``status == "actived"`` or ``ativo == "s"``
ACTIVE_STATUS = "actived"
ACTIVE_FLAG = "s"


def is_active_principal(status: str | None, ativo: str | None) -> bool:
    """Decide whether a user may keep using the API.

    Either marker is sufficient; both are compared case-insensitively.
    Missing values never count as active.

    Args:
        status: Free-text status column
        ativo: Single-character legacy flag

    Returns:
        True if the user is active
    """
    if isinstance(status, str) and status.lower() == ACTIVE_STATUS:
        return True
    if isinstance(ativo, str) and ativo.lower() == ACTIVE_FLAG:
        return True
    return False


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate (UUID string)."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class AccessTokenId:
    """Identifier for an AccessToken aggregate (database sequence)."""

    value: int

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
