"""SQLAlchemy ORM model for the personal_access_tokens table.

Tokens are polymorphic on their owner (``tokenable_type``/``tokenable_id``);
this service only issues and accepts user tokens.
"""

from datetime import datetime

from sqlalchemy import JSON, BigInteger, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin

USER_TOKENABLE_TYPE = "App\\Models\\User"


class PersonalAccessTokenModel(Base, TimestampMixin):
    """ORM model for personal_access_tokens table.

    ``token`` holds the SHA-256 hex digest of the secret, never the secret.
    """

    __tablename__ = "personal_access_tokens"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    tokenable_type: Mapped[str] = mapped_column(String(255), nullable=False)
    tokenable_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    abilities: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<PersonalAccessTokenModel(id={self.id}, "
            f"tokenable_id={self.tokenable_id})>"
        )
