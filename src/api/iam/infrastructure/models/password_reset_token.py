"""SQLAlchemy ORM model for the password_reset_tokens table."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class PasswordResetTokenModel(Base):
    """ORM model for password_reset_tokens table.

    One pending token per email and tenant; ``token`` holds a bcrypt hash.
    """

    __tablename__ = "password_reset_tokens"
    __table_args__ = (UniqueConstraint("tenant_id", "email"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), insert_default=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PasswordResetTokenModel(email={self.email})>"
