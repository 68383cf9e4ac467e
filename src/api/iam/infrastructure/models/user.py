"""SQLAlchemy ORM model for the users table.

Only the columns needed for authentication and activity checks are mapped.
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, SoftDeleteFlagsMixin, TimestampMixin


class UserModel(Base, TimestampMixin, SoftDeleteFlagsMixin):
    """ORM model for users table.

    Note: id is a UUID stored as a string. Users belong to one tenant;
    rows without tenant_id are central (landlord) accounts.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("tenant_id", "email"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    tenant_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    ativo: Mapped[str | None] = mapped_column(String(1), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(id={self.id}, email={self.email})>"
