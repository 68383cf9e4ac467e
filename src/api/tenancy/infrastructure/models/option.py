"""SQLAlchemy ORM model for the per-tenant options table.

Options are key/value settings edited from the administration panel. The
key lives in the ``url`` column.
"""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, SoftDeleteFlagsMixin, TimestampMixin


class OptionModel(Base, TimestampMixin, SoftDeleteFlagsMixin):
    """ORM model for the options table."""

    __tablename__ = "options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True
    )
    token: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)
    ativo: Mapped[str | None] = mapped_column(String(1), nullable=True)
    obs: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<OptionModel(url={self.url}, tenant_id={self.tenant_id})>"
