"""SQLAlchemy ORM models for the tenants and domains tables.

The tables are provisioned by the tenant administration service; this
service only reads them.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.models import Base, TimestampMixin


class TenantModel(Base, TimestampMixin):
    """ORM model for the tenants table.

    Attributes other than the id are stored in the JSON ``data`` column.
    """

    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    data: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    domains: Mapped[list[DomainModel]] = relationship(
        back_populates="tenant",
        order_by="DomainModel.id",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<TenantModel(id={self.id})>"


class DomainModel(Base, TimestampMixin):
    """ORM model for the domains table (one tenant, many domains)."""

    __tablename__ = "domains"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    domain: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    tenant_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("tenants.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    tenant: Mapped[TenantModel] = relationship(back_populates="domains")

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<DomainModel(domain={self.domain}, tenant_id={self.tenant_id})>"
