"""SQLAlchemy declarative base and shared model utilities.

This module provides the declarative base class for all SQLAlchemy ORM models
and mixins for the timestamp and legacy soft-delete columns shared by the
application's tables.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String, and_, or_
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement

# Legacy "yes" marker used by single-character flag columns
FLAG_YES = "s"


def _utc_now() -> datetime:
    """Generate UTC timestamp for database defaults.

    Uses a named function instead of lambda for SQLAlchemy 2.0 compatibility.
    """
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    type_annotation_map: dict[type, Any] = {
        dict[str, Any]: JSON,
    }


class TimestampMixin:
    """Mixin providing nullable created_at and updated_at columns.

    The tables are shared with other services that may insert rows without
    timestamps, hence nullable columns with Python-side defaults.
    """

    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        nullable=True,
    )

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        onupdate=_utc_now,
        nullable=True,
    )


class SoftDeleteFlagsMixin:
    """Mixin for the ``excluido`` / ``deletado`` flag columns.

    A row flagged ``"s"`` in either column is treated as deleted and must
    never be returned by repositories.
    """

    excluido: Mapped[str | None] = mapped_column(String(1), nullable=True)
    reg_excluido: Mapped[str | None] = mapped_column(String(255), nullable=True)
    deletado: Mapped[str | None] = mapped_column(String(1), nullable=True)
    reg_deletado: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @classmethod
    def visible(cls) -> ColumnElement[bool]:
        """Filter clause excluding rows flagged as deleted."""
        return and_(
            or_(cls.excluido.is_(None), cls.excluido != FLAG_YES),
            or_(cls.deletado.is_(None), cls.deletado != FLAG_YES),
        )
