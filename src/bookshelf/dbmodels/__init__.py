"""
Database models for Bookshelf (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

Reference columns (`books.user_id`, `contents.*_user_id`) are plain strings
without foreign keys: records are documents and references are only followed
at read time.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    DateTime,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", name="users_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    email: Mapped[str] = mapped_column(String(255), nullable=False)


class Books(Base):
    __tablename__ = "books"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="books_pkey"),
        Index("idx_books_user_id", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)


class Contents(Base):
    __tablename__ = "contents"
    __table_args__ = (PrimaryKeyConstraint("id", name="contents_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    content_type_id: Mapped[str | None] = mapped_column(String(255))
    data: Mapped[str | None] = mapped_column(Text)
    created_by_user_id: Mapped[str | None] = mapped_column(String(64))
    last_updated_by_user_id: Mapped[str | None] = mapped_column(String(64))
    created_on: Mapped[datetime | None] = mapped_column(DateTime(True))
    updated_on: Mapped[datetime | None] = mapped_column(DateTime(True))


target_metadata = Base.metadata
