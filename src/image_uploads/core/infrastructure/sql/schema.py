"""SQLAlchemy table definitions."""

import datetime as dt

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid6 import uuid7


def generate_upload_id() -> str:
    """Time-ordered UUIDv7, so ordering by id follows insertion order."""
    return str(uuid7())


class Base(DeclarativeBase):
    pass


class UploadRecord(Base):
    __tablename__ = "uploads"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_upload_id)
    name: Mapped[str] = mapped_column(String, nullable=False)
    remote_key: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    remote_url: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
