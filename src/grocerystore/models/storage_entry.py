"""StorageEntry model for GroceryStore."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class StorageEntry(Base, TimestampMixin):
    """One key of the local key-value storage."""

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<StorageEntry(key='{self.key}', size={len(self.value)})>"
