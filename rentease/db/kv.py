"""
Key-Value Entry Model
One row per persisted collection (users, properties, ...) plus the session entry
"""
from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from rentease.db.base import Base, TimestampMixin


class KeyValueEntry(Base, TimestampMixin):
    """A serialized collection stored under a single key"""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[object] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<KeyValueEntry key={self.key!r}>"
