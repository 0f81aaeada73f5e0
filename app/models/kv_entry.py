from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class KVEntry(TimestampMixin, Base):
    """문자열 key → 문자열(JSON) value 저장소"""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<KVEntry key={self.key!r} size={len(self.value or '')}>"
