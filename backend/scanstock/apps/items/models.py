from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, UniqueConstraint

from scanstock.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScanAction(str, enum.Enum):
    EDIT = "edit"
    CREATE = "create"


class Item(Base):
    __tablename__ = "items"
    __table_args__ = (
        # Source of truth for code uniqueness; service-level checks only
        # produce friendlier errors before the write.
        UniqueConstraint("code", name="uq_items_code"),
        CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
        # SQLite would otherwise reuse the highest id after a delete.
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(128), nullable=False)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False, default=0)
    category = Column(String(128), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self) -> str:
        return f"<Item id={self.id} code={self.code!r} quantity={self.quantity}>"
