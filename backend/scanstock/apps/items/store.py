from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models


class DuplicateCodeError(Exception):
    """Raised when a write would store a code that another item already holds."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Code {code!r} is already assigned to another item.")
        self.code = code


class ItemStore:
    """
    Persistence contract for items.

    Service functions receive an instance of this explicitly, so tests can
    hand them an in-memory fake instead of a database-backed store.
    """

    def list(self, search: Optional[str] = None) -> List[models.Item]:
        raise NotImplementedError

    def get_by_id(self, item_id: int) -> Optional[models.Item]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[models.Item]:
        raise NotImplementedError

    def insert(self, fields: Dict[str, Any]) -> models.Item:
        raise NotImplementedError

    def update(self, item_id: int, fields: Dict[str, Any]) -> Optional[models.Item]:
        raise NotImplementedError

    def remove(self, item_id: int) -> bool:
        raise NotImplementedError


def _like_pattern(search: str) -> str:
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlItemStore(ItemStore):
    """Item store on a SQLAlchemy session. Every write commits on its own."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, search: Optional[str] = None) -> List[models.Item]:
        query = self.db.query(models.Item)
        if search:
            pattern = _like_pattern(search)
            query = query.filter(
                or_(
                    models.Item.name.ilike(pattern, escape="\\"),
                    models.Item.code.ilike(pattern, escape="\\"),
                    models.Item.description.ilike(pattern, escape="\\"),
                )
            )
        return query.order_by(models.Item.id.asc()).all()

    def get_by_id(self, item_id: int) -> Optional[models.Item]:
        return self.db.get(models.Item, item_id)

    def get_by_code(self, code: str) -> Optional[models.Item]:
        return self.db.query(models.Item).filter(models.Item.code == code).first()

    def insert(self, fields: Dict[str, Any]) -> models.Item:
        item = models.Item(**fields)
        self.db.add(item)
        self._commit(code=item.code, item_id=None)
        self.db.refresh(item)
        return item

    def update(self, item_id: int, fields: Dict[str, Any]) -> Optional[models.Item]:
        item = self.get_by_id(item_id)
        if item is None:
            return None
        for key, value in fields.items():
            setattr(item, key, value)
        self._commit(code=fields.get("code"), item_id=item_id)
        self.db.refresh(item)
        return item

    def remove(self, item_id: int) -> bool:
        item = self.get_by_id(item_id)
        if item is None:
            return False
        self.db.delete(item)
        self.db.commit()
        return True

    def _commit(self, *, code: Optional[str], item_id: Optional[int]) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            # Only a code held by a different item is a collision; check
            # constraint failures and the like propagate untouched.
            holder = self.get_by_code(code) if code is not None else None
            if holder is not None and holder.id != item_id:
                raise DuplicateCodeError(code) from exc
            raise
