from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parent
sys.path.append(str(ROOT))

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["DATABASE_WRITE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.pop("DATABASE_READ_URL", None)
os.environ.pop("SEED_DEMO_ITEMS", None)

from scanstock.database import Base, get_read_db, get_write_db, register_sqlite_functions  # noqa: E402
from scanstock.apps.items import models as item_models  # noqa: E402
from scanstock.apps.items.store import DuplicateCodeError, ItemStore, SqlItemStore  # noqa: E402


class InMemoryItemStore(ItemStore):
    """Dict-backed store with the same uniqueness guarantee as the table."""

    def __init__(self) -> None:
        self._rows: Dict[int, item_models.Item] = {}
        self._next_id = 1

    def list(self, search: Optional[str] = None) -> List[item_models.Item]:
        rows = [self._rows[key] for key in sorted(self._rows)]
        if not search:
            return rows
        needle = search.lower()
        return [
            row
            for row in rows
            if any(needle in (value or "").lower() for value in (row.name, row.code, row.description))
        ]

    def get_by_id(self, item_id: int) -> Optional[item_models.Item]:
        return self._rows.get(item_id)

    def get_by_code(self, code: str) -> Optional[item_models.Item]:
        return next((row for row in self._rows.values() if row.code == code), None)

    def insert(self, fields: Dict[str, Any]) -> item_models.Item:
        if self.get_by_code(fields["code"]) is not None:
            raise DuplicateCodeError(fields["code"])
        values = {"quantity": 0, "description": None, "category": None, **fields}
        item = item_models.Item(
            id=self._next_id,
            created_at=datetime.now(timezone.utc),
            **values,
        )
        self._rows[item.id] = item
        self._next_id += 1
        return item

    def update(self, item_id: int, fields: Dict[str, Any]) -> Optional[item_models.Item]:
        item = self._rows.get(item_id)
        if item is None:
            return None
        code = fields.get("code")
        holder = self.get_by_code(code) if code is not None else None
        if holder is not None and holder.id != item_id:
            raise DuplicateCodeError(code)
        for key, value in fields.items():
            setattr(item, key, value)
        return item

    def remove(self, item_id: int) -> bool:
        return self._rows.pop(item_id, None) is not None


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
    Base.metadata.create_all(bind=engine, tables=[item_models.Item.__table__])
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
    )


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def item_store(db_session):
    return SqlItemStore(db_session)


@pytest.fixture()
def fake_store():
    return InMemoryItemStore()


@pytest.fixture()
def client(session_factory):
    from scanstock.main import app

    def _override_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_write_db] = _override_db
    app.dependency_overrides[get_read_db] = _override_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
