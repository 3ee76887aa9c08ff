from __future__ import annotations

import logging
from typing import List, Optional

from . import models, schemas
from .store import DuplicateCodeError, ItemStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ItemNotFoundError(Exception):
    """Raised when an item id or code does not exist."""


class ItemConflictError(Exception):
    """Raised when a create or update would duplicate an existing code."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def list_items(store: ItemStore, *, search: Optional[str] = None) -> List[models.Item]:
    return store.list(search or None)


def get_item(store: ItemStore, item_id: int) -> models.Item:
    item = store.get_by_id(item_id)
    if item is None:
        raise ItemNotFoundError("Item not found")
    return item


def normalise_code(raw_code: Optional[str]) -> Optional[str]:
    """Strip scanner whitespace; blank input means there is no code."""
    if raw_code is None:
        return None
    return raw_code.strip() or None


def find_item_by_code(store: ItemStore, code: Optional[str]) -> Optional[models.Item]:
    code = normalise_code(code)
    if code is None:
        return None
    return store.get_by_code(code)


def get_item_by_code(store: ItemStore, code: str) -> models.Item:
    item = find_item_by_code(store, code)
    if item is None:
        raise ItemNotFoundError("Item not found")
    return item


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def create_item(store: ItemStore, payload: schemas.ItemCreate) -> models.Item:
    conflict_message = "Item with this code already exists"
    if store.get_by_code(payload.code) is not None:
        logger.warning("Rejected create for duplicate code %s", payload.code)
        raise ItemConflictError(conflict_message, code=payload.code)

    try:
        item = store.insert(payload.model_dump())
    except DuplicateCodeError as exc:
        # Another writer took the code between the check and the insert.
        logger.warning("Concurrent create lost the race for code %s", payload.code)
        raise ItemConflictError(conflict_message, code=payload.code) from exc

    logger.info("Created item id=%s code=%s", item.id, item.code)
    return item


def update_item(
    store: ItemStore,
    item_id: int,
    payload: schemas.ItemUpdate,
) -> models.Item:
    item = get_item(store, item_id)
    changes = payload.model_dump(exclude_unset=True)

    conflict_message = "Code already in use"
    new_code = changes.get("code")
    if new_code is not None and new_code != item.code:
        holder = store.get_by_code(new_code)
        if holder is not None and holder.id != item.id:
            logger.warning("Rejected update of item %s to duplicate code %s", item_id, new_code)
            raise ItemConflictError(conflict_message, code=new_code)

    try:
        updated = store.update(item_id, changes)
    except DuplicateCodeError as exc:
        logger.warning("Concurrent update lost the race for code %s", new_code)
        raise ItemConflictError(conflict_message, code=exc.code) from exc

    if updated is None:
        raise ItemNotFoundError("Item not found")

    logger.info("Updated item id=%s fields=%s", item_id, sorted(changes))
    return updated


def delete_item(store: ItemStore, item_id: int) -> None:
    get_item(store, item_id)
    if not store.remove(item_id):
        raise ItemNotFoundError("Item not found")
    logger.info("Deleted item id=%s", item_id)
