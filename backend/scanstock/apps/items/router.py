# backend/scanstock/apps/items/router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from scanstock.database import get_read_db, get_write_db

from . import schemas, services
from .scanning import resolve_scan
from .store import ItemStore, SqlItemStore

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": schemas.ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": schemas.ErrorResponse},
}

router = APIRouter(
    prefix="/items",
    tags=["items"],
    responses=ERROR_RESPONSES,
)


def get_item_reader(db: Session = Depends(get_read_db)) -> ItemStore:
    return SqlItemStore(db)


def get_item_writer(db: Session = Depends(get_write_db)) -> ItemStore:
    return SqlItemStore(db)


def _not_found(exc: services.ItemNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _conflict(exc: services.ItemConflictError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


# ---------------------------------------------------------------------------
# READS
# ---------------------------------------------------------------------------


@router.get("", response_model=List[schemas.ItemRead])
def list_items(
    search: Optional[str] = Query(None),
    store: ItemStore = Depends(get_item_reader),
):
    return services.list_items(store, search=search)


# Declared before /{item_id} so "code" is never parsed as an id. The path
# converter keeps codes containing "/" (Code 128, QR payloads) in one piece.
@router.get("/code/{code:path}", response_model=schemas.ItemRead)
def get_item_by_code(code: str, store: ItemStore = Depends(get_item_reader)):
    try:
        return services.get_item_by_code(store, code)
    except services.ItemNotFoundError as exc:
        raise _not_found(exc)


@router.get("/{item_id}", response_model=schemas.ItemRead)
def get_item(item_id: int, store: ItemStore = Depends(get_item_reader)):
    try:
        return services.get_item(store, item_id)
    except services.ItemNotFoundError as exc:
        raise _not_found(exc)


# ---------------------------------------------------------------------------
# SCAN ROUTING
# ---------------------------------------------------------------------------


@router.post(
    "/scan",
    response_model=schemas.ScanDecisionRead,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No code scanned"}},
)
def scan_code(
    payload: schemas.ScanRequest,
    store: ItemStore = Depends(get_item_reader),
):
    decision = resolve_scan(store, payload.code)
    if decision is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return schemas.ScanDecisionRead.model_validate(decision)


# ---------------------------------------------------------------------------
# WRITES
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=schemas.ItemRead,
    status_code=status.HTTP_201_CREATED,
)
def create_item(
    payload: schemas.ItemCreate,
    store: ItemStore = Depends(get_item_writer),
):
    try:
        return services.create_item(store, payload)
    except services.ItemConflictError as exc:
        raise _conflict(exc)


@router.put("/{item_id}", response_model=schemas.ItemRead)
def update_item(
    item_id: int,
    payload: schemas.ItemUpdate,
    store: ItemStore = Depends(get_item_writer),
):
    try:
        return services.update_item(store, item_id, payload)
    except services.ItemNotFoundError as exc:
        raise _not_found(exc)
    except services.ItemConflictError as exc:
        raise _conflict(exc)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_item(item_id: int, store: ItemStore = Depends(get_item_writer)):
    try:
        services.delete_item(store, item_id)
    except services.ItemNotFoundError as exc:
        raise _not_found(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
