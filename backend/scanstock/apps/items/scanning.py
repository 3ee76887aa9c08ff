"""
Scan routing.

A scanned (or typed) barcode either opens the edit flow for the item that
already carries it, or the create flow with the code prefilled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import models, schemas, services
from .store import ItemStore


@dataclass(frozen=True)
class ScanDecision:
    action: models.ScanAction
    code: str
    item: Optional[models.Item] = None
    draft: Optional[schemas.ItemDraft] = None


def normalise_scanned_code(raw_code: Optional[str]) -> Optional[str]:
    return services.normalise_code(raw_code)


def resolve_scan(store: ItemStore, raw_code: Optional[str]) -> Optional[ScanDecision]:
    """
    Decide between editing and creating for a scanned code.

    Returns None when there is no code to look up (nothing scanned yet);
    an empty scan never turns into a create with an empty code.
    """
    code = normalise_scanned_code(raw_code)
    if code is None:
        return None

    item = services.find_item_by_code(store, code)
    if item is not None:
        return ScanDecision(action=models.ScanAction.EDIT, code=code, item=item)
    return ScanDecision(
        action=models.ScanAction.CREATE,
        code=code,
        draft=schemas.ItemDraft(code=code),
    )
