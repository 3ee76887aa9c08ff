from __future__ import annotations

import logging

from . import schemas, services
from .store import ItemStore

logger = logging.getLogger(__name__)

DEMO_ITEMS = [
    {
        "code": "12345678",
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse with 2.4GHz receiver",
        "quantity": 15,
        "category": "Electronics",
    },
    {
        "code": "87654321",
        "name": "Mechanical Keyboard",
        "description": "RGB Mechanical Gaming Keyboard, Blue Switches",
        "quantity": 5,
        "category": "Electronics",
    },
    {
        "code": "11223344",
        "name": "USB-C Cable",
        "description": "2m Braided USB-C Charging Cable",
        "quantity": 50,
        "category": "Accessories",
    },
]


def seed_demo_items(store: ItemStore) -> int:
    """
    Insert the demo catalogue into an empty store.

    Returns the number of items created; a store that already holds
    anything is left alone.
    """
    if services.list_items(store):
        return 0
    for data in DEMO_ITEMS:
        services.create_item(store, schemas.ItemCreate(**data))
    logger.info("Seeded %d demo items", len(DEMO_ITEMS))
    return len(DEMO_ITEMS)
