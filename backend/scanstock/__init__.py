# backend/scanstock/__init__.py
"""
Import ORM models from each app so that:

- Alembic and Base.metadata.create_all() see all tables.
- The package exposes a clear surface.

The actual model classes are kept in scanstock/apps/*/models.py.
"""

from .apps.items import models as items_models                # barcode-keyed stock records

__all__ = [
    "items_models",
]
