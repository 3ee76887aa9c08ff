"""
Items module.

Barcode-keyed stock records: lookup, scan routing, and CRUD with a unique
scan code per item.
"""

from .router import router  # noqa: F401
from . import models  # noqa: F401
