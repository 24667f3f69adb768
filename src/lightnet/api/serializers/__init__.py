from __future__ import annotations

from .networks import error_to_detail, record_from_item, record_to_item

__all__ = [
    "record_to_item",
    "record_from_item",
    "error_to_detail",
]
