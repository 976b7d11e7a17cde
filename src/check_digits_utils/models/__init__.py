"""Result models for check-digit batch operations."""

from __future__ import annotations

from .batch_result import BatchResult
from .item_result import ItemResult

__all__ = [
    "BatchResult",
    "ItemResult",
]
