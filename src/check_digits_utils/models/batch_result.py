"""Batch result model."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

from ..report import aggregate_status
from .item_result import ItemResult


@dataclass(frozen=True)
class BatchResult:
    """Results of one calc/check call, in input order, plus the aggregate status."""

    method_id: str
    results: tuple[ItemResult, ...]
    status: int
    message: str

    def __len__(self) -> int:
        return len(self.results)

    @property
    def all_valid(self) -> bool:
        """True only if every entry succeeded."""
        return all(result.ok for result in self.results)

    @property
    def any_valid(self) -> bool:
        return any(result.ok for result in self.results)

    @property
    def exit_code(self) -> int:
        """Non-zero only when the aggregate status is a failure (every entry failed)."""
        return 1 if self.status >= 400 else 0

    def to_dict(self) -> dict[str, object]:
        return {
            "method": self.method_id,
            "status": self.status,
            "message": self.message,
            "results": [result.to_dict() for result in self.results],
        }

    @classmethod
    def from_iterable(cls, method_id: str, results: Iterable[ItemResult]) -> BatchResult:
        items = tuple(results)
        status, message = aggregate_status(items)
        return cls(method_id=method_id, results=items, status=status, message=message)
