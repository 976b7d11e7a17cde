"""Per-number result model."""

from __future__ import annotations

from dataclasses import dataclass

_VALID_STATUSES = {200, 400}


@dataclass(frozen=True)
class ItemResult:
    """Outcome of processing one input number.

    ``item_id`` echoes the raw input so callers can correlate results.
    ``value`` holds the completed number for ``calc`` or the verdict for
    ``check``; it is ``None`` when the entry could not be processed, in which
    case ``error`` names the error kind.
    """

    item_id: str
    status: int
    message: str
    value: str | bool | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if not self.message:
            raise ValueError("Result message must be non-empty")

    @property
    def ok(self) -> bool:
        return self.status == 200

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "item_id": self.item_id,
            "status": self.status,
            "message": self.message,
        }
        if self.value is not None:
            data["value"] = self.value
        if self.error is not None:
            data["error"] = self.error
        return data
