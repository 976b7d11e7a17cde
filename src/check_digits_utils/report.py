"""Aggregate status for multi-item results."""

from __future__ import annotations

from typing import TYPE_CHECKING
from collections.abc import Sequence

if TYPE_CHECKING:
    from .models.item_result import ItemResult


def aggregate_status(results: Sequence[ItemResult]) -> tuple[int, str]:
    """Return the (status, message) summarising a batch of item results.

    The policy is that of a multi-status envelope:

    - no results, or every result OK -> ``(200, "OK")``
    - every result failed -> the shared failure status with ``"All failed"``
      (or 400 when the failures disagree)
    - a mix -> ``(207, "Partial success")``

    Only the "every result failed" case is a failure overall, so a batch with a
    single valid number still succeeds; individual outcomes stay available on
    each result.
    """

    if not results:
        return 200, "OK"

    failed = [r.status for r in results if r.status != 200]
    if not failed:
        return 200, "OK"

    if len(failed) == len(results):
        statuses = set(failed)
        status = statuses.pop() if len(statuses) == 1 else 400
        return status, "All failed"

    return 207, "Partial success"
