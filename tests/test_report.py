from __future__ import annotations

import pytest

from check_digits_utils.models import ItemResult
from check_digits_utils.report import aggregate_status


def _item(status: int) -> ItemResult:
    return ItemResult(item_id="x", status=status, message="OK" if status == 200 else "bad")


@pytest.mark.parametrize(
    "statuses,expected",
    [
        ([], (200, "OK")),
        ([200, 200], (200, "OK")),
        ([400], (400, "All failed")),
        ([400, 400], (400, "All failed")),
        ([200, 400], (207, "Partial success")),
        ([400, 200, 400], (207, "Partial success")),
    ],
)
def test_aggregate_status(statuses, expected):
    assert aggregate_status([_item(s) for s in statuses]) == expected


def test_item_result_rejects_unknown_status():
    with pytest.raises(ValueError):
        ItemResult(item_id="x", status=500, message="boom")


def test_item_result_to_dict_omits_empty_fields():
    result = ItemResult(item_id="12", status=400, message="too short", error="InvalidLength")
    assert result.to_dict() == {
        "item_id": "12",
        "status": 400,
        "message": "too short",
        "error": "InvalidLength",
    }
