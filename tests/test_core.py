from __future__ import annotations

import pytest

from check_digits_utils.core import (
    INVALID_MESSAGE,
    calculate_batch,
    check_batch,
    list_method_rows,
    normalise_number,
)
from check_digits_utils.methods import MalformedInputError, UnknownMethodError, get_method


def test_calculate_batch_completes_in_input_order():
    batch = calculate_batch("ean", ["9638-507", "1234567", "400638133393"])

    assert [r.value for r in batch.results] == ["96385074", "12345670", "4006381333931"]
    assert [r.item_id for r in batch.results] == ["9638-507", "1234567", "400638133393"]
    assert batch.status == 200
    assert batch.all_valid
    assert batch.exit_code == 0


def test_calculate_batch_keeps_going_after_bad_entries():
    inputs = ["12", "9638507", "---"]
    batch = calculate_batch("ean", inputs)

    assert len(batch) == len(inputs)
    bad_length, good, no_digits = batch.results
    assert bad_length.status == 400
    assert bad_length.error == "InvalidLength"
    assert bad_length.value is None
    assert good.value == "96385074"
    assert no_digits.error == "MalformedInput"
    assert batch.status == 207
    assert not batch.all_valid
    assert batch.any_valid
    assert batch.exit_code == 0


def test_calculate_batch_all_failed():
    batch = calculate_batch("upc", ["1", "22"])
    assert batch.status == 400
    assert batch.message == "All failed"
    assert batch.exit_code == 1


def test_unknown_method_aborts_whole_batch():
    with pytest.raises(UnknownMethodError):
        calculate_batch("no-such-method", ["9638507"])
    with pytest.raises(UnknownMethodError):
        check_batch("no-such-method", ["96385074"])


def test_check_batch_mixed_validity():
    batch = check_batch("ean", ["9638-5074", "12345678"])

    first, second = batch.results
    assert first.item_id == "9638-5074"
    assert first.ok and first.value is True
    assert second.item_id == "12345678"
    assert second.status == 400
    assert second.message == INVALID_MESSAGE
    assert second.value is False
    assert second.error is None
    # Only a fully invalid batch is a failure overall
    assert batch.status == 207
    assert batch.exit_code == 0
    assert not batch.all_valid


def test_check_batch_all_invalid_fails():
    batch = check_batch("ean", ["96385070", "12345678"])
    assert batch.status == 400
    assert not batch.any_valid
    assert batch.exit_code == 1


def test_check_batch_wrong_length_is_invalid_not_error():
    batch = check_batch("ean", ["123"])
    (result,) = batch.results
    assert result.status == 400
    assert result.message == INVALID_MESSAGE
    assert result.error is None


def test_check_batch_without_digits_reports_malformed_input():
    batch = check_batch("isbn", ["n/a", "0-306-40615-2"])
    assert batch.results[0].error == "MalformedInput"
    assert batch.results[1].ok


def test_empty_batch_is_ok():
    batch = check_batch("luhn", [])
    assert len(batch) == 0
    assert batch.status == 200
    assert batch.exit_code == 0


def test_batch_accepts_method_in_any_case():
    assert calculate_batch("EAN", ["9638507"]).method_id == "ean"


def test_normalise_number_rejects_empty():
    with pytest.raises(MalformedInputError):
        normalise_number(get_method("ean"), " - ")


def test_batch_to_dict():
    data = check_batch("ean", ["96385074"]).to_dict()
    assert data == {
        "method": "ean",
        "status": 200,
        "message": "OK",
        "results": [{"item_id": "96385074", "status": 200, "message": "OK", "value": True}],
    }


def test_list_method_rows():
    ids = list_method_rows()
    assert ids == sorted(ids)
    rows = list_method_rows(detail=True)
    assert [row["method"] for row in rows] == ids
    assert all(set(row) == {"method", "summary"} for row in rows)


def test_check_batch_lone_x_reports_malformed_input():
    (result,) = check_batch("isbn", ["X"]).results
    assert result.status == 400
    assert result.error == "MalformedInput"
    with pytest.raises(MalformedInputError):
        normalise_number(get_method("issn"), "x-x")
