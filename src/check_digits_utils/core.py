"""Core batch entrypoints.

This module MUST NOT print or read from stdin so it can be used by both the
CLI and as a library. Per-number faults are captured as error results; only an
unknown method aborts a whole batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .methods import (
    Algorithm,
    CheckDigitsError,
    MalformedInputError,
    get_method,
    list_methods,
)
from .models import BatchResult, ItemResult

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Incorrect check digit(s)"


def normalise_number(algorithm: Algorithm, raw: str) -> str:
    """Strip separators from ``raw``; raise MalformedInputError if no digit remains."""
    number = algorithm.normalise(raw)
    if not any(ch.isdigit() for ch in number):
        raise MalformedInputError(f"'{raw}' contains no digits")
    return number


def _error_result(raw: str, exc: CheckDigitsError) -> ItemResult:
    logger.debug("Rejected %r: %s", raw, exc)
    return ItemResult(item_id=raw, status=400, message=str(exc), error=exc.kind)


def calculate_batch(method_id: str, inputs: Iterable[str]) -> BatchResult:
    """Complete each number with its check digit(s).

    Params:
        method_id: registered method ID (see ``list_methods``)
        inputs: raw numbers without check digit(s); separators are ignored

    Returns: a BatchResult with one entry per input, in input order

    Raises:
        UnknownMethodError: if ``method_id`` is not registered
    """
    algorithm = get_method(method_id)
    logger.debug("Calculating check digits with %r", algorithm)

    results: list[ItemResult] = []
    for raw in inputs:
        try:
            completed = algorithm.complete(normalise_number(algorithm, raw))
        except CheckDigitsError as exc:
            results.append(_error_result(raw, exc))
            continue
        results.append(ItemResult(item_id=raw, status=200, message="OK", value=completed))

    return BatchResult.from_iterable(algorithm.method_id, results)


def check_batch(method_id: str, inputs: Iterable[str]) -> BatchResult:
    """Validate the check digit(s) of each number.

    An incorrect check digit is a normal 400 result, not an error. The batch
    status is a failure only when every number is invalid; see
    ``report.aggregate_status``.

    Raises:
        UnknownMethodError: if ``method_id`` is not registered
    """
    algorithm = get_method(method_id)
    logger.debug("Checking check digits with %r", algorithm)

    results: list[ItemResult] = []
    for raw in inputs:
        try:
            number = normalise_number(algorithm, raw)
        except CheckDigitsError as exc:
            results.append(_error_result(raw, exc))
            continue

        if algorithm.is_valid(number):
            results.append(ItemResult(item_id=raw, status=200, message="OK", value=True))
        else:
            results.append(
                ItemResult(item_id=raw, status=400, message=INVALID_MESSAGE, value=False)
            )

    return BatchResult.from_iterable(algorithm.method_id, results)


def list_method_rows(detail: bool = False) -> list[str] | list[dict[str, str]]:
    """Return method IDs, or ``{"method", "summary"}`` rows when ``detail`` is set."""
    descriptors = list_methods()
    if not detail:
        return [d.method_id for d in descriptors]
    return [{"method": d.method_id, "summary": d.summary} for d in descriptors]
