"""Luhn (mod 10, double-add-double) family."""

from __future__ import annotations

from .base import Algorithm, AlgorithmDescriptor


class LuhnAlgorithm(Algorithm):
    """Double every other digit starting at the rightmost body digit."""

    def _compute(self, body: str) -> str:
        total = 0
        for i, ch in enumerate(reversed(body)):
            digit = int(ch)
            if i % 2 == 0:
                digit *= 2
                if digit > 9:
                    digit -= 9
            total += digit
        return str((10 - total % 10) % 10)


LUHN = LuhnAlgorithm(
    AlgorithmDescriptor(
        method_id="luhn",
        summary="Luhn algorithm (credit cards and many national IDs)",
    )
)

IMEI = LuhnAlgorithm(
    AlgorithmDescriptor(
        method_id="imei",
        summary="International Mobile Equipment Identity",
        body_lengths=(14,),
    )
)
