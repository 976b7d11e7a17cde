"""Weighted-modulo check-digit schemes (EAN/UPC/GTIN, ISBN, ISSN, MOD 97-10)."""

from __future__ import annotations

from .base import Algorithm, AlgorithmDescriptor, MalformedInputError, weighted_sum


class Modulo10Algorithm(Algorithm):
    """GS1 modulo 10: weights 3,1,3,... starting at the rightmost body digit.

    Counting from the right is what lets one rule serve EAN-8, UPC-A, EAN-13
    and GTIN-14 bodies alike.
    """

    weights = (3, 1)

    def _compute(self, body: str) -> str:
        total = weighted_sum(body, self.weights, from_right=True)
        return str((10 - total % 10) % 10)


class Isbn13Algorithm(Modulo10Algorithm):
    """ISBN-13: GS1 modulo 10 restricted to the Bookland prefixes."""

    prefixes = ("978", "979")

    def _check_constraints(self, body: str) -> None:
        if not body.startswith(self.prefixes):
            raise MalformedInputError(
                f"ISBN-13 must start with {' or '.join(self.prefixes)}, got '{body[:3]}'"
            )


class Modulo11Algorithm(Algorithm):
    """Modulo 11 with descending weights from the left; remainder 10 maps to X.

    For a body of length n the weights are n+1, n, ..., 2 (10..2 for ISBN-10,
    8..2 for ISSN).
    """

    allows_x = True

    def _compute(self, body: str) -> str:
        weights = list(range(len(body) + 1, 1, -1))
        check = (11 - weighted_sum(body, weights) % 11) % 11
        return "X" if check == 10 else str(check)


class Modulo97Algorithm(Algorithm):
    """ISO/IEC 7064 MOD 97-10, two check digits."""

    def _compute(self, body: str) -> str:
        return f"{98 - (int(body) * 100) % 97:02d}"


EAN = Modulo10Algorithm(
    AlgorithmDescriptor(
        method_id="ean",
        summary="European Article Number (EAN-8, EAN-13)",
        body_lengths=(7, 12),
    )
)

UPC = Modulo10Algorithm(
    AlgorithmDescriptor(
        method_id="upc",
        summary="Universal Product Code (UPC-A)",
        body_lengths=(11,),
    )
)

GTIN = Modulo10Algorithm(
    AlgorithmDescriptor(
        method_id="gtin",
        summary="GS1 Global Trade Item Number (GTIN-8/12/13/14) and SSCC",
        body_lengths=(7, 11, 12, 13, 17),
    )
)

ISBN13 = Isbn13Algorithm(
    AlgorithmDescriptor(
        method_id="isbn13",
        summary="International Standard Book Number, 13 digits",
        body_lengths=(12,),
    )
)

ISBN = Modulo11Algorithm(
    AlgorithmDescriptor(
        method_id="isbn",
        summary="International Standard Book Number, 10 digits",
        body_lengths=(9,),
    )
)

ISSN = Modulo11Algorithm(
    AlgorithmDescriptor(
        method_id="issn",
        summary="International Standard Serial Number",
        body_lengths=(7,),
    )
)

MOD97 = Modulo97Algorithm(
    AlgorithmDescriptor(
        method_id="mod97",
        summary="ISO/IEC 7064 MOD 97-10 (two check digits)",
        check_digit_count=2,
    )
)
