"""Shared algorithm interface and error taxonomy for check-digit methods."""

from __future__ import annotations

import re
from dataclasses import dataclass


_NON_DIGIT = re.compile(r"[^0-9]")
_NON_DIGIT_OR_X = re.compile(r"[^0-9X]")
_DIGITS = re.compile(r"[0-9]+")


class CheckDigitsError(ValueError):
    """Base error for a single number that cannot be processed."""

    kind = "CheckDigitsError"


class InvalidLengthError(CheckDigitsError):
    """Raised when a body does not have a length accepted by the method."""

    kind = "InvalidLength"


class MalformedInputError(CheckDigitsError):
    """Raised when a number has no digits or violates a scheme constraint."""

    kind = "MalformedInput"


@dataclass(slots=True, frozen=True)
class AlgorithmDescriptor:
    """Describe a registered method: its ID, summary and digit-count rules."""

    method_id: str
    summary: str
    body_lengths: tuple[int, ...] = ()
    check_digit_count: int = 1

    def __post_init__(self) -> None:
        if not self.method_id:
            raise ValueError("Method ID must be non-empty")
        if self.check_digit_count < 1:
            raise ValueError("Check digit count must be at least 1")

    def accepts_body_length(self, length: int) -> bool:
        if length < 1:
            return False
        return not self.body_lengths or length in self.body_lengths


class Algorithm:
    """Base class for check-digit methods.

    Subclasses implement :meth:`_compute`, which receives a body that has
    already passed the digit and length checks and returns the check
    character(s). ``complete`` and ``is_valid`` are built on top of it.
    """

    # Schemes whose check character can be "X" keep it while normalising.
    allows_x = False

    def __init__(self, descriptor: AlgorithmDescriptor) -> None:
        self.descriptor = descriptor

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.descriptor.method_id!r})"

    @property
    def method_id(self) -> str:
        return self.descriptor.method_id

    def normalise(self, raw: str) -> str:
        """Strip separators, keeping only digits (and a trailing X where allowed)."""
        if not self.allows_x:
            return _NON_DIGIT.sub("", raw)
        cleaned = _NON_DIGIT_OR_X.sub("", raw.upper())
        # X is only meaningful as the final check character.
        body, last = cleaned[:-1], cleaned[-1:]
        return body.replace("X", "") + last

    def _check_body(self, body: str) -> None:
        if not body:
            raise MalformedInputError("Number contains no digits")
        if not _DIGITS.fullmatch(body):
            raise MalformedInputError(f"Number '{body}' must contain only digits")
        if not self.descriptor.accepts_body_length(len(body)):
            expected = " or ".join(str(n) for n in self.descriptor.body_lengths)
            raise InvalidLengthError(
                f"Method '{self.method_id}' expects {expected} digits "
                f"without check digit(s), got {len(body)}"
            )
        self._check_constraints(body)

    def _check_constraints(self, body: str) -> None:
        """Hook for scheme-specific body rules; raise MalformedInputError."""

    def _compute(self, body: str) -> str:
        raise NotImplementedError

    def compute(self, body: str) -> str:
        """Return only the check digit(s) for ``body``."""
        self._check_body(body)
        return self._compute(body)

    def complete(self, body: str) -> str:
        """Return ``body`` with its check digit(s) appended."""
        return body + self.compute(body)

    def is_valid(self, number: str) -> bool:
        """Return whether ``number`` ends with the correct check digit(s)."""
        count = self.descriptor.check_digit_count
        if len(number) <= count:
            return False
        body, supplied = number[:-count], number[-count:]
        try:
            expected = self.compute(body)
        except CheckDigitsError:
            return False
        return supplied == expected


def weighted_sum(body: str, weights: list[int] | tuple[int, ...], from_right: bool = False) -> int:
    """Sum digit * weight, cycling ``weights`` from the left or right end."""
    digits = reversed(body) if from_right else iter(body)
    return sum(int(d) * weights[i % len(weights)] for i, d in enumerate(digits))
