"""Check-digit algorithms and the method registry."""

from .base import (
    Algorithm,
    AlgorithmDescriptor,
    CheckDigitsError,
    InvalidLengthError,
    MalformedInputError,
)
from .registry import (
    METHODS,
    UnknownMethodError,
    get_known_method_ids,
    get_method,
    list_methods,
)

__all__ = [
    # Algorithm interface
    "Algorithm",
    "AlgorithmDescriptor",
    # Errors
    "CheckDigitsError",
    "InvalidLengthError",
    "MalformedInputError",
    "UnknownMethodError",
    # Registry
    "METHODS",
    "get_known_method_ids",
    "get_method",
    "list_methods",
]
