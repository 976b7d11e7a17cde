"""Registry of check-digit methods, keyed by method ID.

The registry is built once at import time and is read-only afterwards; the CLI
and the batch facade resolve methods through :func:`get_method`.
"""

from __future__ import annotations

from types import MappingProxyType
from collections.abc import Mapping

from .base import Algorithm, AlgorithmDescriptor
from .luhn import IMEI, LUHN
from .verhoeff import VERHOEFF
from .weighted import EAN, GTIN, ISBN, ISBN13, ISSN, MOD97, UPC


class UnknownMethodError(ValueError):
    """Raised when a method ID is not found in the registry."""


def _build(*algorithms: Algorithm) -> Mapping[str, Algorithm]:
    methods: dict[str, Algorithm] = {}
    for algorithm in algorithms:
        if algorithm.method_id in methods:
            raise ValueError(f"Duplicate method ID: '{algorithm.method_id}'")
        methods[algorithm.method_id] = algorithm
    return MappingProxyType(dict(sorted(methods.items())))


# Add new methods here by instantiating an Algorithm and listing it.
METHODS: Mapping[str, Algorithm] = _build(
    EAN,
    UPC,
    GTIN,
    ISBN,
    ISBN13,
    ISSN,
    LUHN,
    IMEI,
    VERHOEFF,
    MOD97,
)


def get_method(method_id: str) -> Algorithm:
    """Return the algorithm for the given method ID, or raise UnknownMethodError."""
    algorithm = METHODS.get(method_id.strip().lower())
    if algorithm is None:
        known = ", ".join(get_known_method_ids())
        raise UnknownMethodError(f"Unknown method '{method_id}'. Known methods: {known}")
    return algorithm


def get_known_method_ids() -> list[str]:
    """Return a sorted list of all registered method IDs."""
    return sorted(METHODS.keys())


def list_methods() -> list[AlgorithmDescriptor]:
    """Return descriptors of all registered methods, sorted by method ID."""
    return [METHODS[method_id].descriptor for method_id in get_known_method_ids()]
