"""check-digits-utils core package.

This package provides check-digit algorithms (EAN, UPC, ISBN, Luhn, ...) and
batch calculate/check entrypoints that are callable from both the CLI and
other Python code.
"""

__version__ = "0.1.0"

__all__ = [
    "core",
    "methods",
]
