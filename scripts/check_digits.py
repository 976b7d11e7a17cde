#!/usr/bin/env python3
"""Local CLI entrypoint to run the check-digit utilities from a checkout.

Usage:
  python scripts/check_digits.py calc -m ean 9638-507
  python scripts/check_digits.py check -m ean --json 9638-5074 12345678

This calls the same cli.main used by the installed console scripts.
"""

from __future__ import annotations

from check_digits_utils.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
