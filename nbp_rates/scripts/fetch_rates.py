"""CLI entry point for fetching NBP bid/ask statistics."""

from __future__ import annotations

import sys

from nbp_rates.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
