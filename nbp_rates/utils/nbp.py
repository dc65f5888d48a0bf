"""NBP-specific constants and invariants used across the package."""

from __future__ import annotations

from datetime import date
from typing import Final

NBP_API_BASE_URL: Final[str] = "http://api.nbp.pl/api/exchangerates/rates/c"
NBP_OUTPUT_FORMAT: Final[str] = "?format=xml"

# Table C is published from 2002-01-02 onwards; that day itself is not accepted.
NBP_EARLIEST_DATE: Final[date] = date(2002, 1, 2)

# The API refuses ranges spanning more than 93 days.
MAX_RANGE_DAYS: Final[int] = 93

ACCEPTED_CURRENCY_CODES: Final[frozenset[str]] = frozenset(
    {"USD", "AUD", "CAD", "EUR", "HUF", "CHF", "GBP", "JPY", "CZK", "DKK", "NOK", "SEK", "XDR"}
)

# Rates are published as ``D.DDDD``.
RATE_FIELD_WIDTH: Final[int] = 6


def is_accepted_currency(code: str) -> bool:
    """Return True when ``code`` case-insensitively matches a table C currency."""

    return code.upper() in ACCEPTED_CURRENCY_CODES


__all__ = [
    "ACCEPTED_CURRENCY_CODES",
    "MAX_RANGE_DAYS",
    "NBP_API_BASE_URL",
    "NBP_EARLIEST_DATE",
    "NBP_OUTPUT_FORMAT",
    "RATE_FIELD_WIDTH",
    "is_accepted_currency",
]
