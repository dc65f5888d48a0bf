"""Strict date parsing and range helpers for NBP requests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from nbp_rates.utils.nbp import MAX_RANGE_DAYS, NBP_EARLIEST_DATE

DATE_FORMAT = "%Y-%m-%d"
_STRICT_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class DateRange:
    """A start date with an optional end date."""

    start: date
    end: date | None = None

    def segments(self) -> tuple[str, ...]:
        """Return the dates formatted as URL path segments."""
        days = (self.start,) if self.end is None else (self.start, self.end)
        return tuple(day.strftime(DATE_FORMAT) for day in days)


def parse_date(value: str | date) -> date:
    """Parse ``YYYY-MM-DD`` without lenient correction.

    ``strptime`` alone accepts single-digit months and days, so the shape is
    checked first. Out-of-range components (month 13, 30 February) raise
    :class:`ValueError`.
    """

    if isinstance(value, date):
        return value
    if not _STRICT_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"date {value!r} does not match YYYY-MM-DD")
    return datetime.strptime(value, DATE_FORMAT).date()


def try_parse_date(value: str) -> date | None:
    """Return the parsed date or ``None`` when ``value`` is malformed."""

    try:
        return parse_date(value)
    except (TypeError, ValueError):
        return None


def is_available_start(start: date, today: date) -> bool:
    """Return True when ``start`` lies strictly between the earliest NBP date and ``today``."""

    return NBP_EARLIEST_DATE < start < today


def within_max_range(start: date, end: date, window_days: int = MAX_RANGE_DAYS) -> bool:
    """Return True when ``end`` falls before ``start + window_days`` (boundary excluded)."""

    if window_days <= 0:
        raise ValueError("window_days must be positive")
    return start + timedelta(days=window_days) > end
