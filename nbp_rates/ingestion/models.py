"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass

from nbp_rates.utils.date_range import DateRange


@dataclass(frozen=True, slots=True)
class RequestTarget:
    """Validated request for one currency over a :class:`DateRange`."""

    currency: str
    date_range: DateRange
    url: str

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class RateSeries:
    """Rates extracted for one tag, in the order the service returned them."""

    tag: str
    values: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


@dataclass(frozen=True, slots=True)
class SummaryStatistics:
    mean_bid: float
    ask_std_dev: float
