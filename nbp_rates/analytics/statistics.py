"""Descriptive statistics over extracted rate series."""

from __future__ import annotations

import math
from typing import Iterable

from nbp_rates.ingestion.models import SummaryStatistics


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean using a plain running sum."""

    items = list(values)
    if not items:
        raise ValueError("mean requires at least one value")
    total = 0.0
    for value in items:
        total += value
    return total / len(items)


def population_std_dev(values: Iterable[float]) -> float:
    """Standard deviation with the full count as divisor."""

    items = list(values)
    if not items:
        raise ValueError("population_std_dev requires at least one value")
    centre = mean(items)
    squares = 0.0
    for value in items:
        squares += (value - centre) * (value - centre)
    return math.sqrt(squares / len(items))


def summarise(bids: Iterable[float], asks: Iterable[float]) -> SummaryStatistics:
    return SummaryStatistics(mean_bid=mean(bids), ask_std_dev=population_std_dev(asks))


__all__ = ["mean", "population_std_dev", "summarise"]
