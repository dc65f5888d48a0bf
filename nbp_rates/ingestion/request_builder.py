"""Validate caller input and build NBP table C request targets."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from nbp_rates.ingestion.models import RequestTarget
from nbp_rates.utils.date_range import DateRange, is_available_start, try_parse_date, within_max_range
from nbp_rates.utils.logger import get_logger
from nbp_rates.utils.nbp import NBP_API_BASE_URL, NBP_OUTPUT_FORMAT, is_accepted_currency

LOGGER = get_logger(__name__)


def build_request_target(
    currency: str,
    start_text: str,
    end_text: str | None = None,
    *,
    today: date | None = None,
) -> RequestTarget | None:
    """Return a :class:`RequestTarget` or ``None`` when the input is rejected.

    Checks run in order and stop at the first failure: currency allow-list,
    strict start date, ``2002-01-02 < start < today``, then (when given) a
    strict end date no later than 92 days after ``start``.
    """

    if not is_accepted_currency(currency):
        LOGGER.debug("Rejected unsupported currency code %r", currency)
        return None

    start = try_parse_date(start_text)
    if start is None:
        LOGGER.debug("Rejected malformed start date %r", start_text)
        return None

    reference_day = today or date.today()
    if not is_available_start(start, reference_day):
        LOGGER.debug("Rejected start date %s outside the published range", start)
        return None

    end: date | None = None
    if end_text is not None:
        end = try_parse_date(end_text)
        if end is None:
            LOGGER.debug("Rejected malformed end date %r", end_text)
            return None
        if not within_max_range(start, end):
            LOGGER.debug("Rejected range %s..%s exceeding the allowed window", start, end)
            return None

    date_range = DateRange(start=start, end=end)
    path = "".join(f"{segment}/" for segment in (currency, *date_range.segments()))
    url = f"{NBP_API_BASE_URL}/{path}{NBP_OUTPUT_FORMAT}"
    return RequestTarget(currency=currency, date_range=date_range, url=url)


def build_request_target_from_args(
    tokens: Sequence[str], *, today: date | None = None
) -> RequestTarget | None:
    """Build a target from raw ``CODE START [END]`` tokens; extra tokens are ignored."""

    if len(tokens) < 2:
        LOGGER.debug("Rejected input with %s token(s)", len(tokens))
        return None
    end_text = tokens[2] if len(tokens) > 2 else None
    return build_request_target(tokens[0], tokens[1], end_text, today=today)


__all__ = ["build_request_target", "build_request_target_from_args"]
