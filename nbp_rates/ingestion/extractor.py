"""Pull numeric rate fields out of NBP XML payloads without a markup parser."""

from __future__ import annotations

from nbp_rates.ingestion.models import RateSeries
from nbp_rates.utils.logger import get_logger
from nbp_rates.utils.nbp import RATE_FIELD_WIDTH

LOGGER = get_logger(__name__)

BID_TAG = "Bid"
ASK_TAG = "Ask"


class CorruptedServerResponseError(RuntimeError):
    """Raised when the expected tag never occurs in a server payload."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Server response contains no <{tag}> entries")
        self.tag = tag


def extract_rates(payload: str, tag: str, *, field_width: int | None = RATE_FIELD_WIDTH) -> RateSeries:
    """Return the values that follow each ``<tag>`` marker in ``payload``.

    With the default ``field_width`` every value is read from a fixed
    six-character window (``D.DDDD``). A rate of 10.0000 or more is therefore
    truncated to its first six characters instead of being reported. Pass
    ``field_width=None`` to read each value up to the next ``<`` instead.

    Raises :class:`CorruptedServerResponseError` when the marker is absent and
    :class:`ValueError` when a field is too short or not numeric.
    """

    fragments = payload.split(f"<{tag}>")
    while len(fragments) > 1 and not fragments[-1]:
        fragments.pop()
    if len(fragments) < 2:
        raise CorruptedServerResponseError(tag)

    values = tuple(_read_field(fragment, field_width) for fragment in fragments[1:])
    LOGGER.debug("Extracted %s <%s> values", len(values), tag)
    return RateSeries(tag=tag, values=values)


def _read_field(fragment: str, field_width: int | None) -> float:
    if field_width is None:
        field = fragment.split("<", 1)[0]
    else:
        if len(fragment) < field_width:
            raise ValueError(f"rate field {fragment!r} is shorter than {field_width} characters")
        field = fragment[:field_width]
    return float(field)


__all__ = ["ASK_TAG", "BID_TAG", "CorruptedServerResponseError", "extract_rates"]
