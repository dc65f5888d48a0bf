"""Public interface for the nbp_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Sequence

from nbp_rates.analytics.statistics import mean, population_std_dev, summarise
from nbp_rates.ingestion.extractor import ASK_TAG, BID_TAG, CorruptedServerResponseError, extract_rates
from nbp_rates.ingestion.models import RateSeries, RequestTarget, SummaryStatistics
from nbp_rates.ingestion.nbp_requests import NBPRequestsClient
from nbp_rates.ingestion.request_builder import build_request_target, build_request_target_from_args
from nbp_rates.ingestion.strategy import RateTransport
from nbp_rates.utils.logger import get_logger

__all__ = [
    "__version__",
    "CorruptedServerResponseError",
    "NBPRequestsClient",
    "NbpRates",
    "RateSeries",
    "RateTransport",
    "RequestTarget",
    "SummaryStatistics",
    "build_request_target",
    "extract_rates",
    "mean",
    "population_std_dev",
]

try:
    __version__ = importlib_metadata.version("nbp-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


class NbpRates:
    """Fetch table C rates for one currency and expose bid/ask statistics."""

    __slots__ = ("client", "_bids", "_asks")

    __version__ = __version__

    def __init__(self, client: RateTransport | None = None) -> None:
        """Use ``client`` for network access, defaulting to :class:`NBPRequestsClient`."""

        self.client: RateTransport = client if client is not None else NBPRequestsClient()
        self._bids: RateSeries | None = None
        self._asks: RateSeries | None = None

    @property
    def bids(self) -> RateSeries | None:
        return self._bids

    @property
    def asks(self) -> RateSeries | None:
        return self._asks

    def fetch_data(self, tokens: Sequence[str]) -> bool:
        """Load rates for raw ``CODE START [END]`` tokens.

        Returns ``False`` when the input is rejected or the service yields no
        body. :class:`CorruptedServerResponseError` and :class:`ValueError`
        from payload extraction propagate to the caller.
        """

        return self._load(build_request_target_from_args(tokens))

    def fetch(self, currency: str, start: str, end: str | None = None) -> bool:
        """Keyword-friendly variant of :meth:`fetch_data`."""

        return self._load(build_request_target(currency, start, end))

    def _load(self, target: RequestTarget | None) -> bool:
        if target is None:
            return False
        payload = self.client.fetch(target.url)
        if payload is None:
            return False
        bids = extract_rates(payload, BID_TAG)
        asks = extract_rates(payload, ASK_TAG)
        self._bids, self._asks = bids, asks
        LOGGER.info(
            "Loaded %s bid and %s ask rates for %s", len(bids), len(asks), target.currency.upper()
        )
        return True

    def avg_bid(self) -> float:
        """Return the mean of the loaded bid rates."""

        return mean(self._require(self._bids))

    def ask_standard_deviation(self) -> float:
        """Return the population standard deviation of the loaded ask rates."""

        return population_std_dev(self._require(self._asks))

    def summary(self) -> SummaryStatistics:
        return summarise(self._require(self._bids), self._require(self._asks))

    @staticmethod
    def _require(series: RateSeries | None) -> RateSeries:
        if series is None:
            raise RuntimeError("No rates loaded; call fetch_data() first")
        return series
