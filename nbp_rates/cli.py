"""Print the mean bid and ask standard deviation for an NBP table C currency."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from nbp_rates import CorruptedServerResponseError, NbpRates
from nbp_rates.ingestion.nbp_requests import NBPRequestsClient
from nbp_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "main"]

EXIT_FAILURE = 1
EXIT_CORRUPTED_RESPONSE = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("currency", help="Three-letter currency code, e.g. USD")
    parser.add_argument("start", help="Start date (YYYY-MM-DD)")
    parser.add_argument(
        "end",
        nargs="?",
        default=None,
        help="Optional end date (YYYY-MM-DD), less than 93 days after the start date",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    tokens = [args.currency, args.start] + ([args.end] if args.end is not None else [])

    with NBPRequestsClient() as client:
        rates = NbpRates(client)
        try:
            loaded = rates.fetch_data(tokens)
        except CorruptedServerResponseError as exc:
            LOGGER.error("%s", exc)
            print(f"Corrupted server response: {exc}", file=sys.stderr)
            return EXIT_CORRUPTED_RESPONSE

    if not loaded:
        print(
            "No data: check the currency code and dates, or the NBP API may be unreachable",
            file=sys.stderr,
        )
        return EXIT_FAILURE

    print(f"Average bid: {rates.avg_bid():.4f}")
    print(f"Ask standard deviation: {rates.ask_standard_deviation():.4f}")
    return 0


if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
