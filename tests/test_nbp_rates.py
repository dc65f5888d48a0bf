"""Tests for the public package facade."""

from __future__ import annotations

import math

import pytest

import nbp_rates
from nbp_rates import CorruptedServerResponseError, NBPRequestsClient, NbpRates, __version__

PAYLOAD = (
    "<ExchangeRatesSeries><Code>USD</Code><Rates>"
    "<Rate><EffectiveDate>2020-01-02</EffectiveDate><Bid>1.0000</Bid><Ask>1.0000</Ask></Rate>"
    "<Rate><EffectiveDate>2020-01-03</EffectiveDate><Bid>2.0000</Bid><Ask>2.0000</Ask></Rate>"
    "<Rate><EffectiveDate>2020-01-06</EffectiveDate><Bid>3.0000</Bid><Ask>3.0000</Ask></Rate>"
    "</Rates></ExchangeRatesSeries>"
)


class _FakeClient:
    def __init__(self, payload: str | None) -> None:
        self.payload = payload
        self.urls: list[str] = []

    def fetch(self, url: str) -> str | None:
        self.urls.append(url)
        return self.payload


def test_nbp_rates_class_is_exposed() -> None:
    assert NbpRates.__version__ == __version__


def test_defaults_to_requests_client() -> None:
    assert isinstance(NbpRates().client, NBPRequestsClient)


def test_fetch_data_loads_both_series() -> None:
    client = _FakeClient(PAYLOAD)
    rates = NbpRates(client)

    assert rates.fetch_data(["usd", "2020-01-02", "2020-01-06"]) is True
    assert client.urls == [
        "http://api.nbp.pl/api/exchangerates/rates/c/usd/2020-01-02/2020-01-06/?format=xml"
    ]
    assert rates.bids is not None and rates.bids.values == (1.0, 2.0, 3.0)
    assert rates.asks is not None and rates.asks.values == (1.0, 2.0, 3.0)
    assert rates.avg_bid() == 2.0
    assert rates.ask_standard_deviation() == pytest.approx(math.sqrt(2 / 3))

    summary = rates.summary()
    assert summary.mean_bid == 2.0
    assert summary.ask_std_dev == pytest.approx(math.sqrt(2 / 3))


def test_fetch_keyword_variant() -> None:
    rates = NbpRates(_FakeClient(PAYLOAD))

    assert rates.fetch("EUR", "2020-01-02") is True
    assert rates.avg_bid() == 2.0


def test_rejected_input_skips_transport() -> None:
    client = _FakeClient(PAYLOAD)
    rates = NbpRates(client)

    assert rates.fetch_data(["XXX", "2020-01-02"]) is False
    assert rates.fetch_data(["USD"]) is False
    assert rates.fetch_data(["USD", "2020-01-01", "2020-04-03"]) is False
    assert client.urls == []
    assert rates.bids is None


def test_transport_failure_returns_false() -> None:
    rates = NbpRates(_FakeClient(None))

    assert rates.fetch_data(["USD", "2020-01-02"]) is False
    assert rates.asks is None


def test_corrupted_payload_propagates_without_partial_state() -> None:
    rates = NbpRates(_FakeClient("<Rates><Bid>1.0000</Bid></Rates>"))

    with pytest.raises(CorruptedServerResponseError) as excinfo:
        rates.fetch_data(["USD", "2020-01-02"])

    assert excinfo.value.tag == "Ask"
    assert rates.bids is None
    assert rates.asks is None


def test_malformed_rate_propagates_value_error() -> None:
    rates = NbpRates(_FakeClient("<Bid>x.yzzz</Bid><Ask>1.0000</Ask>"))

    with pytest.raises(ValueError):
        rates.fetch_data(["USD", "2020-01-02"])


def test_statistics_require_loaded_rates() -> None:
    rates = NbpRates(_FakeClient(PAYLOAD))

    with pytest.raises(RuntimeError):
        rates.avg_bid()
    with pytest.raises(RuntimeError):
        rates.ask_standard_deviation()


def test_package_exports() -> None:
    for name in nbp_rates.__all__:
        assert hasattr(nbp_rates, name)
