from nbp_rates import CorruptedServerResponseError, NbpRates

print(NbpRates.__version__)  # 0.1.0

rates = NbpRates()

# Single day
if rates.fetch("USD", "2024-03-01"):
    print(rates.bids)

# Up to 92 days after the start date
try:
    loaded = rates.fetch_data(["eur", "2024-01-02", "2024-03-29"])
except CorruptedServerResponseError as exc:
    print(f"NBP returned an unusable payload: {exc}")
else:
    if loaded:
        print(rates.avg_bid())
        print(rates.ask_standard_deviation())
        print(rates.summary())
    else:
        print("Rejected input or NBP unreachable")
