"""Abstractions for pluggable rate transports."""

from __future__ import annotations

from typing import Protocol


class RateTransport(Protocol):
    """Contract for retrieving a raw rate payload.

    Implementations perform a single GET against ``url`` and return the body,
    or ``None`` when the service is unreachable or answers with a non-success
    status.
    """

    def fetch(self, url: str) -> str | None:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateTransport"]
