"""requests-based transport for the NBP exchange rates API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from nbp_rates.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import requests


LOGGER = get_logger(__name__)
DEFAULT_USER_AGENT = "nbp-rates/0.1"


class NBPRequestsClient:
    """Perform single, uncached GET requests against api.nbp.pl."""

    def __init__(
        self,
        *,
        timeout: int = 30,
        session: Optional["requests.Session"] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session if session is not None else self._new_session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/xml",
                "Cache-Control": "no-cache",
                "Pragma": "no-cache",
            }
        )

    @staticmethod
    def _new_session() -> "requests.Session":
        import requests

        return requests.Session()

    def fetch(self, url: str) -> str | None:
        """Return the response body, or ``None`` on network errors and non-200 statuses."""

        import requests

        LOGGER.info("Requesting %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.warning("Request to %s failed: %s", url, exc)
            return None
        if response.status_code != 200:
            LOGGER.warning("NBP API responded with HTTP %s for %s", response.status_code, url)
            return None
        return response.text

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "NBPRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["NBPRequestsClient"]
