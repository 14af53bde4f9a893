"""BTC market-cap dominance from CoinGecko's global endpoint."""
import logging

from monitor.errors import DominanceUnavailable
from utils.constants import FALLBACK_DOMINANCE
from utils.http_client import HTTPClient

logger = logging.getLogger("ratiopulse.dominance")


class DominanceClient:
    """Never raises: any failure degrades to FALLBACK_DOMINANCE."""

    def __init__(self, base_url="https://api.coingecko.com/api/v3", timeout=30,
                 user_agent="RatioPulse/1.0", fallback=FALLBACK_DOMINANCE):
        self.client = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
            source="coingecko-global",
        )
        self.fallback = fallback

    def fetch(self) -> float:
        try:
            return self.get_btc_dominance()
        except Exception as e:
            logger.warning(f"BTC dominance unavailable ({e}), using fallback {self.fallback}%")
            return self.fallback

    def get_btc_dominance(self) -> float:
        """Read data.market_cap_percentage.btc, raising DominanceUnavailable on a bad payload."""
        data = self.client.get("/global")
        try:
            value = float(data["data"]["market_cap_percentage"]["btc"])
        except (KeyError, TypeError, ValueError) as e:
            raise DominanceUnavailable(f"missing market_cap_percentage.btc: {e!r}") from e
        if not 0 <= value <= 100:
            raise DominanceUnavailable(f"dominance out of range: {value}")
        return value

    def close(self):
        self.client.close()
