"""CryptoCompare daily history client (primary price source)."""
from models.enums import Asset
from monitor.api.base import PriceSourceClient
from monitor.errors import SourceUnavailable
from utils.constants import FULL_LOOKBACK_DAYS


class CryptoCompareClient(PriceSourceClient):
    NAME = "cryptocompare"
    BASE_URL = "https://min-api.cryptocompare.com/data/v2"
    TIMESTAMP_UNIT = "s"
    SYMBOLS = {Asset.BTC: "BTC", Asset.ETH: "ETH"}

    def __init__(self, base_url=None, timeout=30, user_agent="RatioPulse/1.0",
                 lookback_days=FULL_LOOKBACK_DAYS):
        super().__init__(base_url=base_url, timeout=timeout, user_agent=user_agent)
        self.lookback_days = lookback_days

    def fetch_raw(self, asset):
        data = self.client.get("/histoday", params={
            "fsym": self.SYMBOLS[asset],
            "tsym": "USD",
            "limit": str(self.lookback_days),
        })
        if not isinstance(data, dict):
            raise SourceUnavailable(f"Unexpected CryptoCompare payload for {asset.value}", source=self.NAME)
        # Errors come back as HTTP 200 with Response=Error
        if data.get("Response") == "Error":
            raise SourceUnavailable(
                f"CryptoCompare error for {asset.value}: {data.get('Message') or 'unknown'}",
                source=self.NAME,
            )
        return [(d["time"], d["close"]) for d in data["Data"]["Data"]]
