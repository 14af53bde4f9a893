"""CoinGecko market chart client (tertiary price source)."""
from models.enums import Asset
from monitor.api.base import PriceSourceClient
from monitor.errors import SourceUnavailable
from utils.constants import FULL_LOOKBACK_DAYS


class CoinGeckoClient(PriceSourceClient):
    NAME = "coingecko"
    BASE_URL = "https://api.coingecko.com/api/v3"
    TIMESTAMP_UNIT = "ms"
    COIN_IDS = {Asset.BTC: "bitcoin", Asset.ETH: "ethereum"}

    def __init__(self, base_url=None, timeout=30, user_agent="RatioPulse/1.0",
                 lookback_days=FULL_LOOKBACK_DAYS):
        super().__init__(base_url=base_url, timeout=timeout, user_agent=user_agent)
        self.lookback_days = lookback_days

    def fetch_raw(self, asset):
        data = self.client.get(f"/coins/{self.COIN_IDS[asset]}/market_chart", params={
            "vs_currency": "usd",
            "days": str(self.lookback_days),
        })
        if not isinstance(data, dict):
            raise SourceUnavailable(f"Unexpected CoinGecko payload for {asset.value}", source=self.NAME)

        status = data.get("status")
        error = data.get("error")
        if not error and isinstance(status, dict) and (status.get("error_code") or status.get("error_message")):
            error = status.get("error_message") or f"error_code {status.get('error_code')}"
        if error:
            raise SourceUnavailable(f"CoinGecko error for {asset.value}: {error}", source=self.NAME)

        return [(ts, price) for ts, price in data["prices"]]
