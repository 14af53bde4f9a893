"""Coinbase Exchange candles client (secondary price source).

The candles endpoint caps one page at 300 rows, so this source only covers
the last ~300 days. ma200 still appears; the z-score baseline is shorter
than on the other sources.
"""
from models.enums import Asset
from monitor.api.base import PriceSourceClient
from monitor.errors import SourceUnavailable

DAILY_GRANULARITY = 86400

# Candle row layout: [time, low, high, open, close, volume]
CANDLE_TIME = 0
CANDLE_CLOSE = 4


class CoinbaseClient(PriceSourceClient):
    NAME = "coinbase"
    BASE_URL = "https://api.exchange.coinbase.com"
    TIMESTAMP_UNIT = "s"
    NEWEST_FIRST = True
    PRODUCTS = {Asset.BTC: "BTC-USD", Asset.ETH: "ETH-USD"}

    def __init__(self, base_url=None, timeout=30, user_agent="RatioPulse/1.0",
                 granularity=DAILY_GRANULARITY):
        super().__init__(base_url=base_url, timeout=timeout, user_agent=user_agent)
        self.granularity = granularity

    def fetch_raw(self, asset):
        data = self.client.get(f"/products/{self.PRODUCTS[asset]}/candles", params={
            "granularity": str(self.granularity),
        })
        if isinstance(data, dict):
            raise SourceUnavailable(
                f"Coinbase error for {asset.value}: {data.get('message') or 'unexpected payload'}",
                source=self.NAME,
            )
        if not isinstance(data, list):
            raise SourceUnavailable(f"Unexpected Coinbase payload for {asset.value}", source=self.NAME)
        return [(c[CANDLE_TIME], c[CANDLE_CLOSE]) for c in data]
