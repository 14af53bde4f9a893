"""Simulated BTC/ETH history used when every live source fails."""
import logging
import random
from datetime import datetime, timedelta, timezone

from models.series import PricePoint, PriceSeries
from monitor.errors import SyntheticDataError
from utils.constants import (
    SYNTHETIC_DAYS, SYNTHETIC_DRIFT_OFFSET, SYNTHETIC_BTC, SYNTHETIC_ETH,
)

logger = logging.getLogger("ratiopulse.synthetic")

SOURCE_NAME = "synthetic"


def _utc_now():
    return datetime.now(timezone.utc)


class SyntheticDataGenerator:
    """Multiplicative random walk ending on the clock's current UTC day."""

    def __init__(self, rng=None, clock=None, days=SYNTHETIC_DAYS):
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now
        self.days = days

    def generate(self) -> PriceSeries:
        try:
            today = self.clock().astimezone(timezone.utc).date()
            btc_price = SYNTHETIC_BTC["start"]
            eth_price = SYNTHETIC_ETH["start"]
            btc, eth = [], []

            for offset in range(self.days - 1, -1, -1):
                day = today - timedelta(days=offset)
                ts = int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp() * 1000)
                btc_price = self._step(btc_price, SYNTHETIC_BTC)
                eth_price = self._step(eth_price, SYNTHETIC_ETH)
                btc.append(PricePoint(timestamp=ts, price=btc_price))
                eth.append(PricePoint(timestamp=ts, price=eth_price))
        except Exception as e:
            raise SyntheticDataError(f"synthetic generation failed: {e}") from e

        logger.warning(f"Generated {self.days} days of simulated prices ending {today}")
        return PriceSeries(btc=tuple(btc), eth=tuple(eth), source=SOURCE_NAME)

    def _step(self, price, params):
        shock = (self.rng.random() - SYNTHETIC_DRIFT_OFFSET) * params["volatility"]
        return max(params["floor"], price * (1 + shock))
