"""Series builders and test doubles shared across test modules."""
from datetime import datetime, timezone
from unittest.mock import MagicMock

from models.enums import Stage
from models.series import PricePoint, PriceSeries
from utils.constants import MS_PER_DAY

# 2024-01-01T00:00:00Z
BASE_TS = 1_704_067_200_000


def make_points(prices, start_ts=BASE_TS, step=MS_PER_DAY):
    return tuple(PricePoint(timestamp=start_ts + i * step, price=p) for i, p in enumerate(prices))


def make_series(eth_prices, btc_prices, source="test", start_ts=BASE_TS):
    return PriceSeries(btc=make_points(btc_prices, start_ts), eth=make_points(eth_prices, start_ts), source=source)


def flat_series(days=800, eth=1500.0, btc=20000.0):
    return make_series([eth] * days, [btc] * days)


def fixed_clock(year=2025, month=10, day=17):
    moment = datetime(year, month, day, 12, 0, tzinfo=timezone.utc)
    return lambda: moment


def make_registry(stage_clients, dominance=52.0):
    """Registry double exposing the same surface RatioMonitor uses."""
    registry = MagicMock()
    registry.stages.return_value = list(zip((Stage.PRIMARY, Stage.SECONDARY, Stage.TERTIARY), stage_clients))
    registry.dominance.fetch.return_value = dominance
    return registry


def stub_client(name, series=None, error=None):
    client = MagicMock()
    client.NAME = name
    if error is not None:
        client.fetch.side_effect = error
    else:
        client.fetch.return_value = series
    return client
