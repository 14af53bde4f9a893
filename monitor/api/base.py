"""Common contract for daily price-history providers.

Every provider fetches BTC and ETH concurrently and hands back a
PriceSeries with epoch-ms timestamps, oldest first. Subclasses only know
their endpoint and payload shape; ordering, unit conversion and price
validation happen here.
"""
import logging
import math
import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor

from models.enums import Asset
from models.series import PricePoint, PriceSeries
from monitor.errors import SourceUnavailable
from utils.http_client import HTTPClient, APIError


class PriceSourceClient(ABC):
    NAME = "source"
    BASE_URL = ""
    TIMESTAMP_UNIT = "ms"   # "s" or "ms"
    NEWEST_FIRST = False

    def __init__(self, base_url=None, timeout=30, user_agent="RatioPulse/1.0"):
        self.client = HTTPClient(
            base_url=base_url or self.BASE_URL,
            timeout=timeout,
            user_agent=user_agent,
            source=self.NAME,
        )
        self.logger = logging.getLogger(f"ratiopulse.{self.NAME}")

    @abstractmethod
    def fetch_raw(self, asset: Asset) -> list:
        """Return [(timestamp, close), ...] for one asset in provider order."""

    def fetch(self) -> PriceSeries:
        """Fetch both assets concurrently. Either side failing fails the stage."""
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix=self.NAME) as executor:
            futures = {asset: executor.submit(self._fetch_asset, asset) for asset in (Asset.BTC, Asset.ETH)}

        results = {}
        failures = []
        for asset, future in futures.items():
            try:
                results[asset] = future.result()
            except SourceUnavailable as e:
                failures.append(f"{asset.value}: {e}")

        if failures:
            raise SourceUnavailable(f"{self.NAME} failed ({'; '.join(failures)})", source=self.NAME)

        series = PriceSeries(btc=results[Asset.BTC], eth=results[Asset.ETH], source=self.NAME)
        self.logger.info(f"{self.NAME}: {len(series.btc)} BTC / {len(series.eth)} ETH daily closes")
        return series

    def _fetch_asset(self, asset):
        try:
            return self.normalize(self.fetch_raw(asset))
        except SourceUnavailable:
            raise
        except APIError as e:
            raise SourceUnavailable(str(e), source=self.NAME, status_code=e.status_code) from e
        except (KeyError, IndexError, TypeError, ValueError, AttributeError, OverflowError) as e:
            raise SourceUnavailable(
                f"Malformed {self.NAME} payload for {asset.value}: {e!r}", source=self.NAME
            ) from e

    def normalize(self, raw) -> tuple:
        """Convert provider rows to ascending PricePoints, dropping bad prices."""
        points = []
        for row in raw:
            try:
                ts, price = row
                ts = self._to_millis(ts)
                price = float(price)
            except (TypeError, ValueError, OverflowError):
                self.logger.debug(f"Skipping malformed row: {row!r}")
                continue
            if not math.isfinite(price) or price <= 0:
                continue
            points.append(PricePoint(timestamp=ts, price=price))

        if self.NEWEST_FIRST:
            points.reverse()
        return tuple(points)

    def _to_millis(self, ts):
        if self.TIMESTAMP_UNIT == "s":
            return int(float(ts) * 1000)
        return int(ts)

    def health_check(self) -> dict:
        """Run one full fetch and report reachability and latency."""
        start = time.monotonic()
        try:
            series = self.fetch()
            latency = int((time.monotonic() - start) * 1000)
            return {"reachable": True, "latency_ms": latency, "points": len(series), "error": None}
        except SourceUnavailable as e:
            latency = int((time.monotonic() - start) * 1000)
            return {"reachable": False, "latency_ms": latency, "points": 0, "error": str(e)}

    def close(self):
        self.client.close()
