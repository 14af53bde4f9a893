"""Ordered multi-source price acquisition.

Stage order:
  1. Primary    (CryptoCompare, 731 days)
  2. Secondary  (Coinbase Exchange, ~300 days)
  3. Tertiary   (CoinGecko, 730 days)
  4. Synthetic  (simulated random walk, always succeeds)

Each stage is tried once, only after the previous one failed. A network
stage that returns an empty side is treated as a failure at the end, and
the run drops to Synthetic.
"""
import logging
from dataclasses import dataclass, field

from models.enums import Stage
from models.series import PriceSeries
from monitor.errors import EmptySeries

logger = logging.getLogger("ratiopulse.fallback")


@dataclass
class FetchOutcome:
    series: PriceSeries = field(default_factory=PriceSeries)
    stage: Stage = Stage.SYNTHETIC
    source: str = ""
    attempts: int = 0
    errors: list = field(default_factory=list)

    @property
    def is_demo(self):
        return self.stage == Stage.SYNTHETIC


class FallbackOrchestrator:
    def __init__(self, stages, synthetic):
        """stages: ordered [(Stage, client), ...]; synthetic: SyntheticDataGenerator."""
        self.stages = list(stages)
        self.synthetic_generator = synthetic

    def run(self) -> FetchOutcome:
        errors = []
        attempts = 0
        for stage, client in self.stages:
            attempts += 1
            name = getattr(client, "NAME", stage.value)
            try:
                series = client.fetch()
            except Exception as e:
                err = f"{stage.value} ({name}) failed: {e}"
                logger.warning(err)
                errors.append(err)
                continue

            if series.is_empty:
                err = str(EmptySeries(
                    f"{stage.value} ({name}) returned {len(series.btc)} BTC / {len(series.eth)} ETH points"
                ))
                logger.warning(err)
                errors.append(err)
                break

            logger.info(f"Using {name} ({stage.value} stage)")
            return FetchOutcome(series=series, stage=stage, source=name, attempts=attempts, errors=errors)

        return self.synthetic("all live sources failed", attempts=attempts, errors=errors)

    def synthetic(self, reason, attempts=0, errors=None) -> FetchOutcome:
        """Terminal stage. SyntheticDataError propagates to the caller."""
        logger.warning(f"Switching to simulated data: {reason}")
        series = self.synthetic_generator.generate()
        return FetchOutcome(
            series=series,
            stage=Stage.SYNTHETIC,
            source=series.source or "synthetic",
            attempts=attempts + 1,
            errors=list(errors or []),
        )
