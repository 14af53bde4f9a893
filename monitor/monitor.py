"""RatioMonitor - runs the full ETH/BTC analysis pipeline once."""
import logging
import random
from datetime import datetime, timezone

from models.analysis import AnalysisResult
from models.enums import Stage
from monitor.aligner import align
from monitor.errors import InsufficientAlignedData
from monitor.fallback import FallbackOrchestrator
from monitor.signals import SignalEngine
from monitor.statistics import compute_history
from monitor.synthetic import SyntheticDataGenerator
from utils.constants import DEMO_DOMINANCE

logger = logging.getLogger("ratiopulse.monitor")


def _utc_now():
    return datetime.now(timezone.utc)


class RatioMonitor:
    """Fetch, align, compute statistics and score. Always returns a result.

    clock supplies "now" for seasonality and synthetic dates; rng feeds the
    synthetic generator. Both are injectable so runs are reproducible.
    """

    def __init__(self, registry, clock=None, rng=None, engine=None, synthetic=None):
        self.registry = registry
        self.clock = clock or _utc_now
        self.engine = engine or SignalEngine()
        self.synthetic = synthetic or SyntheticDataGenerator(rng=rng or random.Random(), clock=self.clock)
        self.orchestrator = FallbackOrchestrator(registry.stages(), self.synthetic)

    def run(self) -> AnalysisResult:
        now = self.clock()
        try:
            outcome = self.orchestrator.run()
            if not outcome.is_demo:
                result = self._analyze_live(outcome, now)
                if result is not None:
                    return result
                outcome = self.orchestrator.synthetic(
                    f"{outcome.source} data could not be processed",
                    attempts=outcome.attempts,
                    errors=outcome.errors,
                )
            return self.analyze(outcome.series, DEMO_DOMINANCE, now,
                                stage=Stage.SYNTHETIC, source=outcome.source, is_demo=True)
        except Exception as e:
            logger.exception("Analysis failed even with simulated data")
            return AnalysisResult.failed(f"Analysis failed: {e}", generated_at=now)

    def _analyze_live(self, outcome, now):
        """Analyze real data; None means fall back to synthetic."""
        dominance = self.registry.dominance.fetch()
        try:
            return self.analyze(outcome.series, dominance, now,
                                stage=outcome.stage, source=outcome.source, is_demo=False)
        except InsufficientAlignedData as e:
            logger.warning(f"{outcome.source}: {e}")
        except Exception:
            logger.exception(f"Processing {outcome.source} data failed")
        return None

    def analyze(self, series, btc_dominance, now, stage, source, is_demo) -> AnalysisResult:
        """Align, compute statistics and score one PriceSeries."""
        history = compute_history(align(series))
        if not history:
            raise InsufficientAlignedData(
                f"no overlapping dates between {len(series.btc)} BTC and {len(series.eth)} ETH points"
            )

        latest = history[-1]
        card = self.engine.score(latest, btc_dominance, now.month)
        logger.info(
            f"{latest.date} ETH/BTC {latest.ratio:.5f} | ETH {card.eth_score} / BTC {card.btc_score} "
            f"-> {card.signal.value} ({len(history)} days, {source})"
        )
        return AnalysisResult(
            current_date=latest.date,
            current_ratio=latest.ratio,
            current_eth_price=latest.eth_price,
            current_btc_price=latest.btc_price,
            ma50=latest.ma50,
            ma200=latest.ma200,
            z_score=latest.z_score,
            btc_dominance=btc_dominance,
            eth_score=card.eth_score,
            btc_score=card.btc_score,
            signal=card.signal,
            history=tuple(history),
            breakdown=card.breakdown,
            is_demo=is_demo,
            source=source,
            stage=stage,
            generated_at=now,
        )
