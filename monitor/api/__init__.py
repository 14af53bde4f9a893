"""Price source registry: builds the ordered fallback chain from config."""
import logging

from models.enums import Stage
from monitor.api.coinbase import CoinbaseClient
from monitor.api.coingecko import CoinGeckoClient
from monitor.api.cryptocompare import CryptoCompareClient
from monitor.api.dominance import DominanceClient

logger = logging.getLogger("ratiopulse.api")


class SourceRegistry:
    def __init__(self, config=None):
        cfg = config or {}
        http_cfg = cfg.get("http", {})
        src_cfg = cfg.get("sources", {})
        timeout = http_cfg.get("timeout", 30)
        user_agent = http_cfg.get("user_agent", "RatioPulse/1.0")

        cc = src_cfg.get("cryptocompare", {})
        self.cryptocompare = CryptoCompareClient(
            base_url=cc.get("base_url"),
            timeout=timeout,
            user_agent=user_agent,
            lookback_days=cc.get("lookback_days", 730),
        )
        cb = src_cfg.get("coinbase", {})
        self.coinbase = CoinbaseClient(
            base_url=cb.get("base_url"),
            timeout=timeout,
            user_agent=user_agent,
            granularity=cb.get("granularity", 86400),
        )
        cg = src_cfg.get("coingecko", {})
        self.coingecko = CoinGeckoClient(
            base_url=cg.get("base_url"),
            timeout=timeout,
            user_agent=user_agent,
            lookback_days=cg.get("lookback_days", 730),
        )
        dom = cfg.get("dominance", {})
        self.dominance = DominanceClient(
            base_url=dom.get("base_url", "https://api.coingecko.com/api/v3"),
            timeout=timeout,
            user_agent=user_agent,
        )

    def stages(self):
        """Network stages in priority order."""
        return [
            (Stage.PRIMARY, self.cryptocompare),
            (Stage.SECONDARY, self.coinbase),
            (Stage.TERTIARY, self.coingecko),
        ]

    def health_check(self):
        """Fetch once from each price source and time it."""
        checks = {}
        for stage, client in self.stages():
            info = client.health_check()
            info["stage"] = stage.value
            checks[client.NAME] = info
            logger.debug(f"{client.NAME}: reachable={info['reachable']} ({info['latency_ms']}ms)")
        return checks

    def close(self):
        for _, client in self.stages():
            client.close()
        self.dominance.close()
