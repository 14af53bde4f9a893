"""Aggregate analysis record handed to the presentation layer."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from models.enums import Signal, Side, Stage


@dataclass(frozen=True)
class ScoreBreakdown:
    """One scoring rule's contribution, for the breakdown table."""
    rule: str
    label: str
    value: str
    points_for: Side = Side.NEUTRAL
    points: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    current_date: str = ""
    current_ratio: float = 0.0
    current_eth_price: float = 0.0
    current_btc_price: float = 0.0
    ma50: Optional[float] = None
    ma200: Optional[float] = None
    z_score: Optional[float] = None
    btc_dominance: float = 0.0
    eth_score: int = 0
    btc_score: int = 0
    signal: Signal = Signal.NEUTRAL
    history: tuple = ()
    breakdown: tuple = ()
    is_demo: bool = False
    error: Optional[str] = None
    source: str = ""
    stage: Optional[Stage] = None
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def confidence(self):
        from monitor.signals import confidence_label
        return confidence_label(self.eth_score, self.btc_score)

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def failed(cls, message, generated_at=None):
        """Result for a run where even synthetic data could not be produced."""
        return cls(
            is_demo=True,
            error=message,
            source="synthetic",
            stage=Stage.SYNTHETIC,
            generated_at=generated_at or datetime.now(timezone.utc),
        )

    def to_dict(self, history_limit=None):
        """Flatten into a JSON-ready dict. history_limit keeps only the last N rows."""
        history = self.history
        if history_limit is not None:
            history = history[-history_limit:] if history_limit > 0 else ()
        return {
            "current_date": self.current_date,
            "current_ratio": self.current_ratio,
            "current_eth_price": self.current_eth_price,
            "current_btc_price": self.current_btc_price,
            "ma50": self.ma50,
            "ma200": self.ma200,
            "z_score": self.z_score,
            "btc_dominance": self.btc_dominance,
            "eth_score": self.eth_score,
            "btc_score": self.btc_score,
            "signal": self.signal.value,
            "confidence": self.confidence.value,
            "breakdown": [
                {
                    "rule": b.rule,
                    "label": b.label,
                    "value": b.value,
                    "points_for": b.points_for.value,
                    "points": b.points,
                }
                for b in self.breakdown
            ],
            "is_demo": self.is_demo,
            "error": self.error,
            "source": self.source,
            "stage": self.stage.value if self.stage else None,
            "generated_at": self.generated_at.isoformat(),
            "history": [p.to_dict() for p in history],
        }
