"""Rule-based ETH vs BTC scoring.

Five independent rules each award points to one side:

  Trend        ratio above ma200 -> ETH, otherwise BTC           (2)
  Value        z < -1 -> ETH, z > 1 -> BTC, otherwise neither    (2)
  Momentum     ma50 above ma200 -> ETH, otherwise BTC            (1)
  Dominance    BTC.D <= 50% -> ETH, otherwise BTC                (1)
  Seasonality  Apr-Jun -> ETH, Jan-Mar and Sep -> BTC            (1)

A side needs a 3 point lead for a HOLD signal.
"""
import calendar
import logging
from dataclasses import dataclass

from models.analysis import ScoreBreakdown
from models.enums import Confidence, Side, Signal
from utils.constants import (
    TREND_WEIGHT, VALUE_WEIGHT, MOMENTUM_WEIGHT, DOMINANCE_WEIGHT, SEASONALITY_WEIGHT,
    ZSCORE_THRESHOLD, DOMINANCE_PIVOT, ROTATION_THRESHOLD,
    CONFIDENCE_HIGH_GAP, CONFIDENCE_MEDIUM_GAP,
    ETH_SEASON_MONTHS, BTC_SEASON_MONTHS,
)

logger = logging.getLogger("ratiopulse.signals")


@dataclass(frozen=True)
class Scorecard:
    eth_score: int
    btc_score: int
    signal: Signal
    breakdown: tuple

    @property
    def confidence(self):
        return confidence_label(self.eth_score, self.btc_score)


def seasonal_bias(month) -> Side:
    """Which side the calendar month favours. Shared with the presentation layer."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month in ETH_SEASON_MONTHS:
        return Side.ETH
    if month in BTC_SEASON_MONTHS:
        return Side.BTC
    return Side.NEUTRAL


def derive_signal(eth_score, btc_score) -> Signal:
    if eth_score >= btc_score + ROTATION_THRESHOLD:
        return Signal.HOLD_ETH
    if btc_score >= eth_score + ROTATION_THRESHOLD:
        return Signal.HOLD_BTC
    return Signal.NEUTRAL


def confidence_label(eth_score, btc_score) -> Confidence:
    gap = abs(eth_score - btc_score)
    if gap >= CONFIDENCE_HIGH_GAP:
        return Confidence.HIGH
    if gap >= CONFIDENCE_MEDIUM_GAP:
        return Confidence.MEDIUM
    return Confidence.LOW


def _fmt(value, spec):
    return "n/a" if value is None else format(value, spec)


class SignalEngine:
    def score(self, latest, btc_dominance, month) -> Scorecard:
        """Score the latest RatioPoint. month is the current calendar month (1-12)."""
        breakdown = (
            self.trend(latest),
            self.value(latest),
            self.momentum(latest),
            self.dominance(btc_dominance),
            self.seasonality(month),
        )
        eth_score = sum(b.points for b in breakdown if b.points_for == Side.ETH)
        btc_score = sum(b.points for b in breakdown if b.points_for == Side.BTC)
        signal = derive_signal(eth_score, btc_score)
        logger.debug(f"Scores ETH {eth_score} / BTC {btc_score} -> {signal.value}")
        return Scorecard(eth_score=eth_score, btc_score=btc_score, signal=signal, breakdown=breakdown)

    def trend(self, latest):
        favours_eth = latest.ma200 is not None and latest.ratio > latest.ma200
        return ScoreBreakdown(
            rule="trend",
            label="Trend vs 200 DMA",
            value=f"Ratio: {latest.ratio:.5f} vs {_fmt(latest.ma200, '.5f')}",
            points_for=Side.ETH if favours_eth else Side.BTC,
            points=TREND_WEIGHT,
        )

    def value(self, latest):
        z = latest.z_score
        if z is not None and z < -ZSCORE_THRESHOLD:
            side = Side.ETH
        elif z is not None and z > ZSCORE_THRESHOLD:
            side = Side.BTC
        else:
            side = Side.NEUTRAL
        return ScoreBreakdown(
            rule="value",
            label="Statistical Value (Z-Score)",
            value=f"Z: {_fmt(z, '.2f')}",
            points_for=side,
            points=VALUE_WEIGHT if side != Side.NEUTRAL else 0,
        )

    def momentum(self, latest):
        if latest.ma50 is None or latest.ma200 is None:
            side = Side.NEUTRAL
        elif latest.ma50 > latest.ma200:
            side = Side.ETH
        else:
            side = Side.BTC
        return ScoreBreakdown(
            rule="momentum",
            label="Momentum Cross",
            value=f"50 DMA {_fmt(latest.ma50, '.5f')} vs 200 DMA {_fmt(latest.ma200, '.5f')}",
            points_for=side,
            points=MOMENTUM_WEIGHT if side != Side.NEUTRAL else 0,
        )

    def dominance(self, btc_dominance):
        return ScoreBreakdown(
            rule="dominance",
            label="Market Dominance",
            value=f"BTC.D: {btc_dominance:.1f}%",
            points_for=Side.BTC if btc_dominance > DOMINANCE_PIVOT else Side.ETH,
            points=DOMINANCE_WEIGHT,
        )

    def seasonality(self, month):
        side = seasonal_bias(month)
        return ScoreBreakdown(
            rule="seasonality",
            label="Seasonality",
            value=f"Month: {calendar.month_abbr[month]}",
            points_for=side,
            points=SEASONALITY_WEIGHT if side != Side.NEUTRAL else 0,
        )
