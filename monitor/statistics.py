"""Rolling statistics over the aligned ETH/BTC ratio.

Moving averages use a trailing window (last 50 / 200 ratios). The z-score
measures the current ratio against the whole expanding history seen so
far, with population standard deviation, and is 0.0 when that history has
no variance.
"""
import pandas as pd

from models.series import RatioPoint
from utils.constants import MA_SHORT_WINDOW, MA_LONG_WINDOW, ZSCORE_MIN_POINTS


def ratio_frame(aligned) -> pd.DataFrame:
    """ratio, ma50, ma200 and z_score columns, NaN where not yet defined."""
    ratios = pd.Series([row.ratio for row in aligned], dtype="float64")

    # z needs strictly more than ZSCORE_MIN_POINTS values in the prefix
    expanding = ratios.expanding(min_periods=ZSCORE_MIN_POINTS + 1)
    mean = expanding.mean()
    std = expanding.std(ddof=0)
    z_score = ((ratios - mean) / std).mask(std == 0, 0.0)

    return pd.DataFrame({
        "ratio": ratios,
        "ma50": ratios.rolling(MA_SHORT_WINDOW).mean(),
        "ma200": ratios.rolling(MA_LONG_WINDOW).mean(),
        "z_score": z_score,
    })


def _value(v):
    return None if pd.isna(v) else float(v)


def compute_history(aligned) -> list:
    """Attach ma50, ma200 and z-score to each aligned point."""
    aligned = list(aligned)
    if not aligned:
        return []

    frame = ratio_frame(aligned)
    return [
        RatioPoint(
            date=row.date,
            timestamp=row.timestamp,
            eth_price=row.eth_price,
            btc_price=row.btc_price,
            ratio=row.ratio,
            ma50=_value(ma50),
            ma200=_value(ma200),
            z_score=_value(z),
        )
        for row, ma50, ma200, z in zip(aligned, frame["ma50"], frame["ma200"], frame["z_score"])
    ]
