"""Inner-join BTC and ETH daily closes on UTC calendar date."""
import logging
from datetime import datetime, timezone

from models.series import AlignedPoint

logger = logging.getLogger("ratiopulse.aligner")


def date_key(timestamp_ms):
    """UTC calendar day (YYYY-MM-DD) of an epoch-ms timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


def align(series) -> list:
    """Pair each ETH close with the BTC close of the same UTC day.

    Days missing on either side are dropped. Output follows ETH order, and
    a repeated ETH day keeps its first position with the latest values.
    """
    btc_by_date = {}
    for point in series.btc:
        btc_by_date[date_key(point.timestamp)] = point.price

    aligned = []
    positions = {}
    for point in series.eth:
        day = date_key(point.timestamp)
        btc_price = btc_by_date.get(day)
        if btc_price is None:
            continue
        row = AlignedPoint(
            date=day,
            timestamp=point.timestamp,
            eth_price=point.price,
            btc_price=btc_price,
            ratio=point.price / btc_price,
        )
        if day in positions:
            aligned[positions[day]] = row
        else:
            positions[day] = len(aligned)
            aligned.append(row)

    dropped = len(series.eth) - len(aligned)
    if dropped:
        logger.debug(f"Aligned {len(aligned)} days, dropped {dropped} unmatched or duplicate ETH rows")
    return aligned
