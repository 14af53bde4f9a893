"""Dataclasses for raw price series and the aligned ETH/BTC ratio history."""
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class PricePoint:
    timestamp: int  # epoch milliseconds
    price: float


@dataclass(frozen=True)
class PriceSeries:
    """Daily BTC and ETH closes from one provider, oldest first."""
    btc: tuple = ()
    eth: tuple = ()
    source: str = ""

    @property
    def is_empty(self):
        return not self.btc or not self.eth

    def __len__(self):
        return min(len(self.btc), len(self.eth))


@dataclass(frozen=True)
class AlignedPoint:
    date: str
    timestamp: int
    eth_price: float
    btc_price: float
    ratio: float


@dataclass(frozen=True)
class RatioPoint:
    date: str
    timestamp: int
    eth_price: float
    btc_price: float
    ratio: float
    ma50: Optional[float] = None
    ma200: Optional[float] = None
    z_score: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)
