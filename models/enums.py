"""Enums for signals, score sides, confidence, assets and fallback stages."""
from enum import Enum


class Signal(str, Enum):
    HOLD_ETH = "HOLD ETH"
    HOLD_BTC = "HOLD BTC"
    NEUTRAL = "NEUTRAL"


class Side(str, Enum):
    ETH = "ETH"
    BTC = "BTC"
    NEUTRAL = "NEUTRAL"


class Confidence(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Asset(str, Enum):
    BTC = "BTC"
    ETH = "ETH"


class Stage(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    SYNTHETIC = "synthetic"
