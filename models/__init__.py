"""Data models."""
from models.enums import Signal, Side, Confidence, Asset, Stage
from models.series import PricePoint, PriceSeries, AlignedPoint, RatioPoint
from models.analysis import ScoreBreakdown, AnalysisResult
