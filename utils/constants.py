"""Fixed analysis constants: windows, thresholds, month buckets, fallbacks."""

# Moving average windows (aligned days)
MA_SHORT_WINDOW = 50
MA_LONG_WINDOW = 200

# z-score needs strictly more than this many points in the prefix
ZSCORE_MIN_POINTS = 50
ZSCORE_THRESHOLD = 1.0

# Rule weights
TREND_WEIGHT = 2
VALUE_WEIGHT = 2
MOMENTUM_WEIGHT = 1
DOMINANCE_WEIGHT = 1
SEASONALITY_WEIGHT = 1

DOMINANCE_PIVOT = 50.0

# Score gap needed for a non-neutral signal
ROTATION_THRESHOLD = 3

# Confidence bands on |eth_score - btc_score|
CONFIDENCE_HIGH_GAP = 5
CONFIDENCE_MEDIUM_GAP = 3

# Seasonality buckets (calendar month numbers)
ETH_SEASON_MONTHS = frozenset({4, 5, 6})
BTC_SEASON_MONTHS = frozenset({1, 2, 3, 9})

# Dominance used when the live fetch fails, and for synthetic runs
FALLBACK_DOMINANCE = 58.5
DEMO_DOMINANCE = 54.2

# Lookback windows per provider (days)
FULL_LOOKBACK_DAYS = 730
COINBASE_MAX_CANDLES = 300

# Synthetic random walk
SYNTHETIC_DAYS = 731
SYNTHETIC_DRIFT_OFFSET = 0.45
SYNTHETIC_BTC = {"start": 20_000.0, "floor": 10_000.0, "volatility": 0.04}
SYNTHETIC_ETH = {"start": 1_500.0, "floor": 800.0, "volatility": 0.05}

MS_PER_DAY = 86_400_000
