"""Report color theme and styles."""
from rich.theme import Theme

BTC_ORANGE = "#F7931A"
ETH_BLUE = "#627EEA"
BULL_GREEN = "#00C853"
BEAR_RED = "#FF1744"
NEUTRAL_YELLOW = "#FFC107"
TEXT_DIM = "#888888"

SIDE_COLORS = {"ETH": ETH_BLUE, "BTC": BTC_ORANGE, "NEUTRAL": TEXT_DIM}
SIGNAL_COLORS = {"HOLD ETH": ETH_BLUE, "HOLD BTC": BTC_ORANGE, "NEUTRAL": "white"}
CONFIDENCE_COLORS = {"High": BULL_GREEN, "Medium": NEUTRAL_YELLOW, "Low": TEXT_DIM}

REPORT_THEME = Theme({
    "btc": f"bold {BTC_ORANGE}",
    "eth": f"bold {ETH_BLUE}",
    "bull": f"bold {BULL_GREEN}",
    "bear": f"bold {BEAR_RED}",
    "neutral": f"bold {NEUTRAL_YELLOW}",
    "dim": f"{TEXT_DIM}",
    "warning": "bold yellow",
    "critical": "bold white on red",
    "header": f"bold {ETH_BLUE}",
})
