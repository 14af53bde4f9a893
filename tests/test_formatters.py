"""Tests for formatters and report widgets."""
from utils.formatters import format_usd, format_ratio, format_zscore, format_pct
from dashboard.widgets import sparkline, confidence_bar, side_mark


def test_format_usd():
    assert format_usd(67543.21) == "$67,543.21"
    assert format_usd(0) == "$0.00"
    assert format_usd(None) == "N/A"


def test_format_ratio():
    assert format_ratio(0.075) == "0.07500"
    assert format_ratio(0.0531234, decimals=3) == "0.053"
    assert format_ratio(None) == "N/A"


def test_format_zscore():
    assert format_zscore(0.0) == "+0.00"
    assert format_zscore(-1.5) == "[green]-1.50[/green]"
    assert format_zscore(2.25) == "[red]+2.25[/red]"
    assert format_zscore(1.0) == "+1.00"
    assert format_zscore(None) == "N/A"


def test_format_pct():
    assert format_pct(58.5) == "58.5%"
    assert format_pct(54.234, decimals=2) == "54.23%"
    assert format_pct(None) == "N/A"


def test_sparkline():
    line = sparkline([1, 3, 2, 8])
    assert len(line) == 4
    assert line[0] == "▁" and line[-1] == "█"
    assert sparkline([]) == ""
    assert sparkline([None, None]) == ""
    assert len(sparkline(list(range(100)), width=10)) == 10


def test_sparkline_flat():
    assert sparkline([0.075] * 5) == "▁▁▁▁▁"


def test_confidence_bar():
    assert confidence_bar("High").count("█") == 3
    assert confidence_bar("Medium").count("█") == 2
    assert confidence_bar("Low").count("░") == 2


def test_side_mark():
    assert "●" in side_mark("ETH", "ETH")
    assert "○" in side_mark("BTC", "ETH")
    assert "○" in side_mark("NEUTRAL", "BTC")
