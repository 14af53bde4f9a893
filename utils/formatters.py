"""Formatting utilities for display."""


def format_usd(value):
    """Format USD value with commas and 2 decimals."""
    if value is None:
        return "N/A"
    return f"${float(value):,.2f}"


def format_ratio(value, decimals=5):
    if value is None:
        return "N/A"
    return f"{float(value):.{decimals}f}"


def format_zscore(value):
    """Signed z-score with 2 decimals and rich color: cheap ETH green, rich ETH red."""
    if value is None:
        return "N/A"
    value = float(value)
    formatted = f"{value:+.2f}"
    if value < -1:
        return f"[green]{formatted}[/green]"
    if value > 1:
        return f"[red]{formatted}[/red]"
    return formatted


def format_pct(value, decimals=1):
    if value is None:
        return "N/A"
    return f"{float(value):.{decimals}f}%"
