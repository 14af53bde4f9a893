"""Terminal rendering of an AnalysisResult."""
import calendar

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dashboard.theme import SIGNAL_COLORS, BTC_ORANGE, ETH_BLUE
from dashboard.widgets import sparkline, confidence_bar, side_mark
from models.enums import Side, Signal
from monitor.signals import seasonal_bias
from utils.formatters import format_usd, format_ratio, format_zscore, format_pct

SIGNAL_TEXT = {
    Signal.HOLD_ETH: "Statistical indicators favor Ethereum outperformance relative to Bitcoin.",
    Signal.HOLD_BTC: "Bitcoin shows stronger relative strength or a lower risk profile currently.",
    Signal.NEUTRAL: "Market conditions are mixed. Maintain current allocation.",
}


def demo_banner(result):
    if not result.is_demo:
        return None
    return Panel(
        "Live data unavailable (API limits). Showing simulated scenarios.",
        style="warning", expand=True,
    )


def signal_card(result):
    color = SIGNAL_COLORS[result.signal.value]
    body = (
        f"[bold {color}]{result.signal.value}[/bold {color}]\n"
        f"{SIGNAL_TEXT[result.signal]}\n\n"
        f"Confidence: {confidence_bar(result.confidence.value)}\n"
        f"[{ETH_BLUE}]ETH {result.eth_score} pts[/{ETH_BLUE}]  |  "
        f"[{BTC_ORANGE}]BTC {result.btc_score} pts[/{BTC_ORANGE}]"
    )
    return Panel(body, title="Current Directive", border_style=color)


def metrics_table(result):
    table = Table(title="Market Metrics", show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("Date", result.current_date)
    table.add_row("ETH/BTC ratio", format_ratio(result.current_ratio))
    table.add_row("ETH price", format_usd(result.current_eth_price))
    table.add_row("BTC price", format_usd(result.current_btc_price))
    table.add_row("50 DMA", format_ratio(result.ma50))
    table.add_row("200 DMA", format_ratio(result.ma200))
    table.add_row("Z-score", format_zscore(result.z_score))
    table.add_row("BTC dominance", format_pct(result.btc_dominance))
    return table


def breakdown_table(result):
    table = Table(title="Scoring Logic Breakdown")
    table.add_column("Criterion")
    table.add_column("Reading", style="dim")
    table.add_column("ETH", justify="center")
    table.add_column("BTC", justify="center")
    table.add_column("Pts", justify="right")
    for row in result.breakdown:
        table.add_row(
            row.label,
            row.value,
            side_mark(row.points_for, Side.ETH.value),
            side_mark(row.points_for, Side.BTC.value),
            str(row.points),
        )
    return table


def history_sparkline(result, width=60):
    ratios = [p.ratio for p in result.history]
    if not ratios:
        return ""
    first, last = result.history[0].date, result.history[-1].date
    return f"[bold]ETH/BTC[/bold] {first} {sparkline(ratios, width=width)} {last} ({len(ratios)} days)"


def season_note(month):
    """Current-month seasonality flag, from the same buckets the scorer uses."""
    side = seasonal_bias(month)
    name = calendar.month_name[month]
    if side == Side.NEUTRAL:
        return f"{name}: no seasonal bias"
    return f"{name}: seasonally favors {side.value}"


def build_report(result):
    """Everything the analyze command prints, as one renderable."""
    if result.error:
        return Panel(f"[bold]Data Feed Error[/bold]\n{escape(result.error)}", style="critical")

    parts = []
    banner = demo_banner(result)
    if banner is not None:
        parts.append(banner)
    parts.extend([
        signal_card(result),
        metrics_table(result),
        history_sparkline(result),
        breakdown_table(result),
        f"[dim]{season_note(result.generated_at.month)} | Source: {result.source} "
        f"({result.stage.value if result.stage else 'n/a'})[/dim]",
    ])
    return Group(*parts)
