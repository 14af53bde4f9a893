#!/usr/bin/env python3
"""RatioPulse - ETH/BTC relative value monitor, CLI entry point."""
import sys
import json
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from __version__ import __version__
from dashboard.theme import REPORT_THEME

console = Console(theme=REPORT_THEME)


def _init_components(config_path=None, verbose=False):
    """Lazy initialization of all components."""
    from utils.logger import setup_logging
    from config import load_config
    from monitor.api import SourceRegistry
    from monitor.monitor import RatioMonitor

    config = load_config(config_path)
    log_cfg = config.get("logging", {})
    setup_logging("DEBUG" if verbose else log_cfg.get("level", "INFO"), log_cfg.get("file"))

    registry = SourceRegistry(config)
    monitor = RatioMonitor(registry)
    return {"config": config, "registry": registry, "monitor": monitor}


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="ratiopulse")
@click.pass_context
def cli(ctx, config_path, verbose):
    """RatioPulse - ETH/BTC ratio trend, z-score and rotation signal."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


def _get_components(ctx):
    if "_components" not in ctx.obj:
        ctx.obj["_components"] = _init_components(ctx.obj.get("config_path"), ctx.obj.get("verbose"))
    return ctx.obj["_components"]


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--history", "history_rows", default=0, type=click.IntRange(min=0),
              help="Include the last N history rows in JSON output")
@click.pass_context
def analyze(ctx, as_json, history_rows):
    """Fetch prices, compute the ratio statistics and print the signal."""
    c = _get_components(ctx)
    try:
        result = c["monitor"].run()
    finally:
        c["registry"].close()

    if as_json:
        click.echo(json.dumps(result.to_dict(history_limit=history_rows), indent=2, default=str))
    else:
        from dashboard.report import build_report
        console.print(build_report(result))

    if result.error:
        ctx.exit(1)


@cli.command()
@click.pass_context
def sources(ctx):
    """Check each price source once and report latency."""
    c = _get_components(ctx)
    try:
        checks = c["registry"].health_check()
    finally:
        c["registry"].close()

    table = Table(title="Price Sources")
    table.add_column("Source")
    table.add_column("Stage")
    table.add_column("Status")
    table.add_column("Days", justify="right")
    table.add_column("Latency", justify="right")
    for name, info in checks.items():
        status = "[green]✓ reachable[/green]" if info["reachable"] else f"[red]✗ {escape(str(info['error']))}[/red]"
        table.add_row(name, info["stage"], status, str(info["points"]), f"{info['latency_ms']}ms")
    console.print(table)


if __name__ == "__main__":
    cli()
