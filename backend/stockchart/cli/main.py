"""
Stock Chart Data Service - CLI Application
"""
import asyncio
from datetime import datetime, timezone
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from stockchart.config import settings
from stockchart.core.exceptions import StockChartError
from stockchart.logger import logger


app = typer.Typer(
    name="stockchart",
    help="Stock Chart Data Service CLI",
    add_completion=False,
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit")
):
    """
    Stock Chart Data Service CLI

    Daily OHLCV proxy with weekly/monthly candle aggregation.
    """
    if version:
        console.print(f"[cyan]{settings.APP_NAME}[/cyan] v{settings.APP_VERSION}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(Panel.fit(
            f"[bold cyan]{settings.APP_NAME}[/bold cyan]\n"
            f"[dim]Version {settings.APP_VERSION}[/dim]\n\n"
            f"[yellow]Use --help to see available commands[/yellow]",
            box=box.ROUNDED,
            border_style="cyan"
        ))


@app.command()
def server(
    host: str = typer.Option(settings.API.host, "--host", "-h", help="Server host"),
    port: int = typer.Option(settings.API.port, "--port", "-p", help="Server port"),
    reload: bool = typer.Option(settings.DEBUG, "--reload", "-r", help="Enable auto-reload")
):
    """
    Start the FastAPI server
    """
    import uvicorn

    console.print(f"[green]Starting server at http://{host}:{port}[/green]")
    console.print(f"[dim]API docs: http://{host}:{port}/docs[/dim]\n")

    logger.info(f"Starting server via CLI at {host}:{port}")

    uvicorn.run(
        "stockchart.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if settings.DEBUG else "info"
    )


def format_bar_time(epoch_seconds: int) -> str:
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime("%Y-%m-%d")


@app.command()
def fetch(
    symbol: str = typer.Argument(..., help="Stock symbol without market suffix"),
    period: Optional[str] = typer.Option(None, "--period", "-p", help="Period label (1M, 3M, 6M, YTD, 1Y, 2Y, 5Y, Max)"),
    interval: str = typer.Option("daily", "--interval", "-i", help="daily, weekly or monthly"),
    limit: int = typer.Option(20, "--limit", "-n", help="Show only the most recent N bars (0 = all)"),
):
    """
    Fetch and aggregate a symbol's price history
    """
    from stockchart.managers import get_data_manager

    logger.info(f"CLI fetch {symbol} period={period} interval={interval}")

    try:
        chart = asyncio.run(get_data_manager().get_chart(symbol, period=period, interval=interval))
    except StockChartError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        logger.error(f"CLI fetch failed for {symbol}: {e}")
        raise typer.Exit(code=1)

    bars = chart.bars[-limit:] if limit > 0 else chart.bars

    table = Table(
        title=f"{chart.symbol} · {chart.interval.value} · {chart.period} ({chart.count} bars)",
        box=box.ROUNDED,
    )
    table.add_column("Date", style="cyan")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Low", justify="right")
    table.add_column("Close", justify="right", style="bold")
    table.add_column("Volume", justify="right", style="dim")

    for bar in bars:
        table.add_row(
            format_bar_time(bar.time),
            f"{bar.open:.2f}",
            f"{bar.high:.2f}",
            f"{bar.low:.2f}",
            f"{bar.close:.2f}",
            f"{bar.volume:,}",
        )

    console.print(table)

    change = chart.change
    color = "green" if change.percentage >= 0 else "red"
    sign = "+" if change.percentage >= 0 else ""
    console.print(
        f"Daily change: [{color}]{sign}{change.price:.2f} ({sign}{change.percentage:.2f}%)[/{color}]"
    )


@app.command()
def periods():
    """
    List the available chart periods
    """
    from stockchart.managers.data_manager.periods import PERIODS, INTERVAL_DEFAULT_PERIOD

    table = Table(title="Chart Periods", box=box.ROUNDED)
    table.add_column("Period", style="cyan")
    table.add_column("Days", justify="right", style="green")
    table.add_column("Default for", style="dim")

    defaults = {}
    for interval, label in INTERVAL_DEFAULT_PERIOD.items():
        defaults.setdefault(label, []).append(interval.value)

    for period in PERIODS.values():
        table.add_row(period.label, str(period.days), ", ".join(defaults.get(period.label, [])))

    console.print(table)


@app.command("log-level")
def log_level(
    level: Optional[str] = typer.Argument(None, help="TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR or CRITICAL")
):
    """
    Show or change the log file level
    """
    from stockchart.logger import logger_manager

    if level is None:
        console.print(f"[cyan]Current log level:[/cyan] {logger_manager.get_level()}")
        return

    try:
        new_level = logger_manager.set_level(level)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Log level changed to: {new_level}")


@app.command()
def status():
    """
    Show configuration status
    """
    table = Table(title="Service Status", box=box.ROUNDED)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Application", settings.APP_NAME)
    table.add_row("Version", settings.APP_VERSION)
    table.add_row("Debug Mode", str(settings.DEBUG))
    table.add_row("Log Level", settings.LOGGER.default_level)
    table.add_row("API Host", f"{settings.API.host}:{settings.API.port}")
    table.add_row("Upstream", settings.UPSTREAM.base_url)
    table.add_row("Market Suffix", settings.UPSTREAM.market_suffix)
    table.add_row("Cache Capacity", str(settings.CACHE.capacity))
    table.add_row("Strict Truthy Filter", str(settings.PROXY.strict_truthy_filter))

    console.print(table)
    logger.debug("Status command executed")


if __name__ == "__main__":
    app()
