"""
Command Line Interface for the Crypto Thread Bot.
Runs one pipeline pass and prints what was produced.
"""

import sys
import os
import logging
from typing import Dict, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from src import RunReport, create_bot
from src.utils import Config, OutputFormatter, setup_logging

logger = logging.getLogger(__name__)


def flush_log_handler(handler):
    """
    Force flush log handler to disk.

    Args:
        handler: Logging handler to flush
    """
    if handler:
        handler.flush()
        # Also flush the underlying file stream's OS buffer
        if hasattr(handler, 'stream') and hasattr(handler.stream, 'fileno'):
            try:
                os.fsync(handler.stream.fileno())
            except (AttributeError, OSError):
                pass  # Some streams don't support fsync


def build_summary_table(report: RunReport) -> Table:
    """Tabulate the snapshots of a run."""
    table = Table(title="Trending Assets", border_style="cyan")
    table.add_column("Rank", justify="right")
    table.add_column("Name")
    table.add_column("Symbol", style="bold")
    table.add_column("24h Change", justify="right")

    for snapshot in report.snapshots:
        change = OutputFormatter.format_percentage(snapshot.percent_change_24h)
        color = "green" if snapshot.percent_change_24h > 0 else "red"
        table.add_row(str(snapshot.rank), snapshot.name, snapshot.display_symbol, f"[{color}]{change}[/{color}]")
    return table


def print_health(console: Console, health: Dict[str, bool]):
    """Print one reachability line per remote service."""
    for service, reachable in health.items():
        status = "[green]✓ reachable[/green]" if reachable else "[red]✗ unreachable[/red]"
        console.print(f"  {service}: {status}")


def print_report(console: Console, report: RunReport, dry_run: bool):
    """Print the run results."""
    source = "sample data (API unavailable)" if report.used_fallback_data else "CoinGecko trending"
    console.print(f"\n[dim]Data source: {source} • {OutputFormatter.format_timestamp()}[/dim]")
    console.print(build_summary_table(report))

    summary = report.summary
    console.print(
        f"🚀 Top Gainer: [green]{summary.top_gainer.name} ({summary.top_gainer.display_symbol}) "
        f"{OutputFormatter.format_percentage(summary.top_gainer.percent_change_24h)}[/green]"
    )
    console.print(
        f"📉 Biggest Move: [red]{summary.top_loser.name} ({summary.top_loser.display_symbol}) "
        f"{OutputFormatter.format_percentage(summary.top_loser.percent_change_24h)}[/red]"
    )

    console.print(Panel(report.thread, title="Thread", border_style="green", padding=(1, 2)))

    for artifact in [*report.images, *report.charts]:
        console.print(f"  🖼️  {artifact.file_path}")

    if dry_run:
        console.print("\n[yellow]Dry run - nothing was sent to Telegram[/yellow]")
    elif report.delivered:
        console.print(
            f"\n[green]✓ Delivered to Telegram[/green] "
            f"({report.documents_uploaded} documents uploaded, {report.documents_as_text} sent as text)"
        )


def run_cli(
    verbose: bool = False,
    dry_run: bool = False,
    image_count: Optional[int] = None,
    config: Optional[Config] = None,
) -> int:
    """
    Main entry point for the CLI.

    Args:
        verbose: If True, show INFO logs in console. If False, only show WARNING/ERROR.
        dry_run: Render only, without the model call or Telegram delivery
        image_count: Override the number of per-asset images
        config: Pre-built configuration (defaults to environment)

    Returns:
        int: Process exit code
    """
    config = config or Config.from_env()
    if image_count is not None:
        config.image_count = image_count

    file_handler = setup_logging(config, verbose=verbose, enable_console=True)
    console = Console()

    try:
        console.print("\n[bold cyan]Initializing crypto thread bot...[/bold cyan]")
        if verbose:
            console.print("[dim]Verbose mode enabled - detailed API logs will be shown[/dim]")
            config.print_status()

        bot = create_bot(config, dry_run=dry_run)
        try:
            if verbose:
                print_health(console, bot.check_connections())
            with console.status("[bold green]Generating content...", spinner="dots"):
                report = bot.run()
        finally:
            bot.close()

        print_report(console, report, dry_run)
        flush_log_handler(file_handler)
        return 0

    except KeyboardInterrupt:
        console.print("\n\n[yellow]Interrupted by user[/yellow]")
        flush_log_handler(file_handler)
        return 130

    except Exception as e:
        console.print(f"\n[red]Crypto automation failed: {str(e)}[/red]")
        logger.error(f"Crypto automation failed: {e}", exc_info=True)
        flush_log_handler(file_handler)
        return 1


if __name__ == "__main__":
    sys.exit(run_cli())
