"""Calendar commands for TradeCal CLI.

Handles the month grid, the day drill-down, stats and holiday listing.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tradecal.calendar import is_weekend
from tradecal.cli.render import (
    render_day_detail,
    render_holidays,
    render_month_grid,
    render_stats_panel,
    render_suppressed_panel,
)
from tradecal.cli.session import (
    CalendarSession,
    load_provider,
    open_session,
    resolve_month,
    resolve_year,
)

console = Console()

csv_argument = click.argument(
    "csv_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)

month_option = click.option(
    "-m", "--month",
    type=click.IntRange(1, 12),
    default=None,
    help="Month to show (1-12). Defaults to calendar.default_month or January.",
)

year_option = click.option(
    "-y", "--year",
    type=click.IntRange(1, 9999),
    default=None,
    help="Calendar year. Defaults to calendar.year in config or 2025.",
)


def show_month(session: CalendarSession, month: int, out: Console) -> None:
    """Print the month grid, stats cards and any hidden trades."""
    out.print(render_month_grid(session.month_cells(month), session.year, month))
    out.print(Columns([
        render_stats_panel("Yearly Stats", session.year_summary()),
        render_stats_panel("Monthly Stats", session.month_summary(month)),
    ]))

    hidden = session.suppressed(month)
    if hidden:
        out.print(render_suppressed_panel(hidden, session.provider))


def show_day(session: CalendarSession, day_date: date, out: Console) -> None:
    out.print(render_day_detail(day_date, session.day_summary(day_date), session.day_trades(day_date)))


@click.command("calendar")
@csv_argument
@month_option
@year_option
@click.pass_context
def calendar_cmd(ctx: click.Context, csv_path: Optional[Path], month: Optional[int], year: Optional[int]) -> None:
    """Show the month calendar with daily P/L.

    Days are colored green for profit, red for loss and grey when no
    trades were made. Weekends and holidays are marked and cannot be
    opened.

    CSV_PATH is the trade log (default: data.csv_path in config, else
    ./output.csv).

    \b
    Examples:
      tradecal calendar trades.csv            # January
      tradecal calendar trades.csv -m 7       # July
    """
    config = (ctx.obj or {}).get("config")
    session = open_session(ctx, console, csv_path, year)
    show_month(session, resolve_month(config, month), console)


@click.command("day")
@click.argument("day_date", metavar="DATE")
@csv_argument
@click.pass_context
def day(ctx: click.Context, day_date: str, csv_path: Optional[Path]) -> None:
    """Show trade details for one day.

    DATE is an ISO date such as 2025-03-05. Weekends and market
    holidays are disabled days and cannot be opened.

    \b
    Examples:
      tradecal day 2025-03-05 trades.csv
    """
    try:
        target = date.fromisoformat(day_date)
    except ValueError:
        raise click.BadParameter(f"'{day_date}' is not an ISO date (YYYY-MM-DD)", param_hint="DATE")

    session = open_session(ctx, console, csv_path, target.year)

    holiday = session.provider.holiday_name(target)
    if holiday is not None or is_weekend(target):
        reason = holiday or "Weekend"
        console.print(Panel(
            f"[yellow]{target.isoformat()} is a disabled day ({reason}).[/yellow]\n\n"
            "[dim]Weekends and market holidays have no day view.[/dim]",
            title="[bold yellow]Day Unavailable[/bold yellow]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    show_day(session, target, console)


@click.command("stats")
@csv_argument
@month_option
@year_option
@click.pass_context
def stats(ctx: click.Context, csv_path: Optional[Path], month: Optional[int], year: Optional[int]) -> None:
    """Show yearly and monthly trading stats.

    \b
    Examples:
      tradecal stats trades.csv -m 3
    """
    config = (ctx.obj or {}).get("config")
    session = open_session(ctx, console, csv_path, year)
    month = resolve_month(config, month)
    console.print(Columns([
        render_stats_panel("Yearly Stats", session.year_summary()),
        render_stats_panel("Monthly Stats", session.month_summary(month)),
    ]))


@click.command("holidays")
@year_option
@click.pass_context
def holidays(ctx: click.Context, year: Optional[int]) -> None:
    """List the market holidays for a year."""
    config = (ctx.obj or {}).get("config")
    year = resolve_year(config, year)
    provider = load_provider(config, console)

    if not provider.holidays_for(year):
        known = ", ".join(str(y) for y in provider.years()) or "none"
        table_name = escape(f'[holidays."{year}"]')
        console.print(Panel(
            f"[dim]No holidays configured for {year}.[/dim]\n\n"
            f"[dim]Known years: {known}. Add a [cyan]{table_name}[/cyan] "
            "table to config.toml.[/dim]",
            title="[bold]Market Holidays[/bold]",
            border_style="dim",
        ))
        return

    console.print(render_holidays(year, provider))
