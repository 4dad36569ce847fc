"""Shared loading helpers for TradeCal commands."""

from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tradecal.analytics import (
    aggregate_month,
    aggregate_year,
    daily_summaries,
    records_for_day,
)
from tradecal.calendar import build_month_cells, holiday_provider_from_config, suppressed_records
from tradecal.calendar.holidays import HolidayProvider
from tradecal.config import DEFAULT_CSV_PATH, DEFAULT_YEAR, get_setting
from tradecal.data import LoadResult, load_trades
from tradecal.models import DayCell, DaySummary, TradeRecord


class CalendarSession:
    """Trades loaded once for a command run, plus the derived day map."""

    def __init__(self, result: LoadResult, provider: HolidayProvider, year: int):
        self.result = result
        self.provider = provider
        self.year = year
        self.records: list[TradeRecord] = list(result.records)
        self.summaries = daily_summaries(self.records)

    def month_cells(self, month: int) -> list[Optional[DayCell]]:
        return build_month_cells(self.year, month, self.summaries, self.provider)

    def day_summary(self, day_date: date) -> DaySummary:
        return self.summaries.get(day_date) or DaySummary.empty()

    def day_trades(self, day_date: date) -> list[TradeRecord]:
        return records_for_day(self.records, day_date)

    def month_summary(self, month: int) -> DaySummary:
        return aggregate_month(self.records, month, self.year)

    def year_summary(self) -> DaySummary:
        # Yearly stats cover the whole file, like the original calendar
        return aggregate_year(self.records)

    def suppressed(self, month: Optional[int] = None) -> list[TradeRecord]:
        return suppressed_records(self.records, self.provider, year=self.year, month=month)


def resolve_csv_path(config: Optional[dict], csv_path: Optional[Path]) -> Path:
    """CSV argument, else ``[data].csv_path`` from config, else ./output.csv."""
    if csv_path is not None:
        return Path(csv_path)
    return Path(get_setting(config, "data", "csv_path", DEFAULT_CSV_PATH)).expanduser()


def _int_setting(config: Optional[dict], section: str, key: str, default: int) -> int:
    value = get_setting(config, section, key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise click.BadParameter(f"{section}.{key} must be a whole number, got {value!r}")


def resolve_year(config: Optional[dict], year: Optional[int]) -> int:
    if year is not None:
        return year
    return _int_setting(config, "calendar", "year", DEFAULT_YEAR)


def resolve_month(config: Optional[dict], month: Optional[int]) -> int:
    if month is not None:
        return month
    value = _int_setting(config, "calendar", "default_month", 1)
    if not 1 <= value <= 12:
        raise click.BadParameter(f"calendar.default_month must be 1-12, got {value}")
    return value


def load_provider(config: Optional[dict], console: Console) -> HolidayProvider:
    """Build the holiday provider, exiting on an invalid config table."""
    try:
        return holiday_provider_from_config(config)
    except ValueError as e:
        console.print(Panel(
            f"[red]Invalid holiday table in config:[/red]\n\n[dim]{escape(str(e))}[/dim]",
            title="[bold red]Configuration Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)


def open_session(
    ctx: click.Context,
    console: Console,
    csv_path: Optional[Path],
    year: Optional[int] = None,
) -> CalendarSession:
    """Load the trade log and holiday tables for a command.

    Load failures are reported and the session continues with no trades.
    """
    config = (ctx.obj or {}).get("config")
    provider = load_provider(config, console)

    path = resolve_csv_path(config, csv_path)
    result = load_trades(path)

    if not result.ok:
        console.print(Panel(
            f"[red]{escape(result.error)}[/red]\n\n"
            "[dim]Showing an empty calendar. Pass a CSV path or set "
            "[cyan]data.csv_path[/cyan] in config.toml.[/dim]",
            title="[bold red]Load Error[/bold red]",
            border_style="red",
        ))
    elif result.skipped:
        console.print(f"[dim]Skipped {result.skipped} malformed row(s) in {path}[/dim]")

    return CalendarSession(result, provider, resolve_year(config, year))
