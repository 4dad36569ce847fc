"""Rich renderables for the trading calendar."""

from datetime import date
from typing import Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tradecal.calendar.grid import MONTH_NAMES, WEEKDAY_HEADERS, chunk_weeks, is_weekend
from tradecal.calendar.holidays import HolidayProvider
from tradecal.models import DayCell, DaySummary, TradeRecord

# Cell state -> rich style
STATE_STYLES = {
    "profit": "bold white on green",
    "loss": "bold white on red",
    "empty": "black on grey70",
    "weekend": "dim white on grey35",
    "holiday": "dim white on purple4",
}


def format_money(amount: float) -> str:
    """Format an amount as $1,234.50 / -$120.50."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_price(price: Optional[float]) -> str:
    return "-" if price is None else format_money(price)


def month_title(year: int, month: int) -> str:
    return f"Trading Calendar - {MONTH_NAMES[month - 1]} {year}"


def render_day_cell(cell: Optional[DayCell]) -> Text:
    """Render one grid slot; blanks render as empty text."""
    if cell is None:
        return Text("")

    style = STATE_STYLES[cell.state]
    text = Text(f"{cell.day:>2}\n", style=f"{style} bold")

    if cell.state == "holiday":
        text.append(cell.label[:14] + "\n", style=style)
    elif cell.state == "weekend":
        text.append("Weekend\n", style=style)
    else:
        text.append("\n", style=style)

    text.append(f"P/L: {format_money(cell.summary.total_pl_display)}\n", style=style)
    text.append(f"Trades: {cell.summary.total_trades}", style=style)
    return text


def render_month_grid(cells: list[Optional[DayCell]], year: int, month: int) -> Table:
    """Render the month as a 7-column Sunday-first grid."""
    table = Table(
        title=month_title(year, month),
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        show_lines=True,
    )

    for name in WEEKDAY_HEADERS:
        table.add_column(name, justify="left", min_width=14, no_wrap=True)

    for week in chunk_weeks(cells):
        table.add_row(*(render_day_cell(cell) for cell in week))

    return table


def render_stats_panel(title: str, summary: DaySummary) -> Panel:
    """Render a Yearly/Monthly stats card."""
    pl_color = "green" if summary.total_pl >= 0 else "red"
    body = (
        f"Total Trades: {summary.total_trades}\n"
        f"Total Wins: {summary.total_wins}\n"
        f"Total Losses: {summary.total_losses}\n"
        f"Total P/L: [{pl_color}]{format_money(summary.total_pl_display)}[/{pl_color}]\n"
        f"Win Rate: {summary.win_rate:.2f}%"
    )
    return Panel(body, title=f"[bold]{title}[/bold]", border_style="cyan", expand=False)


def render_day_detail(day_date: date, summary: DaySummary, trades: list[TradeRecord]) -> Panel:
    """Render the day drill-down: summary box plus trade breakdown."""
    pl_color = "green" if summary.total_pl >= 0 else "red"
    header = Text.from_markup(
        f"[bold]P/L:[/bold] [{pl_color}]{format_money(summary.total_pl_display)}[/{pl_color}]\n"
        f"[bold]Trades:[/bold] {summary.total_trades}\n"
        f"[bold]Wins/Losses:[/bold] {summary.total_wins}/{summary.total_losses}\n"
        f"[bold]Win Rate:[/bold] {summary.win_rate:.2f}%"
    )

    table = Table(
        title="Trade Breakdown",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Opened")
    table.add_column("Symbol")
    table.add_column("P/L", justify="right")
    table.add_column("Result")
    table.add_column("Entry Price", justify="right")
    table.add_column("Exit Price", justify="right")

    for idx, trade in enumerate(trades, start=1):
        color = "green" if trade.is_win else "red"
        table.add_row(
            str(idx),
            trade.opened_at or trade.date.isoformat(),
            trade.symbol or "-",
            f"[{color}]{format_money(trade.pl)}[/{color}]",
            f"[{color}]{'Win' if trade.is_win else 'Loss'}[/{color}]",
            format_price(trade.entry_price),
            format_price(trade.exit_price),
        )

    if trades:
        body = Group(header, Text(""), table)
    else:
        body = Group(header, Text(""), Text("No trades recorded", style="dim"))

    return Panel(
        body,
        title=f"[bold cyan]Details for {day_date.strftime('%A, %B %d, %Y')}[/bold cyan]",
        border_style="cyan",
    )


def render_suppressed_panel(records: list[TradeRecord], provider: HolidayProvider) -> Panel:
    """List trades hidden because they fall on weekends or holidays."""
    table = Table(show_header=True, header_style="bold yellow", box=box.SIMPLE)
    table.add_column("Date")
    table.add_column("Reason")
    table.add_column("P/L", justify="right")

    for record in records:
        reason = provider.holiday_name(record.date) or ("Weekend" if is_weekend(record.date) else "-")
        table.add_row(record.date.isoformat(), reason, format_money(record.pl))

    return Panel(
        table,
        title=f"[bold yellow]{len(records)} trade(s) on closed days[/bold yellow]",
        subtitle="[dim]Not reachable from the calendar[/dim]",
        border_style="yellow",
        expand=False,
    )


def render_holidays(year: int, provider: HolidayProvider) -> Table:
    table = Table(
        title=f"Market Holidays {year}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="bold")
    table.add_column("Day")
    table.add_column("Holiday")

    for iso, name in sorted(provider.holidays_for(year).items()):
        day = date.fromisoformat(iso)
        table.add_row(iso, day.strftime("%a"), name)

    return table
