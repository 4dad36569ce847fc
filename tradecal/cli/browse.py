"""Interactive calendar browser for TradeCal CLI.

Reads one command per line and turns it into a view-state action. The
loop keeps no mutable UI fields of its own: each input produces a new
ViewState via ``reduce``, which is then rendered.
"""

from datetime import date
from pathlib import Path
from typing import Optional, Union

import click
from rich.console import Console
from rich.panel import Panel

from tradecal.calendar import CloseDay, SelectDay, SelectMonth, initial_state, reduce
from tradecal.calendar.grid import MONTH_NAMES
from tradecal.cli.session import CalendarSession, open_session, resolve_month
from tradecal.cli.view import show_day, show_month
from tradecal.models import ViewState

console = Console()

QUIT = "quit"

HELP_TEXT = (
    "[cyan]m <1-12>[/cyan] select month   "
    "[cyan]n[/cyan]/[cyan]p[/cyan] next/previous month   "
    "[cyan]d <day>[/cyan] open day   "
    "[cyan]c[/cyan] close day   "
    "[cyan]q[/cyan] quit"
)


def parse_command(text: str, state: ViewState) -> Union[SelectDay, CloseDay, SelectMonth, str]:
    """Translate a browser command into an action.

    Returns:
        An action, or QUIT.

    Raises:
        ValueError: If the command is not recognized.
    """
    parts = text.strip().lower().split()
    if not parts:
        raise ValueError("empty command")

    cmd, args = parts[0], parts[1:]

    if cmd in ("q", "quit", "exit"):
        return QUIT
    if cmd in ("c", "close", "x"):
        return CloseDay()
    if cmd in ("n", "next"):
        return SelectMonth(month=state.month % 12 + 1)
    if cmd in ("p", "prev"):
        return SelectMonth(month=(state.month - 2) % 12 + 1)

    if cmd in ("m", "month", "d", "day"):
        if len(args) != 1 or not args[0].isdigit():
            raise ValueError(f"'{cmd}' needs a number")
        value = int(args[0])
        if cmd in ("m", "month"):
            if not 1 <= value <= 12:
                raise ValueError("month must be between 1 and 12")
            return SelectMonth(month=value)
        return SelectDay(day=value)

    raise ValueError(f"unknown command '{cmd}'")


def render_state(session: CalendarSession, state: ViewState, out: Console) -> None:
    if state.mode == "day" and state.selected_day is not None:
        show_day(session, date(state.year, state.month, state.selected_day), out)
    else:
        show_month(session, state.month, out)


def run_browser(session: CalendarSession, state: ViewState, out: Console) -> ViewState:
    """Run the prompt loop until the user quits; returns the last state."""
    render_state(session, state, out)

    while True:
        out.print(f"[dim]{HELP_TEXT}[/dim]")
        text = click.prompt(">", default="q", show_default=False)

        try:
            action = parse_command(text, state)
        except ValueError as e:
            out.print(f"[red]{e}[/red]")
            continue

        if action == QUIT:
            return state

        next_state = reduce(state, action, session.provider)

        if isinstance(action, SelectDay) and next_state is state:
            out.print(
                f"[yellow]{MONTH_NAMES[state.month - 1]} {action.day} "
                "is not a trading day.[/yellow]"
            )
            continue

        state = next_state
        render_state(session, state, out)


@click.command("browse")
@click.argument(
    "csv_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-m", "--month",
    type=click.IntRange(1, 12),
    default=None,
    help="Month to start on (1-12).",
)
@click.option(
    "-y", "--year",
    type=click.IntRange(1, 9999),
    default=None,
    help="Calendar year.",
)
@click.pass_context
def browse(ctx: click.Context, csv_path: Optional[Path], month: Optional[int], year: Optional[int]) -> None:
    """Browse the calendar interactively.

    Shows the month grid, then reads commands: pick a month, open a
    trading day for its trade breakdown, close it, or quit. Weekends
    and holidays cannot be opened.

    \b
    Examples:
      tradecal browse trades.csv
      tradecal browse trades.csv -m 6
    """
    config = (ctx.obj or {}).get("config")
    session = open_session(ctx, console, csv_path, year)
    state = initial_state(session.year, resolve_month(config, month))

    console.print(Panel(
        f"[bold]{len(session.records)}[/bold] trades loaded for {session.year}.",
        title="[bold cyan]TradeCal[/bold cyan]",
        border_style="cyan",
    ))
    run_browser(session, state, console)
