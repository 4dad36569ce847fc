"""Configuration commands for TradeCal CLI."""

import click
from rich.console import Console
from rich.panel import Panel

from tradecal.config import create_template_config, default_config_path

console = Console()


@click.command("init")
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing config file.",
)
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Create a template config file.

    The file sets the default CSV path, calendar year and starting month,
    extra holiday tables and the log level.
    """
    config_path = (ctx.obj or {}).get("config_path") or default_config_path()

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] [cyan]{config_path}[/cyan]\n\n"
            "[dim]Use --force to overwrite it.[/dim]",
            title="[bold]Configuration[/bold]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    path = create_template_config(config_path)
    console.print(Panel(
        f"[green]✓[/green] Configuration file created at:\n"
        f"[cyan]{path}[/cyan]\n\n"
        "[dim]Edit data.csv_path to point at your trade log.[/dim]",
        title="[bold green]Configuration Created[/bold green]",
        border_style="green",
    ))
