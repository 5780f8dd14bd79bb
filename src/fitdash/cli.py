"""fitdash CLI - Personal Fitness Dashboard."""

import asyncio
import logging
import sys

import click

from .app import create_dashboard
from .config import load_config
from .core.calendar import CalendarCursor
from .shell import Shell
from .views import render_month


@click.group(invoke_without_command=True)
@click.version_option(package_name="fitdash")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """fitdash - Personal Fitness Dashboard."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
def shell():
    """Open the interactive dashboard."""
    dashboard = create_dashboard(load_config())
    click.echo("Type 'help' for commands.\n")
    try:
        asyncio.run(Shell(dashboard).run())
    except KeyboardInterrupt:
        click.echo("\nBye.")


@main.command()
@click.option("--month", "-m", default=None, help="Month to show (YYYY-MM), defaults to this month")
def calendar(month: str | None):
    """Print a month grid."""
    try:
        cursor = CalendarCursor.parse(month) if month else CalendarCursor.today()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(render_month(cursor))


@main.command()
@click.argument("message", nargs=-1, required=True)
def ask(message: tuple[str, ...]):
    """Send one message to the fitness AI and print the reply."""
    text = " ".join(message)
    if not text.strip():
        click.echo("Error: message is empty", err=True)
        sys.exit(1)

    dashboard = create_dashboard(load_config())
    reply = asyncio.run(dashboard.chat.send(text))
    click.echo(reply.text)
