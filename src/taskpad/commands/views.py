"""Commands 'inbox', 'today' and 'upcoming' of taskpad."""

import typer

from taskpad.services.planner import get_planner
from taskpad.utils.date_classifier import today_of
from taskpad.utils.typer_helpers import resolve_output
from taskpad.utils.ui.formatters import format_output

from .decorators import command_wrapper


@command_wrapper
async def inbox(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show tasks that belong to no project."""
    planner = get_planner()
    view = await planner.list_inbox()
    format_output(
        view.model_dump(mode="json"),
        resolve_output(output),
        title="Inbox",
        today=today_of(planner.now()),
    )


@command_wrapper
async def today(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show overdue tasks, tasks due today and today's completed tasks."""
    planner = get_planner()
    now = planner.now()
    view = await planner.list_today(now)
    format_output(view.model_dump(mode="json"), resolve_output(output), today=today_of(now))


@command_wrapper
async def upcoming(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show incomplete tasks due in the next 7 days, grouped by day."""
    planner = get_planner()
    now = planner.now()
    view = await planner.list_upcoming(now)
    format_output(view.model_dump(mode="json"), resolve_output(output), today=today_of(now))
