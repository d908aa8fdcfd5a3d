"""Task management commands."""

import typer

from taskpad.models import DEFAULT_PRIORITY
from taskpad.services.planner import get_planner
from taskpad.utils.date_classifier import today_of
from taskpad.utils.exit_codes import ERROR_INVALID_ARGS
from taskpad.utils.nlp_parser import parse_natural_date
from taskpad.utils.typer_helpers import SuggestingGroup, parse_scope, resolve_output
from taskpad.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


def _due_value(due: str, now) -> str:
    """Accept a phrase such as "tomorrow" or an ISO date for --due."""
    return parse_natural_date(due, now) or due


@app.command("add")
@command_wrapper
async def add_task(
    title: str = typer.Argument(..., help="Task title"),
    project_id: int | None = typer.Option(None, "--project", "-p", help="Project ID"),
    priority: int = typer.Option(
        DEFAULT_PRIORITY, "--priority", help="Priority (1=highest, 4=lowest)"
    ),
    due: str | None = typer.Option(
        None, "--due", "-d", help="Due date (today/tomorrow/friday/YYYY-MM-DD)"
    ),
    no_parse: bool = typer.Option(
        False, "--no-parse", help="Do not infer a due date from the title"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Create a task, picking up phrases like "tomorrow" from the title."""
    planner = get_planner()
    now = planner.now()

    if due is not None or no_parse:
        task = await planner.create_task(
            {
                "title": title,
                "project_id": project_id,
                "priority": priority,
                "due_date": _due_value(due, now) if due is not None else None,
            }
        )
    else:
        task = await planner.quick_add(
            title, project_id=project_id, priority=priority, now=now
        )

    format_success(f"Task created: {task.id}")
    format_output(task.model_dump(mode="json"), resolve_output(output))


@app.command("show")
@command_wrapper
async def show_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show task details."""
    planner = get_planner()
    task = await planner.get_task(task_id)
    format_output(task.model_dump(mode="json"), resolve_output(output))


@app.command("edit")
@command_wrapper
async def edit_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", help="New title"),
    project_id: int | None = typer.Option(None, "--project", "-p", help="Move to project"),
    to_inbox: bool = typer.Option(False, "--inbox", help="Move to the Inbox"),
    priority: int | None = typer.Option(None, "--priority", help="Priority (1-4)"),
    due: str | None = typer.Option(None, "--due", "-d", help="New due date"),
    clear_due: bool = typer.Option(False, "--clear-due", help="Remove the due date"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Update a task. Only the given fields change."""
    planner = get_planner()

    fields: dict = {}
    if title is not None:
        fields["title"] = title
    if to_inbox:
        fields["project_id"] = None
    elif project_id is not None:
        fields["project_id"] = project_id
    if priority is not None:
        fields["priority"] = priority
    if clear_due:
        fields["due_date"] = None
    elif due is not None:
        fields["due_date"] = _due_value(due, planner.now())

    if not fields:
        format_error("No updates specified")
        raise typer.Exit(ERROR_INVALID_ARGS)

    task = await planner.update_task(task_id, fields)
    format_success(f"Task updated: {task.id}")
    format_output(task.model_dump(mode="json"), resolve_output(output))


@app.command("complete")
@command_wrapper
async def complete_task(
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task as completed."""
    planner = get_planner()
    task = await planner.complete_task(task_id)
    format_success(f"Task completed: {task.title}")


@app.command("reopen")
@command_wrapper
async def reopen_task(
    task_id: int = typer.Argument(..., help="Task ID"),
) -> None:
    """Reopen a completed task."""
    planner = get_planner()
    task = await planner.reopen_task(task_id)
    format_success(f"Task reopened: {task.title}")


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    planner = get_planner()
    task = await planner.get_task(task_id)

    if not yes:
        confirm = typer.confirm(f"Delete task {task.id} ({task.title})?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    await planner.delete_task(task_id)
    format_success(f"Task deleted: {task_id}")


@app.command("reorder")
@command_wrapper
async def reorder_tasks(
    project: str = typer.Argument(..., help='Project ID, or "inbox"'),
    task_ids: list[int] = typer.Argument(..., help="Task IDs in their new order"),
) -> None:
    """Reorder tasks within a project or the Inbox."""
    planner = get_planner()
    await planner.reorder_tasks(parse_scope(project), task_ids)
    format_success(f"Reordered {len(task_ids)} tasks")


@app.command("today-count")
@command_wrapper
async def today_count() -> None:
    """Print the number of pending tasks for today."""
    planner = get_planner()
    now = planner.now()
    count = await planner.today_count(now)
    format_info(f"{count} pending for {today_of(now).isoformat()}")
