"""Project management commands."""

import typer

from taskpad.services.planner import get_planner
from taskpad.utils.date_classifier import today_of
from taskpad.utils.exit_codes import ERROR_INVALID_ARGS
from taskpad.utils.typer_helpers import SuggestingGroup, resolve_output
from taskpad.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Project management commands")


@app.command("list")
@command_wrapper
async def list_projects(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List projects with their open task counts."""
    planner = get_planner()
    projects = await planner.list_projects()
    counts = await planner.project_task_counts()

    result = {
        "projects": [p.model_dump(mode="json") for p in projects],
        "counts": {str(project_id): count for project_id, count in counts.items()},
    }
    format_output(result, resolve_output(output))


@app.command("show")
@command_wrapper
async def show_project(
    project_id: int = typer.Argument(..., help="Project ID"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show a project and its tasks in manual order."""
    planner = get_planner()
    view = await planner.list_by_project(project_id)
    format_output(
        view.model_dump(mode="json"),
        resolve_output(output),
        today=today_of(planner.now()),
    )


@app.command("create")
@command_wrapper
async def create_project(
    name: str = typer.Argument(..., help="Project name"),
    color: str | None = typer.Option(None, "--color", help="Project color"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Create a new project."""
    planner = get_planner()
    project = await planner.create_project({"name": name, "color": color})
    format_success(f"Project created: {project.id}")
    format_output(project.model_dump(mode="json"), resolve_output(output))


@app.command("update")
@command_wrapper
async def update_project(
    project_id: int = typer.Argument(..., help="Project ID"),
    name: str | None = typer.Option(None, "--name", help="Project name"),
    color: str | None = typer.Option(None, "--color", help="Project color"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Update a project."""
    fields = {
        key: value
        for key, value in (("name", name), ("color", color))
        if value is not None
    }
    if not fields:
        format_error("No updates specified")
        raise typer.Exit(ERROR_INVALID_ARGS)

    planner = get_planner()
    project = await planner.update_project(project_id, fields)
    format_success(f"Project updated: {project.id}")
    format_output(project.model_dump(mode="json"), resolve_output(output))


@app.command("delete")
@command_wrapper
async def delete_project(
    project_id: int = typer.Argument(..., help="Project ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a project. Its tasks are kept."""
    planner = get_planner()
    project = await planner.get_project(project_id)

    if not yes:
        confirm = typer.confirm(f"Delete project {project.id} ({project.name})?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    await planner.delete_project(project_id)
    format_success(f"Project deleted: {project_id}")


@app.command("collapse")
@command_wrapper
async def collapse_project(
    project_id: int = typer.Argument(..., help="Project ID"),
) -> None:
    """Toggle the collapsed state of a project."""
    planner = get_planner()
    project = await planner.toggle_project_collapse(project_id)
    state = "collapsed" if project.is_collapsed else "expanded"
    format_success(f"Project {project.name} {state}")
