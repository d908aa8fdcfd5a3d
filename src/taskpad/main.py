"""Main entry point for the taskpad CLI."""

import typer

from taskpad import __version__
from taskpad.commands import config, projects, tasks, views
from taskpad.config import get_config_manager
from taskpad.utils.clock import get_system_timezone
from taskpad.utils.typer_helpers import SuggestingGroup
from taskpad.utils.ui.console import get_console, set_color

# Create main app with custom group class
app = typer.Typer(
    name="taskpad",
    cls=SuggestingGroup,
    help="A small personal task planner: inbox, today, upcoming and projects",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main() -> None:
    """A small personal task planner: inbox, today, upcoming and projects."""
    set_color(get_config_manager().config.output.color)


# Add subcommands
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(projects.app, name="projects", help="Project management commands")
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level view commands
app.command("inbox")(views.inbox)
app.command("today")(views.today)
app.command("upcoming")(views.upcoming)


@app.command()
def version() -> None:
    """Show version and storage information."""
    config_manager = get_config_manager()
    storage = config_manager.config.storage

    console.print(f"[bold]taskpad[/bold] version [cyan]{__version__}[/cyan]")
    if storage.backend == "file":
        console.print(f"[dim]Storage: file ({config_manager.data_file})[/dim]")
    else:
        console.print("[dim]Storage: memory[/dim]")
    timezone = config_manager.config.ui.timezone or f"{get_system_timezone()} (system)"
    console.print(f"[dim]Timezone: {timezone}[/dim]")


if __name__ == "__main__":
    app()
