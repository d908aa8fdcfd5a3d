"""Output formatters for different formats."""

import json
from datetime import date
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from taskpad.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")

# Columns shown when a task view is rendered as a table
TASK_COLUMNS = ("id", "title", "priority", "due_date", "completed")


def format_output(
    data: Any,
    output_format: str = "pretty",
    *,
    title: str | None = None,
    today: date | None = None,
) -> None:
    """Format and display output based on format.

    Args:
        data: JSON-compatible data (``model_dump(mode="json")`` output)
        output_format: One of ``pretty``, ``table``, ``json`` or ``yaml``
        title: Heading for pretty task lists
        today: Reference day for relative due-date labels; without it due
            dates are shown as ISO dates
    """
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        # Default to pretty
        format_pretty(data, title=title, today=today)


def collect_tasks(data: dict) -> list[dict] | None:
    """Flatten any task view into a single task list, or None for non-views."""
    if "overdue" in data:
        return [*data["overdue"], *data["due_today"], *data["completed"]]
    if "days" in data:
        return [task for day in data["days"] for task in day["tasks"]]
    if "tasks" in data:
        return data["tasks"]
    return None


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        tasks = collect_tasks(data)
        if tasks is not None:
            format_dict_table(tasks, columns=TASK_COLUMNS)
        elif "projects" in data:
            format_dict_table(data["projects"])
        else:
            format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict], columns: tuple[str, ...] | None = None) -> None:
    """Format a list of dictionaries as a table.

    Args:
        items: Rows to render
        columns: Keys to show, in order; defaults to every key of the first row
    """
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(columns or items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title(), no_wrap=col != "title")

    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

PRIORITY_LABELS = {
    1: "P1",
    2: "P2",
    3: "P3",
    4: "P4",
}

PRIORITY_COLORS = {
    1: "#dc4c3e",
    2: "#f59e0b",
    3: "#3b82f6",
    4: "#737373",
}

STATUS_ICONS = {
    "open": "○",
    "completed": "✓",
}


def format_pretty(data: Any, title: str | None = None, today: date | None = None) -> None:
    """Format data in pretty format with colors and icons."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict) and "title" in data[0]:
            format_tasks_pretty(data, title=title, today=today)
        elif isinstance(data[0], dict) and "name" in data[0]:
            format_projects_pretty(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        if "overdue" in data:
            format_today_pretty(data, today=today)
        elif "days" in data:
            format_upcoming_pretty(data, today=today)
        elif "project" in data and "tasks" in data:
            project = data["project"]
            format_tasks_pretty(
                data["tasks"],
                title=project["name"],
                color=project.get("color"),
                progress=data.get("progress"),
                today=today,
            )
        elif "tasks" in data:
            format_tasks_pretty(
                data["tasks"], title=title, progress=data.get("progress"), today=today
            )
        elif "projects" in data:
            format_projects_pretty(data["projects"], counts=data.get("counts"))
        else:
            format_single_item(data)
    else:
        console.print(data)


def format_tasks_pretty(
    tasks: list[dict],
    title: str | None = None,
    color: str | None = None,
    progress: float | None = None,
    today: date | None = None,
) -> None:
    """Format a task list: open tasks first, then a completed section."""
    active = [t for t in tasks if not t.get("completed")]
    done = [t for t in tasks if t.get("completed")]

    header = Text()
    header.append(f"{title or 'Tasks'} ", style=f"bold {color}" if color else "bold cyan")
    header.append(f"({len(active)} open", style="dim")
    if progress is not None and tasks:
        header.append(f", {progress:g}% done", style="dim green")
    header.append(")", style="dim")
    console.print(header)
    console.print()

    if not tasks:
        console.print("  [dim]No tasks[/dim]")
        return

    for task in active:
        format_task_item(task, indent="  ", today=today)
    if done:
        console.print()
        console.print(f"Completed ({len(done)})", style="dim green")
        for task in done:
            format_task_item(task, indent="  ", today=today)


def format_today_pretty(view: dict, today: date | None = None) -> None:
    """Format the Today view: overdue, due today and completed groups."""
    header = Text()
    header.append("Today ", style="bold cyan")
    header.append(f"({view.get('pending_count', 0)} pending", style="dim")
    if view.get("completed"):
        header.append(f", {view.get('progress', 0):g}% done", style="dim green")
    header.append(")", style="dim")
    console.print(header)
    console.print()

    if not (view["overdue"] or view["due_today"] or view["completed"]):
        console.print("  [dim]Nothing due today[/dim]")
        return

    sections = (
        ("Overdue", view["overdue"], "bold red"),
        ("Due today", view["due_today"], "bold"),
        ("Completed", view["completed"], "dim green"),
    )
    for name, group, style in sections:
        if not group:
            continue
        console.print(f"{name} ({len(group)})", style=style)
        for task in group:
            format_task_item(task, indent="  ", today=today)
        console.print()


def format_upcoming_pretty(view: dict, today: date | None = None) -> None:
    """Format the Upcoming view as one group per non-empty day."""
    console.print(Text(f"Upcoming ({view.get('total', 0)} tasks)", style="bold cyan"))
    console.print()

    if not view["days"]:
        console.print("  [dim]Nothing scheduled for the next 7 days[/dim]")
        return

    for group in view["days"]:
        day = date.fromisoformat(str(group["day"]))
        label = day.strftime("%a %d %b")
        if today is not None:
            label = f"{label} · {format_due_date(day, today)}"
        console.print(label, style="bold")
        for task in group["tasks"]:
            format_task_item(task, indent="  ", today=today, show_due=False)
        console.print()


def format_projects_pretty(projects: list[dict], counts: dict | None = None) -> None:
    """Format projects as a sidebar-style list."""
    if not projects:
        console.print("[yellow]No projects found[/yellow]")
        return

    console.print(Text(f"Projects ({len(projects)})", style="bold cyan"))
    console.print()
    for project in projects:
        line = Text("  ")
        line.append("● ", style=project.get("color") or PRIORITY_COLORS[4])
        line.append(project["name"], style="dim" if project.get("is_collapsed") else "")
        line.append(f"  #{project['id']}", style="dim")
        if counts is not None:
            count = counts.get(str(project["id"]), counts.get(project["id"], 0))
            if count:
                line.append(f"  {count}", style="cyan")
        console.print(line)


def format_task_item(
    task: dict,
    indent: str = "",
    today: date | None = None,
    show_due: bool = True,
) -> None:
    """Format a single task line."""
    completed = task.get("completed", False)
    priority = task.get("priority", 4)

    line = Text(indent)
    line.append(
        STATUS_ICONS["completed" if completed else "open"] + " ",
        style=PRIORITY_COLORS.get(priority, ""),
    )
    line.append(task.get("title", "Untitled"), style="dim strike" if completed else "")
    if priority != 4:
        line.append(f" {PRIORITY_LABELS[priority]}", style=PRIORITY_COLORS[priority])

    due = task.get("due_date")
    if show_due and due:
        due_day = date.fromisoformat(str(due))
        if today is None:
            line.append(f" · {due_day.isoformat()}", style="cyan")
        else:
            style = "bold red" if not completed and is_overdue(due_day, today) else "cyan"
            line.append(f" · {format_due_date(due_day, today)}", style=style)

    line.append(f"  #{task.get('id')}", style="dim")
    console.print(line)


def is_overdue(due: date, today: date) -> bool:
    return due < today


def format_due_date(due: date, today: date) -> str:
    """Render a due date relative to today ("Today", "Tomorrow", "Friday")."""
    delta = (due - today).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    if delta == -1:
        return "Yesterday"
    if 1 < delta < 7:
        return due.strftime("%A")
    if due.year == today.year:
        return due.strftime("%d %b")
    return due.strftime("%d %b %Y")
