"""Configuration management commands."""

from typing import Any, Optional

import typer

from taskpad.config import get_config_manager
from taskpad.utils.typer_helpers import SuggestingGroup, resolve_output
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Convert a command-line string to the value type it spells."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null"):
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@app.command("view")
@command_wrapper
def view_config(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager()
    format_output(config_manager.config.model_dump(), resolve_output(output))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.backend)"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager()
    console.print(config_manager.get(key))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.backend)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager()
    parsed_value = parse_value(value)
    config_manager.set(key, parsed_value)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    config_manager = get_config_manager()
    config_manager.reset(key)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
