"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from taskpad.config import get_config_manager
from taskpad.models import ValidationError
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import OUTPUT_FORMATS


class SuggestingGroup(TyperGroup):
    """Custom Typer group that suggests commands on typos."""

    def resolve_command(self, ctx, args):
        """Override to provide command suggestions on errors."""
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                available_commands = list(self.commands.keys())

                # Find close matches (max 3 suggestions, cutoff 0.6 for similarity)
                suggestions = get_close_matches(
                    attempted, available_commands, n=3, cutoff=0.6
                )

                if suggestions:
                    console = get_console()
                    console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    console.print()
                    if len(suggestions) == 1:
                        console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        console.print(f"        {suggestion}")
                    raise typer.Exit(1) from e
            raise


def resolve_output(output: str | None) -> str:
    """Pick the output format: the --output flag, else output.format from config."""
    if output is None:
        return get_config_manager().config.output.format
    if output not in OUTPUT_FORMATS:
        raise ValidationError(
            f"Unknown output format: {output} (choose from {', '.join(OUTPUT_FORMATS)})"
        )
    return output


def parse_scope(value: str) -> int | None:
    """Parse a project argument where "inbox" stands for no project."""
    if value.lower() == "inbox":
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValidationError(f"Invalid project id: {value}") from e
