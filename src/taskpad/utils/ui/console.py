"""Shared Rich consoles for the taskpad CLI.

Every module prints through a console handed out here, so the
``output.color`` setting applies to all of them at once.
"""

from rich.console import Console

_consoles: dict[bool, Console] = {}
_color_enabled = True


def get_console(highlight: bool = True) -> Console:
    """Get the shared Rich Console for the given highlight mode."""
    console = _consoles.get(highlight)
    if console is None:
        console = Console(highlight=highlight, no_color=not _color_enabled)
        _consoles[highlight] = console
    return console


def set_color(enabled: bool) -> None:
    """Turn styled output on or off for every shared console."""
    global _color_enabled
    _color_enabled = enabled
    for console in _consoles.values():
        console.no_color = not enabled
