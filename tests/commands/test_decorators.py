"""Tests for the command wrapper decorator."""

import pytest
import typer
from typer.testing import CliRunner

from taskpad.commands.decorators import command_wrapper
from taskpad.models import NotFoundError, StorageError, ValidationError

runner = CliRunner()


def _app_raising(error: Exception) -> typer.Typer:
    app = typer.Typer()

    @app.command()
    @command_wrapper
    async def boom() -> None:
        raise error

    return app


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ValidationError("title must not be blank"), 2),
        (NotFoundError("Task", 4), 5),
        (StorageError("disk full"), 7),
        (RuntimeError("kaboom"), 1),
    ],
)
def test_errors_map_to_exit_codes(error, code):
    result = runner.invoke(_app_raising(error), [])

    assert result.exit_code == code
    assert "Error:" in result.output


def test_unexpected_error_message():
    result = runner.invoke(_app_raising(RuntimeError("kaboom")), [])
    assert "An unexpected error occurred: kaboom" in result.output


def test_explicit_exit_passes_through():
    result = runner.invoke(_app_raising(typer.Exit(3)), [])
    assert result.exit_code == 3


def test_sync_command_and_lifecycle_logging(tmp_path):
    app = typer.Typer()

    @app.command()
    @command_wrapper
    def hello() -> None:
        typer.echo("hi")

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "hi" in result.output
    log_file = next(tmp_path.rglob("taskpad.log"))
    content = log_file.read_text(encoding="utf-8")
    assert "command started: hello" in content
    assert "command completed: hello" in content
    assert f"[taskpad.{__name__}] command started: hello" in content
