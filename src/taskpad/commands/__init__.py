"""Typer command groups for the taskpad CLI."""
