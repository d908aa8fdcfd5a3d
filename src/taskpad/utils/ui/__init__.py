"""User interface helpers (console, formatters)."""
