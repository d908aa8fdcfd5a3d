"""
Exit codes for the taskpad CLI.

Semantic exit codes let scripts tell apart bad input, missing records and
storage failures without parsing error text.
"""

from taskpad.models import NotFoundError, StorageError, ValidationError

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5

# Data file could not be read or written
ERROR_STORAGE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Resource not found",
        ERROR_STORAGE: "Data file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")


def exit_code_for(error: Exception) -> int:
    """Map a taskpad error to its exit code."""
    if isinstance(error, ValidationError):
        return ERROR_INVALID_ARGS
    if isinstance(error, NotFoundError):
        return ERROR_NOT_FOUND
    if isinstance(error, StorageError):
        return ERROR_STORAGE
    return ERROR_GENERAL
