"""Error taxonomy shared by the store, the services and the CLI."""


class TaskpadError(Exception):
    """Base class for all taskpad errors."""


class ValidationError(TaskpadError):
    """Raised when input fields are empty or invalid (blank title, bad priority, ...)."""


class NotFoundError(TaskpadError):
    """Raised when an operation references an unknown id."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(TaskpadError):
    """Raised when a persistence backend fails to read or write its data."""
