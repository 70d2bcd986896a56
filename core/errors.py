"""Error kinds raised by the entity store and form adapter."""
from typing import Iterable


class ConsoleError(Exception):
    """Base class for recoverable console errors."""


class RecordNotFound(ConsoleError, LookupError):
    """No record with the requested id exists in the collection."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} #{record_id} not found")


class ValidationFailed(ConsoleError, ValueError):
    """One or more required fields are empty."""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Required fields missing: {', '.join(self.fields)}")
