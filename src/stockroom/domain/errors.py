"""Tagged error kinds returned by the product service.

Each kind is a small immutable value. Callers match on the type to decide
how to report it (HTTP status, CLI message).
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class InvalidArgument:
    """A required field failed validation on create."""

    field: str

    def __str__(self) -> str:
        return f"Invalid value for '{self.field}'"


@dataclass(frozen=True)
class NotFound:
    """No product exists with the requested id."""

    product_id: UUID

    def __str__(self) -> str:
        return f"Product '{self.product_id}' not found"


@dataclass(frozen=True)
class StorageError:
    """The record store failed; the message is the store's own."""

    message: str

    def __str__(self) -> str:
        return f"Storage error: {self.message}"


ProductError = InvalidArgument | NotFound | StorageError
