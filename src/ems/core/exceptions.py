from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted form data is invalid or violates domain rules.

    ``errors`` maps a form field name to its messages. Form-level messages
    (not tied to a single field) are stored under the empty key.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__(
            "; ".join(f"{field or 'form'}: {msg}" for field, messages in self.errors.items() for msg in messages)
        )


class NotFoundError(DomainError):
    """Raised when a record is absent, including one deleted while being edited."""

    def __init__(self, entity: str, entity_id: Optional[int] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found" if entity_id is not None else f"{entity} not found")


class IdMismatchError(DomainError):
    """Raised when the id in the URL differs from the id in the submitted form."""

    def __init__(self, path_id: Optional[int], payload_id: Optional[int]):
        self.path_id = path_id
        self.payload_id = payload_id
        super().__init__(f"path id {path_id} != payload id {payload_id}")


class PersistenceError(DomainError):
    """Raised when the database rejects or fails an operation."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
