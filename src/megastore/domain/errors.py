"""Shared domain error messages and error types."""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying each recoverable business error."""

    MISSING_NAME = "missing_name"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    RECORD_DELETED = "record_deleted"
    ALREADY_DELETED = "already_deleted"
    NOT_DELETED = "not_deleted"


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling. Concrete errors set ``kind``
    so the boundary layers can map them without inspecting messages.
    """

    kind: ErrorKind | None = None


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class LifecycleError(DomainError):
    """Operation not allowed in the record's current lifecycle state."""


class MissingNameError(ValidationError):
    kind = ErrorKind.MISSING_NAME


class InvalidFormatError(ValidationError):
    kind = ErrorKind.INVALID_FORMAT


class DuplicateNameError(ConflictError):
    kind = ErrorKind.DUPLICATE_NAME


class EntryNotFoundError(NotFoundError):
    kind = ErrorKind.NOT_FOUND


class RecordDeletedError(LifecycleError):
    kind = ErrorKind.RECORD_DELETED


class AlreadyDeletedError(LifecycleError):
    kind = ErrorKind.ALREADY_DELETED


class NotDeletedError(LifecycleError):
    kind = ErrorKind.NOT_DELETED


def missing_name(label: str) -> str:
    """Return message for a name that was not sent."""
    return f"The {label} must have a name"


def invalid_letters_format(name: str) -> str:
    """Return message for a name outside the letters-and-spaces rule."""
    return (
        f"Name '{name}' is not valid: use only letters, "
        "with single spaces between words"
    )


def invalid_alphanumeric_format(name: str) -> str:
    """Return message for a name outside the letters-digits-and-spaces rule."""
    return (
        f"Name '{name}' is not valid: use only letters and numbers, "
        "with single spaces between words"
    )


def duplicate_name(label: str, name: str) -> str:
    """Return message for a name already held by an active record."""
    return f"A {label} named '{name}' already exists"


def entry_not_found(label: str, entry_id: int) -> str:
    """Return message for a missing record."""
    return f"{label.capitalize()} {entry_id} not found"


def entry_deleted(label: str, entry_id: int) -> str:
    """Return message for an operation on a soft-deleted record."""
    return f"{label.capitalize()} {entry_id} is deleted; restore it first"


def entry_already_deleted(label: str, entry_id: int) -> str:
    """Return message for deleting a record twice."""
    return f"{label.capitalize()} {entry_id} is already deleted"


def entry_not_deleted(label: str, entry_id: int) -> str:
    """Return message for restoring an active record."""
    return f"{label.capitalize()} {entry_id} is not deleted"
