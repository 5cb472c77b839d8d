"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class MalformedRecordError(ValidationError):
    """A source row that cannot be turned into a transaction record."""


class SourceUnavailableError(DomainError):
    """Transaction data could not be located or read."""


def csv_not_found(path: str) -> str:
    """Return message for a missing CSV file."""
    return f"CSV file not found: {path}"


def missing_columns(columns: set[str]) -> str:
    """Return message for a CSV header lacking required columns."""
    return f"CSV file missing required columns: {', '.join(sorted(columns))}"


def malformed_row(row_num: int, reason: str) -> str:
    """Return message for a skipped CSV row."""
    return f"Row {row_num}: {reason}"


def empty_palette() -> str:
    """Return message for an empty color palette."""
    return "Color palette must contain at least one color"
