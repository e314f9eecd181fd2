"""Central error types used across the application."""

from __future__ import annotations


class FitnessLogError(RuntimeError):
    """Base error for activity log failures."""


class InvalidActivityError(FitnessLogError):
    """Raised when an activity cannot be built with well-defined fields."""


class InvalidGoalError(FitnessLogError):
    """Raised when a goal target or its parameters are invalid."""


class ParseError(FitnessLogError):
    """Raised when persisted text cannot be turned back into a record."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class StorageError(FitnessLogError):
    """Raised when a storage backend cannot read or write its records."""


__all__ = [
    "FitnessLogError",
    "InvalidActivityError",
    "InvalidGoalError",
    "ParseError",
    "StorageError",
]
