"""
clinicdesk exception classes.

This package provides all exception types used throughout clinicdesk for
consistent error handling and reporting.
"""

from clinicdesk.exceptions.core import (
    ClinicDeskError,
    CommandError,
    DuplicatePrefixError,
    ErrorContext,
    ErrorLevel,
    InvalidInputFormatError,
    MalformedValueError,
    MissingFieldError,
    RecordFormatError,
    SemanticViolationError,
    UnknownCommandError,
)

__all__ = [
    "ClinicDeskError",
    "CommandError",
    "DuplicatePrefixError",
    "ErrorContext",
    "ErrorLevel",
    "InvalidInputFormatError",
    "MalformedValueError",
    "MissingFieldError",
    "RecordFormatError",
    "SemanticViolationError",
    "UnknownCommandError",
]
