"""
Exception classes for clinicdesk command parsing.

This module defines specific exception types for the different ways a command
line or a persisted record line can fail to parse. Live-input errors carry the
usage string of the command so callers can show actionable help.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Reason, usage and the offending field
    DEVELOPER = "developer"  # Also the raw command line as typed


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures which command and which field an error refers to, together with
    the raw line it was parsed from.

    Params:
        command_text: The original line that caused the error
        command_word: The lower-cased command keyword (e.g. "add-patient")
        prefix: Field prefix involved in the failure (e.g. "ic/")
    """

    command_text: str | None = None
    command_word: str | None = None
    prefix: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.command_word:
            if self.prefix:
                lines.append(f"  in {self.command_word} field {self.prefix}")
            else:
                lines.append(f"  in {self.command_word}")
        elif self.prefix:
            lines.append(f"  in field {self.prefix}")

        if error_level == ErrorLevel.DEVELOPER and self.command_text is not None:
            lines.append(f"  command: {self.command_text}")

        return "\n".join(lines)


class ClinicDeskError(Exception):
    """Base exception for all clinicdesk errors."""

    pass


class CommandError(ClinicDeskError):
    """Base exception for failures while parsing a live command line."""

    def __init__(
        self,
        reason: str,
        usage: str | None = None,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            reason: Short description of what is wrong with the input
            usage: Required usage string for the command, if one applies
            context: ErrorContext with command and field information
            error_level: Level of detail to show in error message
        """
        self.reason = reason
        self.usage = usage
        self.context = context
        self.error_level = error_level

        message = reason
        if usage:
            message = f"{message}\nPlease use: {usage}"
        if context:
            location_info = context.format_location(error_level)
            if location_info:
                message = f"{message}\n{location_info}"

        super().__init__(message)

    @property
    def prefix(self) -> str | None:
        """Field prefix the error refers to, if known."""
        return self.context.prefix if self.context else None


class InvalidInputFormatError(CommandError):
    """Raised when a recognized command has input that cannot be accepted."""

    pass


class MissingFieldError(InvalidInputFormatError):
    """Raised when a mandatory field is absent or empty after trimming."""

    pass


class MalformedValueError(InvalidInputFormatError):
    """Raised when a field is present but fails its format check."""

    pass


class DuplicatePrefixError(MalformedValueError):
    """Raised when a field prefix is given more than once in one command."""

    def __init__(
        self,
        prefix: str,
        usage: str | None = None,
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            prefix: The prefix that appears more than once
            usage: Required usage string for the command
            context: ErrorContext with command information
        """
        super().__init__(
            f"Field '{prefix}' is given more than once.", usage=usage, context=context
        )
        self.duplicate_prefix = prefix


class SemanticViolationError(InvalidInputFormatError):
    """Raised when a well-formed value breaks a business rule."""

    pass


class UnknownCommandError(CommandError):
    """Raised when the command keyword is not recognized."""

    def __init__(self, command_word: str):
        """
        Initialize the exception.

        Params:
            command_word: The unrecognized keyword as typed
        """
        self.command_word = command_word
        super().__init__(
            "Unknown command. Please try again.",
            context=ErrorContext(command_word=command_word),
        )


class RecordFormatError(ClinicDeskError):
    """Raised when a persisted record line cannot be decoded."""

    def __init__(self, line: str, reason: str):
        """
        Initialize the exception.

        Params:
            line: The stored line that failed to decode
            reason: Why the line is invalid
        """
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid record '{line}': {reason}")
