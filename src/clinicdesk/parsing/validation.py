"""
Field validators for clinic commands.

Each validator takes the raw (already trimmed) field value and either returns
the converted value or raises the matching InvalidInputFormatError subclass.
The usage string of the calling command is threaded through so every error
carries actionable help.
"""

import re
from collections.abc import Iterable
from datetime import datetime

from clinicdesk.config import DEFAULT_SETTINGS, ParserSettings
from clinicdesk.core.prefixes import FieldPrefix
from clinicdesk.exceptions import (
    DuplicatePrefixError,
    ErrorContext,
    MalformedValueError,
    SemanticViolationError,
)
from clinicdesk.parsing.tokenizer import count_prefix

# Identifiers and dates accept ASCII letters and digits only
_ASCII_NOCASE = re.ASCII | re.IGNORECASE


def validate_nric(
    value: str,
    usage: str | None = None,
    context: ErrorContext | None = None,
    settings: ParserSettings = DEFAULT_SETTINGS,
) -> str:
    """
    Validate a patient NRIC.

    Params:
        value: Identifier as typed
        usage: Usage string of the command being parsed
        context: ErrorContext for the failing command
        settings: Parser settings holding the NRIC pattern

    Returns:
        The identifier, upper-cased

    Raises:
        MalformedValueError: If the identifier does not match the NRIC pattern
    """
    candidate = value.strip()
    if not re.fullmatch(settings.nric_pattern, candidate, _ASCII_NOCASE):
        raise MalformedValueError(
            f"Invalid IC format. Please use a valid IC e.g. {settings.nric_example} "
            f"({settings.nric_description})",
            usage=usage,
            context=context,
        )
    return candidate.upper()


def looks_like_nric(value: str, settings: ParserSettings = DEFAULT_SETTINGS) -> bool:
    """Check whether a bare value has the shape of an NRIC rather than a name."""
    return (
        re.fullmatch(settings.nric_shape_pattern, value.strip(), _ASCII_NOCASE)
        is not None
    )


def validate_birthdate(
    value: str,
    usage: str | None = None,
    context: ErrorContext | None = None,
    settings: ParserSettings = DEFAULT_SETTINGS,
) -> str:
    """
    Validate a birth date written as yyyy-MM-dd.

    Returns:
        The birth date string unchanged

    Raises:
        MalformedValueError: If the value is not a real calendar date in that form
    """
    candidate = value.strip()
    try:
        if not re.fullmatch(settings.date_pattern, candidate, re.ASCII):
            raise ValueError(candidate)
        datetime.strptime(candidate, settings.birthdate_format)
    except ValueError:
        raise MalformedValueError(
            "Invalid birthdate format. Please use: dob/yyyy-MM-dd",
            usage=usage,
            context=context,
        ) from None
    return candidate


def parse_appointment_datetime(
    date: str,
    time: str,
    usage: str | None = None,
    context: ErrorContext | None = None,
    settings: ParserSettings = DEFAULT_SETTINGS,
) -> datetime:
    """
    Combine a date token and a time token into a datetime.

    The tokens are joined with a single space and parsed against
    yyyy-MM-dd HHmm. Widths are strict: 2025-3-5 or 900 are rejected.

    Params:
        date: Date token (dt/ value)
        time: Time token (t/ value)
        usage: Usage string of the command being parsed
        context: ErrorContext for the failing command
        settings: Parser settings holding the formats

    Returns:
        Parsed datetime with minute precision

    Raises:
        MalformedValueError: If either token is malformed or not a real moment
    """
    date = date.strip()
    time = time.strip()
    try:
        if not re.fullmatch(settings.date_pattern, date, re.ASCII) or not re.fullmatch(
            settings.time_pattern, time, re.ASCII
        ):
            raise ValueError(f"{date} {time}")
        return datetime.strptime(f"{date} {time}", settings.input_datetime_format)
    except ValueError:
        raise MalformedValueError(
            "Invalid date/time format. Please use: dt/yyyy-MM-dd and t/HHmm",
            usage=usage,
            context=context,
        ) from None


def ensure_not_in_past(
    moment: datetime,
    now: datetime,
    usage: str | None = None,
    context: ErrorContext | None = None,
) -> datetime:
    """
    Reject a moment strictly earlier than now.

    Raises:
        SemanticViolationError: If moment is before now
    """
    if moment < now:
        raise SemanticViolationError(
            "The appointment date/time cannot be before the current date/time",
            usage=usage,
            context=context,
        )
    return moment


def split_list_field(
    value: str, settings: ParserSettings = DEFAULT_SETTINGS
) -> list[str]:
    """
    Split a comma-separated field into entries.

    Entries are trimmed and kept in order. Duplicates and empty entries are kept.

    Params:
        value: Raw field value, e.g. "Fever, Cough"

    Returns:
        List of entries, e.g. ["Fever", "Cough"]
    """
    return [entry.strip() for entry in re.split(settings.list_separator_pattern, value)]


def ensure_single_occurrence(
    text: str,
    prefixes: Iterable[FieldPrefix | str],
    usage: str | None = None,
    context: ErrorContext | None = None,
) -> None:
    """
    Reject text in which any of the given prefixes appears more than once.

    Params:
        text: Argument text of the command
        prefixes: Prefixes read by the command

    Raises:
        DuplicatePrefixError: On the first prefix found more than once
    """
    for prefix in prefixes:
        literal = str(prefix)
        if count_prefix(text, literal) > 1:
            duplicate_context = ErrorContext(
                command_text=context.command_text if context else None,
                command_word=context.command_word if context else None,
                prefix=literal,
            )
            raise DuplicatePrefixError(literal, usage=usage, context=duplicate_context)
