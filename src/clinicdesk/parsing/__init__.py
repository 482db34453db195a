"""
clinicdesk parsing components.

This package provides the prefix tokenizer, the field validators and the
command parser for the clinic console.
"""

from clinicdesk.parsing.parser import CommandParser, parse_command
from clinicdesk.parsing.tokenizer import (
    PrefixTokenizer,
    count_prefix,
    extract_value,
    find_prefix,
)
from clinicdesk.parsing.validation import (
    ensure_not_in_past,
    ensure_single_occurrence,
    looks_like_nric,
    parse_appointment_datetime,
    split_list_field,
    validate_birthdate,
    validate_nric,
)

__all__ = [
    "CommandParser",
    "parse_command",
    "PrefixTokenizer",
    "count_prefix",
    "extract_value",
    "find_prefix",
    "ensure_not_in_past",
    "ensure_single_occurrence",
    "looks_like_nric",
    "parse_appointment_datetime",
    "split_list_field",
    "validate_birthdate",
    "validate_nric",
]
