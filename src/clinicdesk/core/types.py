"""
Core type definitions for clinicdesk.

This module contains the small value types and type aliases used across the
tokenizer, the validators and the command builders.
"""

from collections.abc import Callable
from datetime import datetime

from attrs import frozen

# None means the field was not given (or was blank after trimming)
FieldValue = str | None

Clock = Callable[[], datetime]

RecordLine = str


@frozen
class ParsedField:
    """A (prefix, value) pair extracted from a command line."""

    prefix: str
    value: str
