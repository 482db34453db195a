"""
Core clinicdesk components.

This package provides the field prefix set and the shared type definitions
used by the parsing layer.
"""

from clinicdesk.core.prefixes import FIELD_PREFIXES, FieldPrefix
from clinicdesk.core.types import Clock, FieldValue, ParsedField, RecordLine

__all__ = [
    "FIELD_PREFIXES",
    "FieldPrefix",
    "Clock",
    "FieldValue",
    "ParsedField",
    "RecordLine",
]
