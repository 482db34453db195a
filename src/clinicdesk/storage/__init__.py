"""
clinicdesk record line codec.

This package decodes and encodes the pipe-delimited lines of the patient and
appointment files.
"""

from clinicdesk.storage.records import (
    decode_appointment,
    decode_patient,
    format_appointment,
    format_counter,
    format_patient,
    load_appointments,
    load_patients,
    parse_counter,
    parse_load_appointment,
    parse_load_patient,
)

__all__ = [
    "decode_appointment",
    "decode_patient",
    "format_appointment",
    "format_counter",
    "format_patient",
    "load_appointments",
    "load_patients",
    "parse_counter",
    "parse_load_appointment",
    "parse_load_patient",
]
