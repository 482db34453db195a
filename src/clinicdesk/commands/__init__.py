"""
clinicdesk command requests.

This package contains the typed requests the parser produces and the usage
strings that document each command.
"""

from clinicdesk.commands.requests import (
    AddAppointmentRequest,
    AddPatientRequest,
    AddPrescriptionRequest,
    CommandRequest,
    CommandType,
    DeleteAppointmentRequest,
    DeletePatientRequest,
    EditHistoryRequest,
    EditPatientRequest,
    ExitRequest,
    FindAppointmentRequest,
    HelpRequest,
    HistoryLookup,
    ListAppointmentRequest,
    ListPatientRequest,
    MarkAppointmentRequest,
    SortAppointmentRequest,
    SortKey,
    StoreHistoryRequest,
    UnmarkAppointmentRequest,
    ViewAllPrescriptionsRequest,
    ViewHistoryRequest,
    ViewPatientRequest,
    ViewPrescriptionRequest,
)
from clinicdesk.commands.usage import USAGE, help_text, usage_for

__all__ = [
    "AddAppointmentRequest",
    "AddPatientRequest",
    "AddPrescriptionRequest",
    "CommandRequest",
    "CommandType",
    "DeleteAppointmentRequest",
    "DeletePatientRequest",
    "EditHistoryRequest",
    "EditPatientRequest",
    "ExitRequest",
    "FindAppointmentRequest",
    "HelpRequest",
    "HistoryLookup",
    "ListAppointmentRequest",
    "ListPatientRequest",
    "MarkAppointmentRequest",
    "SortAppointmentRequest",
    "SortKey",
    "StoreHistoryRequest",
    "UnmarkAppointmentRequest",
    "ViewAllPrescriptionsRequest",
    "ViewHistoryRequest",
    "ViewPatientRequest",
    "ViewPrescriptionRequest",
    "USAGE",
    "help_text",
    "usage_for",
]
