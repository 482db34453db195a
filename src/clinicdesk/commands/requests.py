"""
Command requests produced by the parser.

Each request holds only the fields its command needs, already validated. The
command execution layer applies them to the clinic store.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from clinicdesk.models import Appointment, Patient, Prescription


class CommandType(Enum):
    """Recognized command keywords."""

    EXIT = "bye"
    HELP = "help"
    ADD_PATIENT = "add-patient"
    DELETE_PATIENT = "delete-patient"
    VIEW_PATIENT = "view-patient"
    LIST_PATIENT = "list-patient"
    STORE_HISTORY = "store-history"
    VIEW_HISTORY = "view-history"
    ADD_APPOINTMENT = "add-appointment"
    DELETE_APPOINTMENT = "delete-appointment"
    LIST_APPOINTMENT = "list-appointment"
    SORT_APPOINTMENT = "sort-appointment"
    EDIT_PATIENT = "edit-patient"
    EDIT_HISTORY = "edit-history"
    MARK_APPOINTMENT = "mark-appointment"
    UNMARK_APPOINTMENT = "unmark-appointment"
    FIND_APPOINTMENT = "find-appointment"
    ADD_PRESCRIPTION = "add-prescription"
    VIEW_ALL_PRESCRIPTIONS = "view-all-prescriptions"
    VIEW_PRESCRIPTION = "view-prescription"


class SortKey(str, Enum):
    """Canonical appointment sort orders."""

    DATE = "date"
    ID = "id"


class HistoryLookup(str, Enum):
    """How view-history identifies the patient."""

    NRIC = "ic"
    NAME = "n"


@dataclass
class CommandRequest:
    """Base class for all parsed command requests."""

    command_type: ClassVar[CommandType]

    @property
    def is_exit(self) -> bool:
        """Check if this request ends the session."""
        return self.command_type == CommandType.EXIT


@dataclass
class ExitRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.EXIT


@dataclass
class HelpRequest(CommandRequest):
    """Show the usage of every command."""

    command_type: ClassVar[CommandType] = CommandType.HELP

    text: str = ""


@dataclass
class AddPatientRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.ADD_PATIENT

    patient: Patient


@dataclass
class DeletePatientRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.DELETE_PATIENT

    nric: str


@dataclass
class ViewPatientRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.VIEW_PATIENT

    nric: str


@dataclass
class ListPatientRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.LIST_PATIENT


@dataclass
class StoreHistoryRequest(CommandRequest):
    """Append medical history entries to a patient."""

    command_type: ClassVar[CommandType] = CommandType.STORE_HISTORY

    nric: str
    history: list[str] = field(default_factory=list)


@dataclass
class ViewHistoryRequest(CommandRequest):
    """
    Look up a patient's medical history.

    Params:
        lookup: Whether value is an NRIC or a patient name
        value: The NRIC or the name, as typed
    """

    command_type: ClassVar[CommandType] = CommandType.VIEW_HISTORY

    lookup: HistoryLookup
    value: str


@dataclass
class AddAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.ADD_APPOINTMENT

    appointment: Appointment


@dataclass
class DeleteAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.DELETE_APPOINTMENT

    appointment_id: str


@dataclass
class ListAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.LIST_APPOINTMENT


@dataclass
class SortAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.SORT_APPOINTMENT

    sort_key: SortKey


@dataclass
class EditPatientRequest(CommandRequest):
    """
    Partial update of a patient's details.

    Every field other than nric is None when it was not given, meaning the
    stored value stays unchanged.
    """

    command_type: ClassVar[CommandType] = CommandType.EDIT_PATIENT

    nric: str
    name: str | None = None
    birthdate: str | None = None
    gender: str | None = None
    address: str | None = None
    phone: str | None = None

    def changes(self) -> dict[str, str]:
        """Return only the fields that were given."""
        candidates = {
            "name": self.name,
            "birthdate": self.birthdate,
            "gender": self.gender,
            "address": self.address,
            "contact": self.phone,
        }
        return {key: value for key, value in candidates.items() if value is not None}


@dataclass
class EditHistoryRequest(CommandRequest):
    """Replace old_history with new_history in a patient's medical history."""

    command_type: ClassVar[CommandType] = CommandType.EDIT_HISTORY

    nric: str
    old_history: str
    new_history: str


@dataclass
class MarkAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.MARK_APPOINTMENT

    appointment_id: str


@dataclass
class UnmarkAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.UNMARK_APPOINTMENT

    appointment_id: str


@dataclass
class FindAppointmentRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.FIND_APPOINTMENT

    nric: str


@dataclass
class AddPrescriptionRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.ADD_PRESCRIPTION

    prescription: Prescription


@dataclass
class ViewAllPrescriptionsRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.VIEW_ALL_PRESCRIPTIONS

    patient_id: str


@dataclass
class ViewPrescriptionRequest(CommandRequest):
    command_type: ClassVar[CommandType] = CommandType.VIEW_PRESCRIPTION

    prescription_id: str
