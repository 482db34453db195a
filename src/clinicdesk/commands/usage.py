"""
Usage strings for every clinic command.

The same strings are shown by the help command and appended to every parse
error, so they are the single source of truth for command syntax.
"""

from clinicdesk.commands.requests import CommandType

USAGE: dict[CommandType, str] = {
    CommandType.EXIT: "bye",
    CommandType.HELP: "help",
    CommandType.ADD_PATIENT: (
        "add-patient n/NAME ic/NRIC dob/BIRTHDATE(yyyy-MM-dd) g/GENDER p/PHONE "
        "a/ADDRESS [h/MEDICAL_HISTORY]"
    ),
    CommandType.DELETE_PATIENT: "delete-patient NRIC",
    CommandType.VIEW_PATIENT: "view-patient NRIC",
    CommandType.LIST_PATIENT: "list-patient",
    CommandType.STORE_HISTORY: "store-history ic/NRIC h/MEDICAL_HISTORY",
    CommandType.VIEW_HISTORY: "view-history NRIC or view-history NAME",
    CommandType.ADD_APPOINTMENT: (
        "add-appointment ic/NRIC dt/DATE(yyyy-MM-dd) t/TIME(HHmm) dsc/DESCRIPTION"
    ),
    CommandType.DELETE_APPOINTMENT: "delete-appointment APPOINTMENT_ID",
    CommandType.LIST_APPOINTMENT: "list-appointment",
    CommandType.SORT_APPOINTMENT: (
        "'sort-appointment byDate' or 'sort-appointment byId' (case-insensitive)"
    ),
    CommandType.EDIT_PATIENT: (
        "edit-patient ic/NRIC [n/NAME] [dob/BIRTHDATE] [g/GENDER] [a/ADDRESS] [p/PHONE]"
    ),
    CommandType.EDIT_HISTORY: "edit-history ic/NRIC old/OLD_HISTORY new/NEW_HISTORY",
    CommandType.MARK_APPOINTMENT: "mark-appointment APPOINTMENT_ID",
    CommandType.UNMARK_APPOINTMENT: "unmark-appointment APPOINTMENT_ID",
    CommandType.FIND_APPOINTMENT: "find-appointment PATIENT_NRIC",
    CommandType.ADD_PRESCRIPTION: (
        "add-prescription ic/PATIENT_ID s/SYMPTOMS m/MEDICINES [nt/NOTES]"
    ),
    CommandType.VIEW_ALL_PRESCRIPTIONS: "view-all-prescriptions PATIENT_ID",
    CommandType.VIEW_PRESCRIPTION: "view-prescription PRESCRIPTION_ID",
}

SUMMARIES: dict[CommandType, str] = {
    CommandType.EXIT: "Exit the program",
    CommandType.HELP: "Show this list of commands",
    CommandType.ADD_PATIENT: "Register a new patient",
    CommandType.DELETE_PATIENT: "Remove a patient",
    CommandType.VIEW_PATIENT: "Show one patient's details",
    CommandType.LIST_PATIENT: "List all patients",
    CommandType.STORE_HISTORY: "Add medical history entries (comma-separated)",
    CommandType.VIEW_HISTORY: "Show a patient's medical history",
    CommandType.ADD_APPOINTMENT: "Schedule an appointment",
    CommandType.DELETE_APPOINTMENT: "Cancel an appointment",
    CommandType.LIST_APPOINTMENT: "List all appointments",
    CommandType.SORT_APPOINTMENT: "Sort appointments by date or by id",
    CommandType.EDIT_PATIENT: "Update a patient's details",
    CommandType.EDIT_HISTORY: "Replace a medical history entry",
    CommandType.MARK_APPOINTMENT: "Mark an appointment as done",
    CommandType.UNMARK_APPOINTMENT: "Mark an appointment as not done",
    CommandType.FIND_APPOINTMENT: "List a patient's appointments",
    CommandType.ADD_PRESCRIPTION: "Issue a prescription (comma-separated lists)",
    CommandType.VIEW_ALL_PRESCRIPTIONS: "List a patient's prescriptions",
    CommandType.VIEW_PRESCRIPTION: "Show one prescription",
}


def usage_for(command_type: CommandType) -> str:
    """Return the usage string of a command."""
    return USAGE[command_type]


def help_text() -> str:
    """
    Build the help listing shown by the help command.

    Returns:
        One entry per command, in keyword declaration order
    """
    lines = ["Available commands:"]
    for command_type in CommandType:
        lines.append(f"  {SUMMARIES[command_type]}:")
        lines.append(f"    {USAGE[command_type]}")
    return "\n".join(lines)
