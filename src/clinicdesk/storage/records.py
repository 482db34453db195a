"""
Pipe-delimited record lines for the patient and appointment files.

Patient line:     id|name|dob|gender|address|contact[|history,comma,separated]
Appointment line: id|isDone|nric|dateTime|description

The appointment file also holds a counter line (``countId:<n>``) which is not
a record. Loading is best-effort: a line that cannot be decoded is skipped
rather than aborting the load.
"""

import logging
import re
from collections.abc import Iterable
from datetime import datetime

from pydantic import ValidationError

from clinicdesk.config import DEFAULT_SETTINGS, ParserSettings
from clinicdesk.core.types import RecordLine
from clinicdesk.exceptions import RecordFormatError
from clinicdesk.models import Appointment, Patient

logger = logging.getLogger(__name__)

PATIENT_FIELD_COUNT = 6
APPOINTMENT_FIELD_COUNT = 5


def _split_record(line: RecordLine, settings: ParserSettings) -> list[str]:
    """Split a record line, dropping trailing empty fields."""
    tokens = line.rstrip("\r\n").split(settings.record_separator)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def decode_patient(
    line: RecordLine, settings: ParserSettings = DEFAULT_SETTINGS
) -> Patient:
    """
    Decode a patient record line.

    Params:
        line: Stored patient line
        settings: Parser settings holding the separators

    Returns:
        The decoded patient

    Raises:
        RecordFormatError: If the line has too few fields
    """
    tokens = _split_record(line, settings)
    if len(tokens) < PATIENT_FIELD_COUNT:
        raise RecordFormatError(
            line, f"expected at least {PATIENT_FIELD_COUNT} fields, got {len(tokens)}"
        )

    nric, name, birthdate, gender, address, contact = tokens[:PATIENT_FIELD_COUNT]
    medical_history = []
    if len(tokens) > PATIENT_FIELD_COUNT and tokens[PATIENT_FIELD_COUNT].strip():
        medical_history = [
            entry.strip() for entry in tokens[PATIENT_FIELD_COUNT].split(",")
        ]

    return Patient(
        nric=nric,
        name=name,
        birthdate=birthdate,
        gender=gender,
        address=address,
        contact=contact,
        medical_history=medical_history,
    )


def decode_appointment(
    line: RecordLine, settings: ParserSettings = DEFAULT_SETTINGS
) -> Appointment:
    """
    Decode an appointment record line.

    The stored id is numeric; the decoded appointment id is "A" followed by it.

    Raises:
        RecordFormatError: If the line is a counter line, has too few fields,
            or holds an unreadable id or date/time
    """
    if line.startswith(settings.counter_marker):
        raise RecordFormatError(line, "counter line is not a record")

    tokens = _split_record(line, settings)
    if len(tokens) < APPOINTMENT_FIELD_COUNT:
        raise RecordFormatError(
            line,
            f"expected {APPOINTMENT_FIELD_COUNT} fields, got {len(tokens)}",
        )

    number, is_done, nric, date_time, description = (
        token.strip() for token in tokens[:APPOINTMENT_FIELD_COUNT]
    )
    if not re.fullmatch(r"[0-9]+", number):
        raise RecordFormatError(line, f"invalid appointment number '{number}'")

    try:
        moment = datetime.strptime(date_time, settings.storage_datetime_format)
    except ValueError:
        raise RecordFormatError(line, f"invalid date/time '{date_time}'") from None

    try:
        return Appointment(
            appointment_id=f"A{number}",
            nric=nric,
            date_time=moment,
            description=description,
            is_done=is_done == "true",
        )
    except ValidationError as e:
        raise RecordFormatError(line, str(e)) from e


def parse_load_patient(
    line: RecordLine, settings: ParserSettings = DEFAULT_SETTINGS
) -> Patient | None:
    """
    Decode a stored patient line, or return None if it is malformed.

    Params:
        line: Stored patient line

    Returns:
        The patient, or None for a line that is not a valid record
    """
    try:
        return decode_patient(line, settings)
    except RecordFormatError as e:
        logger.debug(f"Skipping patient record: {e}")
        return None


def parse_load_appointment(
    line: RecordLine, settings: ParserSettings = DEFAULT_SETTINGS
) -> Appointment | None:
    """
    Decode a stored appointment line, or return None if it is not a record.

    Counter lines and malformed lines both yield None.
    """
    try:
        return decode_appointment(line, settings)
    except RecordFormatError as e:
        logger.debug(f"Skipping appointment record: {e}")
        return None


def load_patients(
    lines: Iterable[RecordLine], settings: ParserSettings = DEFAULT_SETTINGS
) -> list[Patient]:
    """Decode every valid patient line, skipping blank and malformed ones."""
    patients = []
    for line in lines:
        if not line.strip():
            continue
        patient = parse_load_patient(line, settings)
        if patient is not None:
            patients.append(patient)
    return patients


def load_appointments(
    lines: Iterable[RecordLine], settings: ParserSettings = DEFAULT_SETTINGS
) -> list[Appointment]:
    """Decode every valid appointment line, skipping counter, blank and malformed ones."""
    appointments = []
    for line in lines:
        if not line.strip():
            continue
        appointment = parse_load_appointment(line, settings)
        if appointment is not None:
            appointments.append(appointment)
    return appointments


def parse_counter(
    line: RecordLine, settings: ParserSettings = DEFAULT_SETTINGS
) -> int | None:
    """
    Read the appointment id counter from a counter line.

    Returns:
        The counter value, or None if the line is not a valid counter line
    """
    if not line.startswith(settings.counter_marker):
        return None
    value = line[len(settings.counter_marker) :].strip()
    if not re.fullmatch(r"[0-9]+", value):
        logger.debug(f"Skipping counter line with invalid value '{value}'")
        return None
    return int(value)


def format_patient(
    patient: Patient, settings: ParserSettings = DEFAULT_SETTINGS
) -> RecordLine:
    """Encode a patient as a stored line; history is omitted when empty."""
    fields = [
        patient.nric,
        patient.name,
        patient.birthdate,
        patient.gender,
        patient.address,
        patient.contact,
    ]
    if patient.medical_history:
        fields.append(",".join(patient.medical_history))
    return settings.record_separator.join(fields)


def format_appointment(
    appointment: Appointment, settings: ParserSettings = DEFAULT_SETTINGS
) -> RecordLine:
    """
    Encode an appointment as a stored line.

    Raises:
        RecordFormatError: If the appointment has not been numbered yet
    """
    appointment_id = appointment.appointment_id or ""
    if not re.fullmatch(
        settings.appointment_id_pattern, appointment_id, re.ASCII | re.IGNORECASE
    ):
        raise RecordFormatError(
            appointment_id, "appointment must have an id like A1 before it is stored"
        )

    fields = [
        appointment_id[1:],
        "true" if appointment.is_done else "false",
        appointment.nric,
        appointment.date_time.strftime(settings.storage_datetime_format),
        appointment.description,
    ]
    return settings.record_separator.join(fields)


def format_counter(count: int, settings: ParserSettings = DEFAULT_SETTINGS) -> RecordLine:
    """Encode the appointment id counter line."""
    return f"{settings.counter_marker}{count}"
