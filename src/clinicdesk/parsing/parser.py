"""
Parser for clinic console commands.

This module turns one line of user input into a typed, validated command
request. The first whitespace-delimited token selects the command; the rest
of the line is read with the prefix tokenizer and checked by the field
validators before any request or domain record is built.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime

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
from clinicdesk.commands.usage import help_text, usage_for
from clinicdesk.config import DEFAULT_SETTINGS, ParserSettings
from clinicdesk.core.prefixes import FieldPrefix
from clinicdesk.core.types import Clock
from clinicdesk.exceptions import (
    ErrorContext,
    MalformedValueError,
    MissingFieldError,
    UnknownCommandError,
)
from clinicdesk.models import Appointment, Patient, Prescription
from clinicdesk.parsing.tokenizer import PrefixTokenizer
from clinicdesk.parsing.validation import (
    ensure_not_in_past,
    ensure_single_occurrence,
    looks_like_nric,
    parse_appointment_datetime,
    split_list_field,
    validate_birthdate,
    validate_nric,
)

logger = logging.getLogger(__name__)

Builder = Callable[[str, ErrorContext], CommandRequest]


class CommandParser:
    """
    Parser for clinic console commands.

    Params:
        settings: Formats and patterns used by the validators
        clock: Returns the current moment; appointments before it are rejected
        tokenizer: Prefix tokenizer; defaults to the clinic field prefixes
    """

    SORT_KEYWORDS = {"bydate": SortKey.DATE, "byid": SortKey.ID}

    def __init__(
        self,
        settings: ParserSettings = DEFAULT_SETTINGS,
        clock: Clock | None = None,
        tokenizer: PrefixTokenizer | None = None,
    ):
        self.settings = settings
        self._clock = clock or datetime.now
        self._tokenizer = tokenizer or PrefixTokenizer()
        self._builders: dict[CommandType, Builder] = {
            CommandType.EXIT: self._parse_exit,
            CommandType.HELP: self._parse_help,
            CommandType.ADD_PATIENT: self._parse_add_patient,
            CommandType.DELETE_PATIENT: self._parse_delete_patient,
            CommandType.VIEW_PATIENT: self._parse_view_patient,
            CommandType.LIST_PATIENT: self._parse_list_patient,
            CommandType.STORE_HISTORY: self._parse_store_history,
            CommandType.VIEW_HISTORY: self._parse_view_history,
            CommandType.ADD_APPOINTMENT: self._parse_add_appointment,
            CommandType.DELETE_APPOINTMENT: self._parse_delete_appointment,
            CommandType.LIST_APPOINTMENT: self._parse_list_appointment,
            CommandType.SORT_APPOINTMENT: self._parse_sort_appointment,
            CommandType.EDIT_PATIENT: self._parse_edit_patient,
            CommandType.EDIT_HISTORY: self._parse_edit_history,
            CommandType.MARK_APPOINTMENT: self._parse_mark_appointment,
            CommandType.UNMARK_APPOINTMENT: self._parse_unmark_appointment,
            CommandType.FIND_APPOINTMENT: self._parse_find_appointment,
            CommandType.ADD_PRESCRIPTION: self._parse_add_prescription,
            CommandType.VIEW_ALL_PRESCRIPTIONS: self._parse_view_all_prescriptions,
            CommandType.VIEW_PRESCRIPTION: self._parse_view_prescription,
        }

    @property
    def keywords(self) -> list[str]:
        """Recognized command keywords, in declaration order."""
        return [command_type.value for command_type in self._builders]

    def parse(self, line: str | None) -> CommandRequest:
        """
        Parse one line of input into a command request.

        Params:
            line: The full line as typed

        Returns:
            The request matching the command keyword

        Raises:
            MissingFieldError: If the line is blank or a mandatory field is absent
            MalformedValueError: If a field fails its format check
            SemanticViolationError: If a well-formed value breaks a business rule
            UnknownCommandError: If the keyword is not recognized
        """
        if line is None or not line.strip():
            raise MissingFieldError("Please enter a command.")

        parts = line.strip().split(maxsplit=1)
        command_word = parts[0].lower()
        arguments = parts[1] if len(parts) > 1 else ""

        try:
            command_type = CommandType(command_word)
        except ValueError:
            raise UnknownCommandError(parts[0]) from None

        context = ErrorContext(command_text=line, command_word=command_word)
        request = self._builders[command_type](arguments, context)
        logger.debug(f"Parsed '{command_word}' into {type(request).__name__}")
        return request

    # Shared field helpers

    def _extract(self, arguments: str, prefix: FieldPrefix) -> str | None:
        return self._tokenizer.extract(arguments, prefix.value)

    def _require(
        self,
        arguments: str,
        prefixes: list[FieldPrefix],
        reason: str,
        command_type: CommandType,
        context: ErrorContext,
    ) -> dict[FieldPrefix, str]:
        """
        Extract mandatory fields, failing on the first one that is absent.

        Returns:
            Mapping of prefix to trimmed value for every requested prefix

        Raises:
            MissingFieldError: If any prefix is absent or blank
        """
        values = {}
        missing = []
        for prefix in prefixes:
            value = self._extract(arguments, prefix)
            if value is None:
                missing.append(prefix)
            else:
                values[prefix] = value

        if missing:
            raise MissingFieldError(
                reason,
                usage=usage_for(command_type),
                context=self._field_context(context, missing[0]),
            )
        return values

    def _check_duplicates(
        self,
        arguments: str,
        prefixes: list[FieldPrefix],
        command_type: CommandType,
        context: ErrorContext,
    ) -> None:
        ensure_single_occurrence(
            arguments, prefixes, usage=usage_for(command_type), context=context
        )

    def _nric(
        self, value: str, command_type: CommandType, context: ErrorContext
    ) -> str:
        return validate_nric(
            value,
            usage=usage_for(command_type),
            context=self._field_context(context, FieldPrefix.NRIC),
            settings=self.settings,
        )

    def _remainder(
        self, arguments: str, command_type: CommandType, context: ErrorContext
    ) -> str:
        """Return the text after the keyword, which must not be blank."""
        value = arguments.strip()
        if not value:
            raise MissingFieldError(
                "Invalid command format.",
                usage=usage_for(command_type),
                context=context,
            )
        return value

    @staticmethod
    def _field_context(context: ErrorContext, prefix: FieldPrefix) -> ErrorContext:
        return ErrorContext(
            command_text=context.command_text,
            command_word=context.command_word,
            prefix=prefix.value,
        )

    # Commands without arguments

    def _parse_exit(self, arguments: str, context: ErrorContext) -> ExitRequest:
        return ExitRequest()

    def _parse_help(self, arguments: str, context: ErrorContext) -> HelpRequest:
        return HelpRequest(text=help_text())

    def _parse_list_patient(
        self, arguments: str, context: ErrorContext
    ) -> ListPatientRequest:
        return ListPatientRequest()

    def _parse_list_appointment(
        self, arguments: str, context: ErrorContext
    ) -> ListAppointmentRequest:
        return ListAppointmentRequest()

    # Patient commands

    def _parse_add_patient(
        self, arguments: str, context: ErrorContext
    ) -> AddPatientRequest:
        """Parse add-patient n/NAME ic/NRIC dob/DOB g/GENDER p/PHONE a/ADDRESS [h/HISTORY]."""
        command_type = CommandType.ADD_PATIENT
        mandatory = [
            FieldPrefix.NAME,
            FieldPrefix.NRIC,
            FieldPrefix.BIRTHDATE,
            FieldPrefix.GENDER,
            FieldPrefix.PHONE,
            FieldPrefix.ADDRESS,
        ]
        values = self._require(
            arguments,
            mandatory,
            "Patient details are incomplete!",
            command_type,
            context,
        )
        self._check_duplicates(
            arguments, mandatory + [FieldPrefix.HISTORY], command_type, context
        )

        nric = self._nric(values[FieldPrefix.NRIC], command_type, context)
        birthdate = validate_birthdate(
            values[FieldPrefix.BIRTHDATE],
            usage=usage_for(command_type),
            context=self._field_context(context, FieldPrefix.BIRTHDATE),
            settings=self.settings,
        )

        history = self._extract(arguments, FieldPrefix.HISTORY)
        medical_history = (
            split_list_field(history, self.settings) if history is not None else []
        )

        patient = Patient(
            nric=nric,
            name=values[FieldPrefix.NAME],
            birthdate=birthdate,
            gender=values[FieldPrefix.GENDER],
            address=values[FieldPrefix.ADDRESS],
            contact=values[FieldPrefix.PHONE],
            medical_history=medical_history,
        )
        return AddPatientRequest(patient=patient)

    def _parse_delete_patient(
        self, arguments: str, context: ErrorContext
    ) -> DeletePatientRequest:
        nric = self._remainder(arguments, CommandType.DELETE_PATIENT, context)
        return DeletePatientRequest(nric=nric)

    def _parse_view_patient(
        self, arguments: str, context: ErrorContext
    ) -> ViewPatientRequest:
        command_type = CommandType.VIEW_PATIENT
        nric = self._remainder(arguments, command_type, context)
        return ViewPatientRequest(nric=self._nric(nric, command_type, context))

    def _parse_edit_patient(
        self, arguments: str, context: ErrorContext
    ) -> EditPatientRequest:
        """
        Parse edit-patient ic/NRIC followed by any subset of the detail fields.

        Fields that are not given stay None so the store leaves them unchanged.
        """
        command_type = CommandType.EDIT_PATIENT
        values = self._require(
            arguments, [FieldPrefix.NRIC], "Missing NRIC!", command_type, context
        )
        optional = [
            FieldPrefix.NAME,
            FieldPrefix.BIRTHDATE,
            FieldPrefix.GENDER,
            FieldPrefix.ADDRESS,
            FieldPrefix.PHONE,
        ]
        self._check_duplicates(
            arguments, [FieldPrefix.NRIC] + optional, command_type, context
        )

        nric = self._nric(values[FieldPrefix.NRIC], command_type, context)
        given = {
            field.prefix: field.value for field in self._tokenizer.fields(arguments)
        }
        birthdate = given.get(FieldPrefix.BIRTHDATE.value)
        if birthdate is not None:
            birthdate = validate_birthdate(
                birthdate,
                usage=usage_for(command_type),
                context=self._field_context(context, FieldPrefix.BIRTHDATE),
                settings=self.settings,
            )

        return EditPatientRequest(
            nric=nric,
            name=given.get(FieldPrefix.NAME.value),
            birthdate=birthdate,
            gender=given.get(FieldPrefix.GENDER.value),
            address=given.get(FieldPrefix.ADDRESS.value),
            phone=given.get(FieldPrefix.PHONE.value),
        )

    # Medical history commands

    def _parse_store_history(
        self, arguments: str, context: ErrorContext
    ) -> StoreHistoryRequest:
        command_type = CommandType.STORE_HISTORY
        prefixes = [FieldPrefix.NRIC, FieldPrefix.HISTORY]
        values = self._require(
            arguments, prefixes, "Invalid format.", command_type, context
        )
        self._check_duplicates(arguments, prefixes, command_type, context)

        return StoreHistoryRequest(
            nric=self._nric(values[FieldPrefix.NRIC], command_type, context),
            history=split_list_field(values[FieldPrefix.HISTORY], self.settings),
        )

    def _parse_view_history(
        self, arguments: str, context: ErrorContext
    ) -> ViewHistoryRequest:
        """
        Parse view-history with an NRIC or a name.

        An explicit ic/ or n/ prefix decides the lookup, and an ic/ value must be
        a valid NRIC. Without a prefix, a value shaped like an NRIC is looked up
        as an NRIC and anything else as a name.
        """
        command_type = CommandType.VIEW_HISTORY
        text = arguments.strip()
        lowered = text.lower()

        if lowered.startswith(FieldPrefix.NRIC.value):
            lookup = HistoryLookup.NRIC
            value = self._extract(text, FieldPrefix.NRIC)
        elif lowered.startswith(FieldPrefix.NAME.value):
            lookup = HistoryLookup.NAME
            value = self._extract(text, FieldPrefix.NAME)
        elif looks_like_nric(text, self.settings):
            lookup = HistoryLookup.NRIC
            value = text
        else:
            lookup = HistoryLookup.NAME
            value = text

        if not value:
            raise MissingFieldError(
                "Invalid format.", usage=usage_for(command_type), context=context
            )
        if lowered.startswith(FieldPrefix.NRIC.value):
            value = self._nric(value, command_type, context)
        elif lookup == HistoryLookup.NRIC:
            value = value.upper()
        return ViewHistoryRequest(lookup=lookup, value=value)

    def _parse_edit_history(
        self, arguments: str, context: ErrorContext
    ) -> EditHistoryRequest:
        command_type = CommandType.EDIT_HISTORY
        values = self._require(
            arguments, [FieldPrefix.NRIC], "Missing NRIC!", command_type, context
        )
        values.update(
            self._require(
                arguments,
                [FieldPrefix.OLD_HISTORY, FieldPrefix.NEW_HISTORY],
                "Missing old or new history text!",
                command_type,
                context,
            )
        )
        self._check_duplicates(
            arguments,
            [FieldPrefix.NRIC, FieldPrefix.OLD_HISTORY, FieldPrefix.NEW_HISTORY],
            command_type,
            context,
        )

        return EditHistoryRequest(
            nric=self._nric(values[FieldPrefix.NRIC], command_type, context),
            old_history=values[FieldPrefix.OLD_HISTORY],
            new_history=values[FieldPrefix.NEW_HISTORY],
        )

    # Appointment commands

    def _parse_add_appointment(
        self, arguments: str, context: ErrorContext
    ) -> AddAppointmentRequest:
        """Parse add-appointment ic/NRIC dt/DATE t/TIME dsc/DESCRIPTION."""
        command_type = CommandType.ADD_APPOINTMENT
        prefixes = [
            FieldPrefix.NRIC,
            FieldPrefix.DATE,
            FieldPrefix.TIME,
            FieldPrefix.DESCRIPTION,
        ]
        values = self._require(
            arguments,
            prefixes,
            "Missing details or wrong format for add-appointment!",
            command_type,
            context,
        )
        self._check_duplicates(arguments, prefixes, command_type, context)

        nric = self._nric(values[FieldPrefix.NRIC], command_type, context)
        date_time = parse_appointment_datetime(
            values[FieldPrefix.DATE],
            values[FieldPrefix.TIME],
            usage=usage_for(command_type),
            context=self._field_context(context, FieldPrefix.DATE),
            settings=self.settings,
        )
        ensure_not_in_past(
            date_time,
            self._clock(),
            usage=usage_for(command_type),
            context=self._field_context(context, FieldPrefix.DATE),
        )

        appointment = Appointment(
            nric=nric,
            date_time=date_time,
            description=values[FieldPrefix.DESCRIPTION],
        )
        return AddAppointmentRequest(appointment=appointment)

    def _parse_delete_appointment(
        self, arguments: str, context: ErrorContext
    ) -> DeleteAppointmentRequest:
        command_type = CommandType.DELETE_APPOINTMENT
        appointment_id = self._remainder(arguments, command_type, context)
        if not re.fullmatch(
            self.settings.appointment_id_pattern,
            appointment_id,
            re.ASCII | re.IGNORECASE,
        ):
            raise MalformedValueError(
                "Invalid format!", usage=usage_for(command_type), context=context
            )
        return DeleteAppointmentRequest(appointment_id=appointment_id.upper())

    def _parse_sort_appointment(
        self, arguments: str, context: ErrorContext
    ) -> SortAppointmentRequest:
        command_type = CommandType.SORT_APPOINTMENT
        keyword = self._remainder(arguments, command_type, context).lower()
        if keyword not in self.SORT_KEYWORDS:
            raise MalformedValueError(
                "Invalid format!", usage=usage_for(command_type), context=context
            )
        return SortAppointmentRequest(sort_key=self.SORT_KEYWORDS[keyword])

    def _parse_mark_appointment(
        self, arguments: str, context: ErrorContext
    ) -> MarkAppointmentRequest:
        appointment_id = self._remainder(
            arguments, CommandType.MARK_APPOINTMENT, context
        )
        return MarkAppointmentRequest(appointment_id=appointment_id)

    def _parse_unmark_appointment(
        self, arguments: str, context: ErrorContext
    ) -> UnmarkAppointmentRequest:
        appointment_id = self._remainder(
            arguments, CommandType.UNMARK_APPOINTMENT, context
        )
        return UnmarkAppointmentRequest(appointment_id=appointment_id)

    def _parse_find_appointment(
        self, arguments: str, context: ErrorContext
    ) -> FindAppointmentRequest:
        nric = self._remainder(arguments, CommandType.FIND_APPOINTMENT, context)
        return FindAppointmentRequest(nric=nric)

    # Prescription commands

    def _parse_add_prescription(
        self, arguments: str, context: ErrorContext
    ) -> AddPrescriptionRequest:
        """Parse add-prescription ic/PATIENT_ID s/SYMPTOMS m/MEDICINES [nt/NOTES]."""
        command_type = CommandType.ADD_PRESCRIPTION
        mandatory = [FieldPrefix.NRIC, FieldPrefix.SYMPTOMS, FieldPrefix.MEDICINES]
        values = self._require(
            arguments,
            mandatory,
            "Missing details or wrong format for add-prescription!",
            command_type,
            context,
        )
        self._check_duplicates(
            arguments, mandatory + [FieldPrefix.NOTES], command_type, context
        )

        notes = self._extract(arguments, FieldPrefix.NOTES)
        prescription = Prescription(
            patient_id=self._nric(values[FieldPrefix.NRIC], command_type, context),
            symptoms=split_list_field(values[FieldPrefix.SYMPTOMS], self.settings),
            medicines=split_list_field(values[FieldPrefix.MEDICINES], self.settings),
            notes=notes if notes is not None else "",
        )
        return AddPrescriptionRequest(prescription=prescription)

    def _parse_view_all_prescriptions(
        self, arguments: str, context: ErrorContext
    ) -> ViewAllPrescriptionsRequest:
        patient_id = self._remainder(
            arguments, CommandType.VIEW_ALL_PRESCRIPTIONS, context
        )
        return ViewAllPrescriptionsRequest(patient_id=patient_id)

    def _parse_view_prescription(
        self, arguments: str, context: ErrorContext
    ) -> ViewPrescriptionRequest:
        prescription_id = self._remainder(
            arguments, CommandType.VIEW_PRESCRIPTION, context
        )
        return ViewPrescriptionRequest(prescription_id=prescription_id)


def parse_command(line: str, clock: Clock | None = None) -> CommandRequest:
    """
    Convenience function to parse a command line.

    Params:
        line: The command line to parse
        clock: Optional clock for the not-in-past appointment rule

    Returns:
        The request matching the command keyword

    Raises:
        CommandError: If the line cannot be parsed
    """
    parser = CommandParser(clock=clock)
    return parser.parse(line)
