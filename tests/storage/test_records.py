"""
Tests for the pipe-delimited record codec.

Focus Areas:
1. Decoding stored patient and appointment lines
2. Skipping counter lines and malformed lines without raising
3. Writing records back in the same format
"""

from datetime import datetime

import pytest

from clinicdesk.config import ParserSettings
from clinicdesk.exceptions import RecordFormatError
from clinicdesk.models import Appointment, Patient
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


class TestPatientRecords:
    """Test patient line decoding and encoding."""

    def test_line_without_history(self):
        patient = parse_load_patient("S1234567D|Billy|1990-10-01|M|124 High St|81234567")

        assert patient.nric == "S1234567D"
        assert patient.name == "Billy"
        assert patient.birthdate == "1990-10-01"
        assert patient.gender == "M"
        assert patient.address == "124 High St"
        assert patient.contact == "81234567"
        assert patient.medical_history == []

    def test_line_with_history(self):
        patient = parse_load_patient("S1234567D|Billy|1990-10-01|M|124 High St|81234567|Asthma, Flu,Gout")
        assert patient.medical_history == ["Asthma", "Flu", "Gout"]

    def test_trailing_separator_means_no_history(self):
        patient = parse_load_patient("S1234567D|Billy|1990-10-01|M|124 High St|81234567|")
        assert patient.medical_history == []

    @pytest.mark.parametrize("line", ["", "S1234567D|Billy", "S1234567D|Billy|1990-10-01|M|124 High St"])
    def test_short_lines_are_skipped(self, line):
        assert parse_load_patient(line) is None

    def test_decode_raises_for_short_line(self):
        with pytest.raises(RecordFormatError):
            decode_patient("S1234567D|Billy")

    def test_format_round_trip(self):
        patient = Patient(
            nric="S1234567D",
            name="Billy",
            birthdate="1990-10-01",
            gender="M",
            address="124 High St",
            contact="81234567",
            medical_history=["Asthma", "Flu"],
        )
        line = format_patient(patient)

        assert line == "S1234567D|Billy|1990-10-01|M|124 High St|81234567|Asthma,Flu"
        assert parse_load_patient(line) == patient

    def test_format_without_history(self):
        patient = Patient(
            nric="S1234567D",
            name="Billy",
            birthdate="1990-10-01",
            gender="M",
            address="124 High St",
            contact="81234567",
        )
        assert format_patient(patient) == "S1234567D|Billy|1990-10-01|M|124 High St|81234567"


class TestAppointmentRecords:
    """Test appointment line decoding and encoding."""

    def test_decode(self):
        appointment = parse_load_appointment("3|true|S1234567D|2025-03-25 1900|Checkup")

        assert appointment.appointment_id == "A3"
        assert appointment.is_done is True
        assert appointment.nric == "S1234567D"
        assert appointment.date_time == datetime(2025, 3, 25, 19, 0)
        assert appointment.description == "Checkup"

    def test_anything_but_true_is_not_done(self):
        appointment = parse_load_appointment("3|TRUE|S1234567D|2025-03-25 1900|Checkup")
        assert appointment.is_done is False

    def test_counter_line_is_not_a_record(self):
        assert parse_load_appointment("countId:4") is None
        with pytest.raises(RecordFormatError):
            decode_appointment("countId:4")

    @pytest.mark.parametrize(
        "line",
        [
            "3|true|S1234567D|2025-03-25 1900",
            "3|true|S1234567D|25/03/2025 7pm|Checkup",
            "A3|true|S1234567D|2025-03-25 1900|Checkup",
            "",
        ],
    )
    def test_malformed_lines_are_skipped(self, line):
        assert parse_load_appointment(line) is None

    def test_format_round_trip(self):
        appointment = Appointment(
            appointment_id="A7",
            nric="S1234567D",
            date_time=datetime(2025, 3, 28, 20, 0),
            description="CT scan",
            is_done=False,
        )
        line = format_appointment(appointment)

        assert line == "7|false|S1234567D|2025-03-28 2000|CT scan"
        assert parse_load_appointment(line) == appointment

    def test_unnumbered_appointment_cannot_be_stored(self):
        appointment = Appointment(nric="S1234567D", date_time=datetime(2025, 3, 28, 20, 0), description="CT scan")
        with pytest.raises(RecordFormatError):
            format_appointment(appointment)

    def test_custom_storage_format(self):
        settings = ParserSettings(storage_datetime_format="%d-%m-%Y %H%M")
        appointment = parse_load_appointment("1|false|S1234567D|25-03-2025 1900|Checkup", settings)
        assert appointment.date_time == datetime(2025, 3, 25, 19, 0)


class TestBulkLoading:
    """Test best-effort loading of whole files."""

    def test_load_appointments_skips_non_records(self):
        lines = [
            "countId:3\n",
            "1|false|S1234567D|2025-03-25 1900|Checkup\n",
            "garbage\n",
            "\n",
            "2|true|S2345678D|2025-03-28 2000|CT scan\n",
        ]
        appointments = load_appointments(lines)

        assert [a.appointment_id for a in appointments] == ["A1", "A2"]
        assert appointments[0].description == "Checkup"

    def test_load_patients_skips_malformed(self):
        lines = [
            "S1234567D|Billy|1990-10-01|M|124 High St|81234567\n",
            "broken|line\n",
            "S2345678D|James|1980-12-31|M|133 Main St|81229312|Gout\n",
        ]
        patients = load_patients(lines)

        assert [p.nric for p in patients] == ["S1234567D", "S2345678D"]
        assert patients[1].medical_history == ["Gout"]
        assert patients[0].contact == "81234567"


class TestCounter:
    def test_round_trip(self):
        assert format_counter(4) == "countId:4"
        assert parse_counter("countId:4") == 4

    def test_not_a_counter_line(self):
        assert parse_counter("1|false|S1234567D|2025-03-25 1900|Checkup") is None
        assert parse_counter("countId:many") is None
