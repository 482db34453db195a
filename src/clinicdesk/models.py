"""
Domain records produced by the parser and consumed by the clinic store.

Records are plain pydantic models. Identifiers assigned by the store (appointment
and prescription ids) are None until the record has been stored.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Patient(BaseModel):
    """A registered patient, keyed by NRIC."""

    nric: str
    name: str
    birthdate: str
    gender: str
    address: str
    contact: str
    medical_history: list[str] = Field(default_factory=list)


class Appointment(BaseModel):
    """
    A scheduled appointment for one patient.

    The id has the form "A<number>" once the store has numbered it.
    """

    nric: str
    date_time: datetime
    description: str
    appointment_id: str | None = None
    is_done: bool = False


class Prescription(BaseModel):
    """A prescription issued to a patient."""

    patient_id: str
    symptoms: list[str]
    medicines: list[str]
    notes: str = ""
    prescription_id: str | None = None
