"""Appointment model definitions."""

from datetime import date, time

from pydantic import BaseModel, field_validator

from clinic_calendar.core import config
from clinic_calendar.scheduling.date_range import DateRange


class AppointmentDraft(BaseModel):
    """An appointment as entered on the booking form, before it has an id."""

    doctor_id: str
    patient_id: str
    start_date: date
    end_date: date
    start_time: time = config.DEFAULT_START_TIME
    description: str | None = None

    class Config:
        frozen = True

    @field_validator('doctor_id', 'patient_id', mode='before')
    @classmethod
    def normalize_reference(cls, value: str | int) -> str:
        return str(value).strip()

    @field_validator('description')
    @classmethod
    def normalize_description(cls, value: str | None) -> str | None:
        if value is None:
            return None

        normalized = value.strip()
        return normalized or None

    @property
    def span(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    @property
    def is_multi_day(self) -> bool:
        return self.start_date != self.end_date


class Appointment(AppointmentDraft):
    """Represents a stored appointment."""

    id: int

    @classmethod
    def from_draft(cls, appointment_id: int, draft: AppointmentDraft) -> 'Appointment':
        return cls(id=appointment_id, **draft.model_dump())
