from datetime import date, time

from pydantic import BaseModel, field_validator

from clinic_calendar.core import config
from clinic_calendar.models.appointment import Appointment, AppointmentDraft
from clinic_calendar.models.directory import Directory, display_name


class AppointmentRequest(AppointmentDraft):
    """Booking form payload. Field normalization is inherited from the draft."""

    @field_validator('doctor_id', 'patient_id')
    @classmethod
    def validate_reference(cls, value: str) -> str:
        if not value:
            raise ValueError('Doctor and patient are required.')
        return value

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if value is not None and len(value.strip()) > config.MAX_DESCRIPTION_LENGTH:
            raise ValueError(f'Description must be {config.MAX_DESCRIPTION_LENGTH} characters or fewer.')

        return value

    def to_draft(self) -> AppointmentDraft:
        return AppointmentDraft(**self.model_dump())


class AppointmentResponse(BaseModel):
    id: int
    doctor_id: str
    doctor_name: str
    patient_id: str
    patient_name: str
    start_date: date
    end_date: date
    start_time: time
    description: str | None = None
    is_multi_day: bool

    @classmethod
    def build(cls, appointment: Appointment, doctors: Directory, patients: Directory) -> 'AppointmentResponse':
        return cls(
            id=appointment.id,
            doctor_id=appointment.doctor_id,
            doctor_name=display_name(doctors, appointment.doctor_id),
            patient_id=appointment.patient_id,
            patient_name=display_name(patients, appointment.patient_id),
            start_date=appointment.start_date,
            end_date=appointment.end_date,
            start_time=appointment.start_time,
            description=appointment.description,
            is_multi_day=appointment.is_multi_day,
        )


class DayAppointmentResponse(BaseModel):
    appointment: AppointmentResponse
    is_first_day: bool


class CalendarCellResponse(BaseModel):
    day: date | None = None
    is_today: bool = False
    is_past: bool = False
    appointments: list[DayAppointmentResponse] = []


class MonthLinkResponse(BaseModel):
    year: int
    month: int


class CalendarMonthResponse(BaseModel):
    year: int
    month: int
    weekdays: list[str]
    previous: MonthLinkResponse
    next: MonthLinkResponse
    cells: list[CalendarCellResponse]


class DoctorResponse(BaseModel):
    id: str
    name: str
    specialty: str


class PatientResponse(BaseModel):
    id: str
    name: str


class NotificationsResponse(BaseModel):
    messages: list[str]
