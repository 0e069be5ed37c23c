from clinic_calendar.models.appointment import Appointment
from clinic_calendar.models.directory import Directory, display_name


def normalize_query(query: str | None) -> str:
    return (query or '').strip().lower()


def matches(appointment: Appointment, query: str | None, doctors: Directory, patients: Directory) -> bool:
    """Case-insensitive substring match on doctor name, patient name or description.

    A blank query matches every appointment. An id missing from its directory
    contributes an empty name, so it never matches and never raises.
    """
    normalized = normalize_query(query)
    if not normalized:
        return True

    searchable_fields = (
        display_name(doctors, appointment.doctor_id),
        display_name(patients, appointment.patient_id),
        appointment.description or '',
    )
    return any(normalized in field.lower() for field in searchable_fields)
