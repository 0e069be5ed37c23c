from datetime import date, datetime

from clinic_calendar.models.appointment import Appointment
from clinic_calendar.models.directory import Directory
from clinic_calendar.scheduling.date_range import as_day
from clinic_calendar.scheduling.search import matches
from clinic_calendar.scheduling.store import AppointmentStore


def upcoming(
    store: AppointmentStore,
    today: date | datetime,
    query: str | None,
    doctors: Directory,
    patients: Directory,
) -> list[Appointment]:
    """Appointments starting after ``today`` that match ``query``, earliest first."""
    today = as_day(today)
    future_appointments = [
        appointment
        for appointment in store.all()
        if appointment.start_date > today and matches(appointment, query, doctors, patients)
    ]
    # list.sort is stable: same-day appointments keep store order.
    future_appointments.sort(key=lambda appointment: appointment.start_date)
    return future_appointments
