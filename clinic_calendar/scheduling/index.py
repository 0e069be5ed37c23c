from datetime import date
from typing import NamedTuple

from clinic_calendar.models.appointment import Appointment
from clinic_calendar.scheduling.store import AppointmentStore


class ActiveAppointment(NamedTuple):
    appointment: Appointment
    is_first_day: bool


class AppointmentIndex:
    """Day-level queries over an ``AppointmentStore``.

    Every query scans a fresh snapshot of the store; nothing is cached between
    calls, so results always reflect the latest insert or replace.
    """

    def __init__(self, store: AppointmentStore):
        self.store = store

    def active_on(self, day: date) -> list[ActiveAppointment]:
        """Appointments whose span contains ``day``, in store order."""
        return [
            ActiveAppointment(appointment, appointment.span.is_first_day(day))
            for appointment in self.store.all()
            if appointment.span.contains(day)
        ]

    @staticmethod
    def is_first_day(appointment: Appointment, day: date) -> bool:
        return appointment.span.is_first_day(day)
