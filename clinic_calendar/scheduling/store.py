import itertools
import logging
from threading import Lock

from clinic_calendar.models.appointment import Appointment, AppointmentDraft
from clinic_calendar.scheduling.errors import NotFoundError

logger = logging.getLogger(__name__)


class AppointmentStore:
    """Authoritative in-memory collection of appointments.

    ``insert`` and ``replace`` are the only mutators. Both run under a lock,
    so a reader taking ``all()`` never sees a half-applied write.
    """

    def __init__(self):
        self._appointments: list[Appointment] = []
        self._ids = itertools.count(1)
        self._lock = Lock()

    def insert(self, draft: AppointmentDraft) -> Appointment:
        with self._lock:
            appointment = Appointment.from_draft(next(self._ids), draft)
            self._appointments.append(appointment)

        logger.info('Stored appointment %s for doctor %s', appointment.id, appointment.doctor_id)
        return appointment

    def replace(self, appointment_id: int, draft: AppointmentDraft) -> Appointment:
        with self._lock:
            position = self._position_of(appointment_id)
            appointment = Appointment.from_draft(appointment_id, draft)
            self._appointments[position] = appointment

        logger.info('Replaced appointment %s', appointment_id)
        return appointment

    def get(self, appointment_id: int) -> Appointment:
        with self._lock:
            return self._appointments[self._position_of(appointment_id)]

    def all(self) -> tuple[Appointment, ...]:
        with self._lock:
            return tuple(self._appointments)

    def __len__(self) -> int:
        with self._lock:
            return len(self._appointments)

    def _position_of(self, appointment_id: int) -> int:
        for position, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                return position
        raise NotFoundError(appointment_id)
