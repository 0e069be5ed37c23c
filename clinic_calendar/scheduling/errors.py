"""Errors raised by the scheduling core."""


class SchedulingError(Exception):
    """Base class for scheduling failures."""


class BookingValidationError(SchedulingError):
    """A booking request the user can correct. The message is shown verbatim."""

    message = 'Invalid appointment.'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class PastDateError(BookingValidationError):
    message = 'Cannot book appointments in the past!'


class InvertedRangeError(BookingValidationError):
    message = 'End date cannot be before start date!'


class NotFoundError(SchedulingError):
    """No stored appointment has the requested id."""

    def __init__(self, appointment_id: int):
        super().__init__(f'Appointment {appointment_id} not found.')
        self.appointment_id = appointment_id
