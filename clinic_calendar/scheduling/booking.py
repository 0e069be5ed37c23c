import logging
from datetime import date, datetime

from clinic_calendar.models.appointment import Appointment, AppointmentDraft
from clinic_calendar.notifications import NotificationSink
from clinic_calendar.scheduling.date_range import as_day
from clinic_calendar.scheduling.errors import BookingValidationError, InvertedRangeError, PastDateError
from clinic_calendar.scheduling.store import AppointmentStore

logger = logging.getLogger(__name__)

BOOKED_MESSAGE = 'Appointment booked successfully!'
UPDATED_MESSAGE = 'Appointment updated successfully!'


def validate_booking(draft: AppointmentDraft, today: date | datetime) -> None:
    # Past dates are reported before inverted ranges.
    if draft.start_date < as_day(today):
        raise PastDateError()

    if draft.end_date < draft.start_date:
        raise InvertedRangeError()


def book(
    store: AppointmentStore,
    draft: AppointmentDraft,
    today: date | datetime,
    appointment_id: int | None = None,
    notifications: NotificationSink | None = None,
) -> Appointment:
    """Validate ``draft`` and store it.

    Inserts a new appointment, or replaces the one with ``appointment_id`` when
    editing. Overlapping appointments for the same doctor are not rejected.
    """
    try:
        validate_booking(draft, today)
    except BookingValidationError as exc:
        logger.info('Rejected appointment for doctor %s: %s', draft.doctor_id, exc)
        if notifications is not None:
            notifications.notify(exc.detail)
        raise

    if appointment_id is None:
        appointment = store.insert(draft)
        message = BOOKED_MESSAGE
    else:
        appointment = store.replace(appointment_id, draft)
        message = UPDATED_MESSAGE

    if notifications is not None:
        notifications.notify(message)
    return appointment
