from datetime import date, datetime

from clinic_calendar.models.appointment import AppointmentDraft
from clinic_calendar.models.directory import default_doctor_directory, default_patient_directory
from clinic_calendar.scheduling.month_view import month_view
from clinic_calendar.scheduling.store import AppointmentStore

DOCTORS = default_doctor_directory()
PATIENTS = default_patient_directory()


def test_month_view_marks_blanks_today_past_and_spans() -> None:
    store = AppointmentStore()
    spanning = store.insert(
        AppointmentDraft(
            doctor_id='1',
            patient_id='1',
            start_date=date(2026, 9, 29),
            end_date=date(2026, 10, 2),
        )
    )

    cells = month_view(store, 2026, 9, date(2026, 10, 15), '', DOCTORS, PATIENTS)

    # 1 October 2026 is a Thursday.
    assert [cell.is_blank for cell in cells[:5]] == [True, True, True, True, False]
    assert all(not cell.appointments for cell in cells[:4])

    by_day = {cell.day: cell for cell in cells if cell.day is not None}
    assert len(by_day) == 31
    assert [entry.appointment.id for entry in by_day[date(2026, 10, 1)].appointments] == [spanning.id]
    # The span started in September, so no October cell is its first day.
    assert not by_day[date(2026, 10, 1)].appointments[0].is_first_day
    assert by_day[date(2026, 10, 3)].appointments == []

    assert by_day[date(2026, 10, 15)].is_today
    assert not by_day[date(2026, 10, 15)].is_past
    assert by_day[date(2026, 10, 14)].is_past
    assert not by_day[date(2026, 10, 16)].is_past


def test_month_view_filters_by_query() -> None:
    store = AppointmentStore()
    store.insert(
        AppointmentDraft(doctor_id='1', patient_id='1', start_date=date(2026, 10, 5), end_date=date(2026, 10, 5))
    )
    garcia = store.insert(
        AppointmentDraft(doctor_id='2', patient_id='2', start_date=date(2026, 10, 5), end_date=date(2026, 10, 5))
    )

    cells = month_view(store, 2026, 9, date(2026, 10, 1), 'maria', DOCTORS, PATIENTS)
    by_day = {cell.day: cell for cell in cells if cell.day is not None}

    assert [entry.appointment for entry in by_day[date(2026, 10, 5)].appointments] == [garcia]
    assert by_day[date(2026, 10, 5)].appointments[0].is_first_day


def test_month_view_accepts_clock_datetime() -> None:
    cells = month_view(AppointmentStore(), 2026, 9, datetime(2026, 10, 15, 16, 45), '', DOCTORS, PATIENTS)
    by_day = {cell.day: cell for cell in cells if cell.day is not None}

    assert by_day[date(2026, 10, 15)].is_today
    assert not by_day[date(2026, 10, 15)].is_past
    assert by_day[date(2026, 10, 14)].is_past
