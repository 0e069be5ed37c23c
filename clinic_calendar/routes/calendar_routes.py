from datetime import MAXYEAR, MINYEAR, date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from clinic_calendar.core import config
from clinic_calendar.dependencies import get_doctors, get_patients, get_store, get_today
from clinic_calendar.models.directory import Directory
from clinic_calendar.routes.schemas import (
    AppointmentResponse,
    CalendarCellResponse,
    CalendarMonthResponse,
    DayAppointmentResponse,
    MonthLinkResponse,
)
from clinic_calendar.scheduling.calendar_grid import FIRST_WEEKDAYS, SUNDAY, shift_month, weekday_labels
from clinic_calendar.scheduling.index import ActiveAppointment, AppointmentIndex
from clinic_calendar.scheduling.month_view import month_view
from clinic_calendar.scheduling.search import matches
from clinic_calendar.scheduling.store import AppointmentStore

router = APIRouter(tags=['calendar'])

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR


def configured_first_weekday() -> int:
    return FIRST_WEEKDAYS.get(config.CALENDAR_FIRST_WEEKDAY, SUNDAY)


def month_link(year: int, month_index: int) -> MonthLinkResponse:
    return MonthLinkResponse(year=year, month=month_index + 1)


def day_entries(
    active: list[ActiveAppointment],
    doctors: Directory,
    patients: Directory,
) -> list[DayAppointmentResponse]:
    return [
        DayAppointmentResponse(
            appointment=AppointmentResponse.build(entry.appointment, doctors, patients),
            is_first_day=entry.is_first_day,
        )
        for entry in active
    ]


@router.get('/days/{day}', response_model=list[DayAppointmentResponse])
def list_day_appointments(
    day: date,
    q: str = Query(default=''),
    store: AppointmentStore = Depends(get_store),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    active = [
        entry
        for entry in AppointmentIndex(store).active_on(day)
        if matches(entry.appointment, q, doctors, patients)
    ]
    return day_entries(active, doctors, patients)


@router.get('/{year}/{month}', response_model=CalendarMonthResponse)
def get_calendar_month(
    year: int,
    month: int,
    q: str = Query(default=''),
    store: AppointmentStore = Depends(get_store),
    today: date = Depends(get_today),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    month_index = month - 1
    if not 0 <= month_index < 12:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Month must be between 1 and 12.',
        )

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f'Year must be between {MIN_YEAR} and {MAX_YEAR}.',
        )

    first_weekday = configured_first_weekday()
    cells = month_view(
        store,
        year,
        month_index,
        today,
        q,
        doctors,
        patients,
        first_weekday=first_weekday,
    )

    return CalendarMonthResponse(
        year=year,
        month=month,
        weekdays=weekday_labels(first_weekday),
        previous=month_link(*shift_month(year, month_index, -1)),
        next=month_link(*shift_month(year, month_index, 1)),
        cells=[
            CalendarCellResponse(
                day=cell.day,
                is_today=cell.is_today,
                is_past=cell.is_past,
                appointments=day_entries(cell.appointments, doctors, patients),
            )
            for cell in cells
        ],
    )
