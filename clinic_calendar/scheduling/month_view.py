from datetime import date, datetime

from pydantic import BaseModel

from clinic_calendar.models.directory import Directory
from clinic_calendar.scheduling.calendar_grid import SUNDAY, MonthGrid
from clinic_calendar.scheduling.date_range import as_day
from clinic_calendar.scheduling.index import ActiveAppointment, AppointmentIndex
from clinic_calendar.scheduling.search import matches
from clinic_calendar.scheduling.store import AppointmentStore


class CalendarCell(BaseModel):
    day: date | None = None
    is_today: bool = False
    is_past: bool = False
    appointments: list[ActiveAppointment] = []

    @property
    def is_blank(self) -> bool:
        return self.day is None


def month_view(
    store: AppointmentStore,
    year: int,
    month_index: int,
    today: date | datetime,
    query: str | None,
    doctors: Directory,
    patients: Directory,
    first_weekday: int = SUNDAY,
) -> list[CalendarCell]:
    today = as_day(today)
    index = AppointmentIndex(store)
    cells: list[CalendarCell] = []

    for day in MonthGrid(year, month_index, first_weekday=first_weekday):
        if day is None:
            cells.append(CalendarCell())
            continue

        visible = [
            active
            for active in index.active_on(day)
            if matches(active.appointment, query, doctors, patients)
        ]
        cells.append(
            CalendarCell(
                day=day,
                is_today=day == today,
                is_past=day < today,
                appointments=visible,
            )
        )

    return cells
