from datetime import MAXYEAR, date, timedelta
from typing import Iterator

MONDAY = 0
SUNDAY = 6
MONTHS_PER_YEAR = 12
_WEEKDAY_NAMES = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
FIRST_WEEKDAYS = {'monday': MONDAY, 'sunday': SUNDAY}


def _check_month_index(month_index: int) -> None:
    if not 0 <= month_index < MONTHS_PER_YEAR:
        raise ValueError(f'Month index must be between 0 and {MONTHS_PER_YEAR - 1}, got {month_index}.')


def shift_month(year: int, month_index: int, delta: int) -> tuple[int, int]:
    """Return the (year, month_index) pair ``delta`` months away."""
    _check_month_index(month_index)
    absolute = year * MONTHS_PER_YEAR + month_index + delta
    return divmod(absolute, MONTHS_PER_YEAR)


def last_day_of_month(year: int, month_index: int) -> date:
    # Day zero of the following month.
    next_year, next_month_index = shift_month(year, month_index, 1)
    if next_year > MAXYEAR:
        return date(year, 12, 31)
    return date(next_year, next_month_index + 1, 1) - timedelta(days=1)


def weekday_labels(first_weekday: int = SUNDAY) -> list[str]:
    return [_WEEKDAY_NAMES[(first_weekday + offset) % 7] for offset in range(7)]


class MonthGrid:
    """Cells of a month view: ``None`` for each leading blank, then every day of the month.

    Cells are produced on iteration and every ``iter()`` starts over.
    Trailing padding after the last day is left to the renderer.
    """

    def __init__(self, year: int, month_index: int, first_weekday: int = SUNDAY):
        _check_month_index(month_index)
        self.year = year
        self.month_index = month_index
        self.first_weekday = first_weekday

    @property
    def first_day(self) -> date:
        return date(self.year, self.month_index + 1, 1)

    @property
    def last_day(self) -> date:
        return last_day_of_month(self.year, self.month_index)

    @property
    def blank_count(self) -> int:
        return (self.first_day.weekday() - self.first_weekday) % 7

    @property
    def days_in_month(self) -> int:
        return self.last_day.day

    def __iter__(self) -> Iterator[date | None]:
        for _ in range(self.blank_count):
            yield None

        for day_number in range(1, self.days_in_month + 1):
            yield date(self.year, self.month_index + 1, day_number)

    def __len__(self) -> int:
        return self.blank_count + self.days_in_month

    def __repr__(self) -> str:
        return f'MonthGrid(year={self.year}, month_index={self.month_index})'


def build_month_grid(year: int, month_index: int, first_weekday: int = SUNDAY) -> MonthGrid:
    return MonthGrid(year, month_index, first_weekday=first_weekday)
