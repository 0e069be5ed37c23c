from datetime import date, datetime

from pydantic import BaseModel, field_validator


def as_day(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


class DateRange(BaseModel):
    """Inclusive span of calendar days."""

    start: date
    end: date

    class Config:
        frozen = True

    @field_validator('start', 'end', mode='before')
    @classmethod
    def truncate_to_day(cls, value):
        return as_day(value)

    def contains(self, day: date | datetime) -> bool:
        return self.start <= as_day(day) <= self.end

    def is_first_day(self, day: date | datetime) -> bool:
        return as_day(day) == self.start
