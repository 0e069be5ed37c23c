from datetime import date

from fastapi import Request

from clinic_calendar.models.directory import Directory
from clinic_calendar.notifications import NotificationFeed
from clinic_calendar.scheduling.store import AppointmentStore


def get_store(request: Request) -> AppointmentStore:
    return request.app.state.store


def get_doctors(request: Request) -> Directory:
    return request.app.state.doctors


def get_patients(request: Request) -> Directory:
    return request.app.state.patients


def get_notifications(request: Request) -> NotificationFeed:
    return request.app.state.notifications


def get_today() -> date:
    return date.today()
