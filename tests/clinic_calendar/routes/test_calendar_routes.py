from datetime import date

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from clinic_calendar.dependencies import get_today
from clinic_calendar.main import create_app
from clinic_calendar.models.appointment import AppointmentDraft
from clinic_calendar.models.directory import (
    Doctor,
    InMemoryDirectory,
    Patient,
    default_doctor_directory,
    default_patient_directory,
)
from clinic_calendar.routes.calendar_routes import get_calendar_month, list_day_appointments
from clinic_calendar.scheduling.store import AppointmentStore

TODAY = date(2026, 2, 10)


def test_get_calendar_month_rejects_invalid_month() -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_calendar_month(
            year=2026,
            month=13,
            q='',
            store=AppointmentStore(),
            today=TODAY,
            doctors=default_doctor_directory(),
            patients=default_patient_directory(),
        )

    assert exception_info.value.status_code == 400
    assert exception_info.value.detail == 'Month must be between 1 and 12.'


def test_get_calendar_month_builds_leap_february_with_navigation() -> None:
    response = get_calendar_month(
        year=2024,
        month=2,
        q='',
        store=AppointmentStore(),
        today=TODAY,
        doctors=default_doctor_directory(),
        patients=default_patient_directory(),
    )

    days = [cell.day for cell in response.cells if cell.day is not None]
    # 1 February 2024 is a Thursday.
    assert len(response.cells) == 4 + 29
    assert days[-1] == date(2024, 2, 29)
    assert response.weekdays[0] == 'Sun'
    assert (response.previous.year, response.previous.month) == (2024, 1)
    assert (response.next.year, response.next.month) == (2024, 3)


def test_get_calendar_month_wraps_navigation_across_years() -> None:
    response = get_calendar_month(
        year=2026,
        month=1,
        q='',
        store=AppointmentStore(),
        today=TODAY,
        doctors=default_doctor_directory(),
        patients=default_patient_directory(),
    )

    assert (response.previous.year, response.previous.month) == (2025, 12)
    assert (response.next.year, response.next.month) == (2026, 2)


@pytest.mark.parametrize(('year', 'month', 'last_day'), [(1, 1, date(1, 1, 31)), (9999, 12, date(9999, 12, 31))])
def test_get_calendar_month_serves_first_and_last_representable_years(year: int, month: int, last_day: date) -> None:
    response = get_calendar_month(
        year=year,
        month=month,
        q='',
        store=AppointmentStore(),
        today=TODAY,
        doctors=default_doctor_directory(),
        patients=default_patient_directory(),
    )

    assert response.cells[-1].day == last_day


@pytest.mark.parametrize('year', [0, 10000])
def test_get_calendar_month_rejects_unrepresentable_year(year: int) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_calendar_month(
            year=year,
            month=1,
            q='',
            store=AppointmentStore(),
            today=TODAY,
            doctors=default_doctor_directory(),
            patients=default_patient_directory(),
        )

    assert exception_info.value.status_code == 400
    assert exception_info.value.detail == 'Year must be between 1 and 9999.'


def test_list_day_appointments_degrades_for_unknown_references() -> None:
    store = AppointmentStore()
    appointment = store.insert(
        AppointmentDraft(
            doctor_id='77',
            patient_id='1',
            start_date=date(2026, 2, 9),
            end_date=date(2026, 2, 11),
            description='Imaging',
        )
    )
    doctors = InMemoryDirectory([Doctor(id='1', name='Dr. Test', specialty='General')])
    patients = InMemoryDirectory([Patient(id='1', name='Pat Example')])

    entries = list_day_appointments(day=date(2026, 2, 10), q='', store=store, doctors=doctors, patients=patients)

    assert len(entries) == 1
    assert entries[0].appointment.id == appointment.id
    assert entries[0].appointment.doctor_name == ''
    assert not entries[0].is_first_day

    assert list_day_appointments(day=date(2026, 2, 10), q='dr. test', store=store, doctors=doctors, patients=patients) == []


@pytest.fixture
def client():
    app = create_app()
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as test_client:
        yield test_client


def test_calendar_month_over_http(client) -> None:
    booked = client.post(
        '/appointments',
        json={
            'doctor_id': '1',
            'patient_id': '3',
            'start_date': '2026-02-27',
            'end_date': '2026-03-02',
            'start_time': '14:00',
        },
    )
    assert booked.status_code == 201, booked.text

    february = client.get('/calendar/2026/2').json()
    march = client.get('/calendar/2026/3', params={'q': 'johnson'}).json()
    filtered_out = client.get('/calendar/2026/3', params={'q': 'garcia'}).json()

    february_days = {cell['day']: cell for cell in february['cells'] if cell['day']}
    march_days = {cell['day']: cell for cell in march['cells'] if cell['day']}

    assert february_days['2026-02-27']['appointments'][0]['is_first_day'] is True
    assert february_days['2026-02-28']['appointments'][0]['is_first_day'] is False
    assert february_days['2026-02-10']['is_today'] is True
    assert february_days['2026-02-09']['is_past'] is True
    assert march_days['2026-03-02']['appointments'][0]['appointment']['patient_name'] == 'Robert Johnson'
    assert march_days['2026-03-03']['appointments'] == []
    assert all(not cell['appointments'] for cell in filtered_out['cells'])


def test_day_endpoint_and_directories_over_http(client) -> None:
    client.post(
        '/appointments',
        json={'doctor_id': '2', 'patient_id': '2', 'start_date': '2026-02-10', 'end_date': '2026-02-10'},
    )

    day = client.get('/calendar/days/2026-02-10').json()
    doctors = client.get('/doctors').json()
    patients = client.get('/patients').json()

    assert [entry['is_first_day'] for entry in day] == [True]
    assert doctors[0] == {'id': '1', 'name': 'Dr. Sarah Smith', 'specialty': 'Cardiologist'}
    assert [patient['name'] for patient in patients] == ['James Wilson', 'Maria Garcia', 'Robert Johnson']


def test_health_check(client) -> None:
    assert client.get('/').json() == {'status': 'Clinic Calendar API Running'}
