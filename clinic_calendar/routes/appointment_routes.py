from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from clinic_calendar.dependencies import get_doctors, get_notifications, get_patients, get_store, get_today
from clinic_calendar.models.directory import Directory
from clinic_calendar.notifications import NotificationFeed
from clinic_calendar.routes.schemas import AppointmentRequest, AppointmentResponse
from clinic_calendar.scheduling.booking import book
from clinic_calendar.scheduling.errors import BookingValidationError, NotFoundError
from clinic_calendar.scheduling.store import AppointmentStore
from clinic_calendar.scheduling.upcoming import upcoming

router = APIRouter(tags=['appointments'])


def save_appointment(
    data: AppointmentRequest,
    store: AppointmentStore,
    today: date,
    notifications: NotificationFeed,
    appointment_id: int | None = None,
):
    try:
        return book(
            store,
            data.to_draft(),
            today,
            appointment_id=appointment_id,
            notifications=notifications,
        )
    except BookingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.detail,
        ) from exc
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Appointment not found.',
        ) from exc


@router.get('', response_model=list[AppointmentResponse])
def list_appointments(
    store: AppointmentStore = Depends(get_store),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    return [AppointmentResponse.build(appointment, doctors, patients) for appointment in store.all()]


@router.get('/upcoming', response_model=list[AppointmentResponse])
def list_upcoming_appointments(
    q: str = Query(default=''),
    store: AppointmentStore = Depends(get_store),
    today: date = Depends(get_today),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    return [
        AppointmentResponse.build(appointment, doctors, patients)
        for appointment in upcoming(store, today, q, doctors, patients)
    ]


@router.get('/{appointment_id}', response_model=AppointmentResponse)
def get_appointment(
    appointment_id: int,
    store: AppointmentStore = Depends(get_store),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    try:
        appointment = store.get(appointment_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Appointment not found.',
        ) from exc

    return AppointmentResponse.build(appointment, doctors, patients)


@router.post('', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentRequest,
    store: AppointmentStore = Depends(get_store),
    today: date = Depends(get_today),
    notifications: NotificationFeed = Depends(get_notifications),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    appointment = save_appointment(data, store, today, notifications)
    return AppointmentResponse.build(appointment, doctors, patients)


@router.put('/{appointment_id}', response_model=AppointmentResponse)
def update_appointment(
    appointment_id: int,
    data: AppointmentRequest,
    store: AppointmentStore = Depends(get_store),
    today: date = Depends(get_today),
    notifications: NotificationFeed = Depends(get_notifications),
    doctors: Directory = Depends(get_doctors),
    patients: Directory = Depends(get_patients),
):
    appointment = save_appointment(data, store, today, notifications, appointment_id=appointment_id)
    return AppointmentResponse.build(appointment, doctors, patients)
