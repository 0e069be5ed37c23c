from fastapi import APIRouter, Depends

from clinic_calendar.dependencies import get_doctors, get_patients
from clinic_calendar.models.directory import Directory
from clinic_calendar.routes.schemas import DoctorResponse, PatientResponse

router = APIRouter(tags=['directory'])


@router.get('/doctors', response_model=list[DoctorResponse])
def list_doctors(doctors: Directory = Depends(get_doctors)):
    return [
        DoctorResponse(id=doctor.id, name=doctor.name, specialty=getattr(doctor, 'specialty', ''))
        for doctor in doctors
    ]


@router.get('/patients', response_model=list[PatientResponse])
def list_patients(patients: Directory = Depends(get_patients)):
    return [PatientResponse(id=patient.id, name=patient.name) for patient in patients]
