import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinic_calendar.core import config
from clinic_calendar.models.directory import Directory, default_doctor_directory, default_patient_directory
from clinic_calendar.notifications import NotificationFeed
from clinic_calendar.routes import appointment_routes, calendar_routes, directory_routes, notification_routes
from clinic_calendar.scheduling.store import AppointmentStore

logger = logging.getLogger(__name__)


def create_app(
    store: AppointmentStore | None = None,
    doctors: Directory | None = None,
    patients: Directory | None = None,
    notifications: NotificationFeed | None = None,
) -> FastAPI:
    app = FastAPI(title='Clinic Calendar API', debug=config.CALENDAR_DEBUG)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.state.store = store if store is not None else AppointmentStore()
    app.state.doctors = doctors if doctors is not None else default_doctor_directory()
    app.state.patients = patients if patients is not None else default_patient_directory()
    app.state.notifications = notifications if notifications is not None else NotificationFeed()

    @app.on_event('startup')
    def check_configuration() -> None:
        logging.basicConfig(level=config.LOG_LEVEL)
        try:
            config.validate_runtime_config()
        except RuntimeError:
            logger.exception('Invalid calendar configuration. Check the CALENDAR_* environment variables.')
            raise

    @app.get('/')
    def root():
        return {'status': 'Clinic Calendar API Running'}

    app.include_router(directory_routes.router)
    app.include_router(appointment_routes.router, prefix='/appointments')
    app.include_router(calendar_routes.router, prefix='/calendar')
    app.include_router(notification_routes.router, prefix='/notifications')

    return app


app = create_app()
