import os
from datetime import time

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CALENDAR_DEBUG = _get_bool(os.getenv("CALENDAR_DEBUG"), default=False)

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:4200"])

CALENDAR_FIRST_WEEKDAY = os.getenv("CALENDAR_FIRST_WEEKDAY", "sunday").strip().lower()
NOTIFICATION_DISMISS_SECONDS = float(os.getenv("NOTIFICATION_DISMISS_SECONDS", "3"))
MAX_DESCRIPTION_LENGTH = int(os.getenv("MAX_DESCRIPTION_LENGTH", "600"))
DEFAULT_START_TIME = time.fromisoformat(os.getenv("DEFAULT_START_TIME", "09:00"))

SUPPORTED_FIRST_WEEKDAYS = ("sunday", "monday")


def validate_runtime_config() -> None:
    if CALENDAR_FIRST_WEEKDAY not in SUPPORTED_FIRST_WEEKDAYS:
        raise RuntimeError(
            f"CALENDAR_FIRST_WEEKDAY must be one of {', '.join(SUPPORTED_FIRST_WEEKDAYS)}."
        )
    if NOTIFICATION_DISMISS_SECONDS <= 0:
        raise RuntimeError("NOTIFICATION_DISMISS_SECONDS must be positive.")
