from fastapi import APIRouter, Depends

from clinic_calendar.dependencies import get_notifications
from clinic_calendar.notifications import NotificationFeed
from clinic_calendar.routes.schemas import NotificationsResponse

router = APIRouter(tags=['notifications'])


@router.get('', response_model=NotificationsResponse)
def list_notifications(notifications: NotificationFeed = Depends(get_notifications)):
    return NotificationsResponse(messages=notifications.current())
