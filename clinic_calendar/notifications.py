import logging
import time
from collections import deque
from threading import Lock
from typing import Callable, Protocol

from clinic_calendar.core import config

logger = logging.getLogger(__name__)

MAX_RETAINED_NOTIFICATIONS = 50


class NotificationSink(Protocol):
    def notify(self, message: str) -> None:
        ...


class NotificationFeed:
    """Keeps recent user-facing messages until they are auto-dismissed."""

    def __init__(
        self,
        dismiss_after: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.dismiss_after = dismiss_after if dismiss_after is not None else config.NOTIFICATION_DISMISS_SECONDS
        self._clock = clock
        self._messages: deque[tuple[float, str]] = deque(maxlen=MAX_RETAINED_NOTIFICATIONS)
        self._lock = Lock()

    def notify(self, message: str) -> None:
        logger.info('Notification: %s', message)
        with self._lock:
            self._messages.append((self._clock(), message))

    def current(self) -> list[str]:
        """Messages posted less than ``dismiss_after`` seconds ago, oldest first."""
        now = self._clock()
        with self._lock:
            while self._messages and now - self._messages[0][0] >= self.dismiss_after:
                self._messages.popleft()
            return [message for _, message in self._messages]
