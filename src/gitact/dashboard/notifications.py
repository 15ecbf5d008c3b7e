"""Self-expiring status message."""

from typing import Optional

from gitact.dashboard.messages import ScheduleNotificationClear
from gitact.models import Notification

NOTIFICATION_SECONDS = 3.0


class NotificationLifecycle:
    """Holds at most one notification; a newer one replaces the current one.

    ``notify`` posts a message that expires: it returns the timer effect.
    ``show`` posts one that stays until replaced, used for load failures.
    ``clear`` is unconditional for expiring messages: a timer armed by an
    older notification clears whatever expiring message is current when
    it fires.
    """

    def __init__(self, expiry_seconds: float = NOTIFICATION_SECONDS) -> None:
        self.expiry_seconds = expiry_seconds
        self.current: Optional[Notification] = None

    def notify(self, message: str, is_success: bool = True) -> ScheduleNotificationClear:
        self.current = Notification(message=message, is_success=is_success)
        return ScheduleNotificationClear(delay=self.expiry_seconds)

    def show(self, message: str, is_success: bool = False) -> None:
        self.current = Notification(
            message=message, is_success=is_success, persistent=True
        )

    def clear(self) -> None:
        if self.current is not None and self.current.persistent:
            return
        self.current = None
