import logging
from typing import List, Protocol

from schemas import Notification, NotificationKind

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, kind: NotificationKind, message: str) -> None:
        ...


class CollectingNotifier:
    """
    Keeps notifications in the order they were raised so the API can hand
    them to the client, which shows them as toasts.
    """

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        if kind == NotificationKind.ERROR:
            logger.warning("Notify error: %s", message)
        else:
            logger.info("Notify success: %s", message)
        self.notifications.append(Notification(kind=kind, message=message))
