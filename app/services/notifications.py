# app/services/notifications.py
"""Transient user-facing notifications (the server-side stand-in for toasts)."""
import logging
from collections import deque, namedtuple

logger = logging.getLogger(__name__)

Notification = namedtuple("Notification", ["level", "message"])

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Notifier:
    def notify(self, level, message):
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Logs every notification and keeps the most recent ones."""

    def __init__(self, maxlen=50):
        self.history = deque(maxlen=maxlen)

    def notify(self, level, message):
        self.history.append(Notification(level, message))
        logger.log(_LOG_LEVELS.get(level, logging.INFO), f"[{level}] {message}")

    @property
    def last(self):
        return self.history[-1] if self.history else None
