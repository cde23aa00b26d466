from .build import build_notifier
from .notifier import NotificationResult, SlackNotifier

__all__ = ["NotificationResult", "SlackNotifier", "build_notifier"]
