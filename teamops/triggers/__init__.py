"""Trigger system for teamops - Detects alert conditions for the notification layer."""

from teamops.triggers.models import AlertType, Alert, SentNotification
from teamops.triggers.detector import (
    detect_overdue_tasks,
    detect_stalled_tasks,
    detect_blocked_tasks,
    filter_recent_alerts,
    collect_alerts,
)

__all__ = [
    "AlertType",
    "Alert",
    "SentNotification",
    "detect_overdue_tasks",
    "detect_stalled_tasks",
    "detect_blocked_tasks",
    "filter_recent_alerts",
    "collect_alerts",
]
