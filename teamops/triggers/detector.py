"""
Alert condition detector.

Decides which notifications are due for a task snapshot:
- Overdue tasks (owner is alerted)
- Stalled tasks with no recent check-in (owner is alerted)
- Blocked tasks left untouched (manager gets one summary)

Delivery (SMS, chat) belongs to the caller.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional
from teamops.config import Settings, get_settings
from teamops.priority.models import Task, TaskStatus
from teamops.priority.rules import is_overdue
from teamops.priority.scoring import task_deadline_pressure, utc_now, as_utc
from teamops.triggers.models import Alert, AlertType, SentNotification

logger = logging.getLogger(__name__)


def detect_overdue_tasks(tasks: Iterable[Task], now: datetime) -> list[Alert]:
    """One alert per open, owned task whose nearest deadline has passed."""
    alerts = []
    for task in tasks:
        if task.status == TaskStatus.DONE or not task.owner_id:
            continue
        pressure = task_deadline_pressure(task, now)
        if not is_overdue(pressure):
            continue

        days_past_due = max(0, -pressure.days_remaining)
        alerts.append(Alert(
            type=AlertType.TASK_OVERDUE,
            member_id=task.owner_id,
            task_id=task.id,
            task_title=task.title,
            message=f'Task overdue by {days_past_due} day(s): "{task.title}". Please update your progress.'
        ))
    return alerts


def _last_activity(task: Task) -> Optional[datetime]:
    if task.last_checkin_at is not None:
        return task.last_checkin_at
    return task.updated_at


def detect_stalled_tasks(tasks: Iterable[Task], now: datetime, stall_hours: float = 48) -> list[Alert]:
    """In-progress tasks whose last check-in (or last update) is older than stall_hours."""
    cutoff = as_utc(now) - timedelta(hours=stall_hours)
    alerts = []
    for task in tasks:
        if task.status != TaskStatus.IN_PROGRESS or not task.owner_id:
            continue
        last_activity = _last_activity(task)
        if last_activity is None or last_activity >= cutoff:
            continue

        alerts.append(Alert(
            type=AlertType.PROGRESS_STALL,
            member_id=task.owner_id,
            task_id=task.id,
            task_title=task.title,
            message=(
                f'No update on "{task.title}" in more than {stall_hours:g} hours. '
                f'How is it going? Send a quick check-in.'
            )
        ))
    return alerts


def detect_blocked_tasks(
    tasks: Iterable[Task],
    now: datetime,
    manager_id: Optional[str],
    blocked_hours: float = 24
) -> list[Alert]:
    """A single summary alert to the manager about blocked tasks nobody has touched."""
    if not manager_id:
        return []

    cutoff = as_utc(now) - timedelta(hours=blocked_hours)
    blocked = [
        task for task in tasks
        if task.status == TaskStatus.BLOCKED
        and task.updated_at is not None
        and task.updated_at < cutoff
    ]
    if not blocked:
        return []

    listing = ", ".join(f'"{task.title}" ({task.owner_id or "unassigned"})' for task in blocked)
    return [Alert(
        type=AlertType.BLOCKED_ALERT,
        member_id=manager_id,
        message=f"{len(blocked)} blocked task(s) need attention: {listing}"
    )]


def filter_recent_alerts(
    alerts: Iterable[Alert],
    recent: Iterable[SentNotification],
    now: datetime,
    window_hours: float = 12
) -> list[Alert]:
    """
    Drop alerts already sent to the same member with the same type inside
    the window. Within one batch only the first alert per (member, type)
    is kept.
    """
    since = as_utc(now) - timedelta(hours=window_hours)
    seen = {
        (notification.member_id, notification.type)
        for notification in recent
        if as_utc(notification.created_at) >= since
    }

    kept = []
    for alert in alerts:
        key = (alert.member_id, alert.type)
        if key in seen:
            continue
        seen.add(key)
        kept.append(alert)
    return kept


def collect_alerts(
    tasks: Iterable[Task],
    now: Optional[datetime] = None,
    manager_id: Optional[str] = None,
    recent: Optional[Iterable[SentNotification]] = None,
    settings: Optional[Settings] = None
) -> list[Alert]:
    """
    Run every detector over a task snapshot and apply the dedup window.

    Args:
        tasks: Task snapshot
        now: Reference time (defaults to current UTC time)
        manager_id: Member who receives the blocked-task summary
        recent: Notifications already sent, for deduplication
        settings: Thresholds (defaults to environment settings)

    Returns:
        Alerts to deliver, in detector order
    """
    settings = settings or get_settings()
    if now is None:
        now = utc_now()

    tasks = list(tasks)
    alerts = (
        detect_overdue_tasks(tasks, now)
        + detect_stalled_tasks(tasks, now, settings.stall_hours)
        + detect_blocked_tasks(tasks, now, manager_id, settings.blocked_alert_hours)
    )
    kept = filter_recent_alerts(alerts, recent or [], now, settings.alert_dedup_hours)

    logger.info(f"Collected {len(kept)} alert(s) ({len(alerts) - len(kept)} suppressed)")
    return kept
