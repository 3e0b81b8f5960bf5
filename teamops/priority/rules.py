"""
Immediate-attention rules.

A priority cascade: the first matching rule decides, and only its reason
is reported.
"""

import logging
from datetime import datetime
from typing import Optional
from teamops.priority.models import Task, TaskStatus, DeadlinePressure, ImmediateFlag
from teamops.priority.scoring import task_deadline_pressure

logger = logging.getLogger(__name__)

REASON_CLIENT_DEADLINE = "Client deadline within 48 hours"
REASON_MAX_URGENCY = "Maximum urgency with high importance"
REASON_OVERDUE = "Task overdue"
REASON_BLOCKED_URGENT = "Blocked with high urgency"

CLIENT_DEADLINE_WINDOW_DAYS = 2


def client_deadline_imminent(pressure: DeadlinePressure) -> bool:
    """True when the binding deadline is a client deadline at most 2 days out."""
    return (
        pressure.is_client_deadline
        and pressure.days_remaining is not None
        and pressure.days_remaining <= CLIENT_DEADLINE_WINDOW_DAYS
    )


def is_overdue(pressure: DeadlinePressure) -> bool:
    """True when the nearest deadline (any type) has passed."""
    return pressure.days_remaining is not None and pressure.days_remaining <= 0


def should_flag_immediate(task: Task, now: Optional[datetime] = None) -> ImmediateFlag:
    """
    Decide whether a task must be surfaced for immediate attention.

    Rules, first match wins:
    1. Client deadline within 48 hours
    2. Urgency 5 with importance >= 4
    3. Overdue
    4. Blocked with urgency >= 4
    """
    pressure = task_deadline_pressure(task, now)

    reason = None
    if client_deadline_imminent(pressure):
        reason = REASON_CLIENT_DEADLINE
    elif task.urgency_level == 5 and task.importance_level >= 4:
        reason = REASON_MAX_URGENCY
    elif is_overdue(pressure):
        reason = REASON_OVERDUE
    elif task.status == TaskStatus.BLOCKED and task.urgency_level >= 4:
        reason = REASON_BLOCKED_URGENT

    if reason is None:
        return ImmediateFlag(flag=False, reason=None)

    logger.debug(f"Task {task.id or task.title!r} flagged: {reason}")
    return ImmediateFlag(flag=True, reason=reason)
