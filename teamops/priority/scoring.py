"""
Scoring system for the priority engine.

Calculates:
- Deadline pressure: How hard is the nearest deadline pushing? (0-100)
- Priority score: Weighted ranking of urgency, importance, pressure and duration (0-100)
"""

import math
from datetime import datetime, timezone
from typing import Optional
from teamops.priority.models import Task, DeadlinePressure
from teamops.priority.tables import DURATION_SCORES, DEFAULT_DURATION_SCORE

SECONDS_PER_DAY = 86400

# (max days remaining, score) - first matching step wins
PRESSURE_STEPS = (
    (0, 100),  # Overdue
    (1, 95),   # Due within 24 hours
    (2, 85),   # Due within 48 hours
    (3, 70),
    (7, 50),
    (14, 30),
    (30, 15),
)
FAR_DEADLINE_SCORE = 5
CLIENT_DEADLINE_MULTIPLIER = 1.1

# Priority score weights
WEIGHTS = {
    "urgency": 0.30,
    "importance": 0.30,
    "deadline": 0.30,
    "duration": 0.10,  # Shorter tasks get a slight boost
}


def utc_now() -> datetime:
    """Current wall-clock time, timezone aware."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _pressure_for_days(days: float) -> int:
    for max_days, score in PRESSURE_STEPS:
        if days <= max_days:
            return score
    return FAR_DEADLINE_SCORE


def calculate_deadline_pressure(
    internal_deadline: Optional[datetime] = None,
    external_client_deadline: Optional[datetime] = None,
    now: Optional[datetime] = None
) -> DeadlinePressure:
    """
    Calculate deadline pressure from 0-100.

    Higher score = closer deadline.

    The nearest deadline wins; on an exact tie the internal deadline is
    taken first. Fractional days drive the score, the returned
    days_remaining is rounded up. Client deadlines carry a 10% premium,
    capped at 100.

    Args:
        internal_deadline: Internally set deadline
        external_client_deadline: Deadline committed to a client
        now: Reference time (defaults to current UTC time)

    Returns:
        DeadlinePressure with score, days remaining and deadline type
    """
    deadlines = []
    if internal_deadline is not None:
        deadlines.append((as_utc(internal_deadline), False))
    if external_client_deadline is not None:
        deadlines.append((as_utc(external_client_deadline), True))

    if not deadlines:
        return DeadlinePressure(score=0, days_remaining=None, is_client_deadline=False)

    if now is None:
        now = utc_now()
    now = as_utc(now)

    # Stable sort keeps internal ahead of client on ties
    deadlines.sort(key=lambda item: item[0])
    closest, is_client = deadlines[0]

    days_remaining = (closest - now).total_seconds() / SECONDS_PER_DAY
    score = _pressure_for_days(days_remaining)

    if is_client:
        score = min(100, score * CLIENT_DEADLINE_MULTIPLIER)

    return DeadlinePressure(
        score=score,
        days_remaining=math.ceil(days_remaining),
        is_client_deadline=is_client
    )


def task_deadline_pressure(task: Task, now: Optional[datetime] = None) -> DeadlinePressure:
    """Deadline pressure for a task's own deadlines."""
    return calculate_deadline_pressure(
        task.internal_deadline,
        task.external_client_deadline,
        now
    )


def duration_score(estimated_duration: Optional[str]) -> int:
    """Inverted duration lookup - quick wins score higher. Unknown codes get 50."""
    return DURATION_SCORES.get(estimated_duration, DEFAULT_DURATION_SCORE)


def calculate_priority_score(task: Task, now: Optional[datetime] = None) -> int:
    """
    Calculate the overall priority score (0-100).

    Used only for sorting (descending = higher priority).

    score = urgency*0.30 + importance*0.30 + deadline pressure*0.30 + duration*0.10
    """
    pressure = task_deadline_pressure(task, now)

    # Normalize levels to 0-100
    urgency_score = task.urgency_level / 5 * 100
    importance_score = task.importance_level / 5 * 100

    score = (
        urgency_score * WEIGHTS["urgency"] +
        importance_score * WEIGHTS["importance"] +
        pressure.score * WEIGHTS["deadline"] +
        duration_score(task.estimated_duration) * WEIGHTS["duration"]
    )

    # Round half up
    return int(math.floor(score + 0.5))
