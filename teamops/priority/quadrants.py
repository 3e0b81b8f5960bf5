"""
Quadrant classification (Eisenhower-style grid).

Urgency and importance levels of 4 or more count as "high".
"""

from datetime import datetime
from typing import Dict, Iterable, Optional
from teamops.priority.models import Task, TaskStatus, Quadrant
from teamops.priority.scoring import calculate_priority_score, utc_now

URGENT_THRESHOLD = 3.5
IMPORTANT_THRESHOLD = 3.5


def classify_quadrant(urgency_level: int, importance_level: int) -> Quadrant:
    """Map urgency/importance levels to a quadrant."""
    is_urgent = urgency_level >= URGENT_THRESHOLD
    is_important = importance_level >= IMPORTANT_THRESHOLD

    if is_urgent and is_important:
        return Quadrant.DO_NOW
    if is_important:
        return Quadrant.SCHEDULE
    if is_urgent:
        return Quadrant.DELEGATE
    return Quadrant.ELIMINATE


def get_task_quadrant(task: Task) -> Quadrant:
    """Determine which quadrant a task belongs to."""
    return classify_quadrant(task.urgency_level, task.importance_level)


def group_tasks_by_quadrant(
    tasks: Iterable[Task],
    now: Optional[datetime] = None
) -> Dict[Quadrant, list[Task]]:
    """
    Group open tasks by quadrant for the grid view.

    Completed tasks are skipped. Each bucket is sorted by priority score,
    highest first; equal scores keep their input order.
    """
    if now is None:
        now = utc_now()

    grouped: Dict[Quadrant, list[Task]] = {quadrant: [] for quadrant in Quadrant}
    scores = {}

    for task in tasks:
        if task.status == TaskStatus.DONE:
            continue
        grouped[get_task_quadrant(task)].append(task)
        scores[id(task)] = calculate_priority_score(task, now)

    for bucket in grouped.values():
        bucket.sort(key=lambda t: scores[id(t)], reverse=True)

    return grouped
