"""
Task list views.

Enriches tasks with computed fields, filters them into named views and
builds the quadrant grid.
"""

from datetime import datetime
from typing import Iterable, Optional, Union
from teamops.priority.models import (
    Task, TaskStatus, TaskView, Quadrant,
    ComputedFields, EnrichedTask, GridStats, GridView,
)
from teamops.priority.quadrants import get_task_quadrant
from teamops.priority.recommendation import get_assignment_recommendation
from teamops.priority.rules import should_flag_immediate, is_overdue
from teamops.priority.scoring import calculate_priority_score, task_deadline_pressure, utc_now

DUE_SOON_DAYS = 2


def enrich_task(task: Task, now: Optional[datetime] = None) -> EnrichedTask:
    """Attach priority score, quadrant, pressure and flag to a task."""
    if now is None:
        now = utc_now()

    pressure = task_deadline_pressure(task, now)
    flag = should_flag_immediate(task, now)

    return EnrichedTask(
        task=task,
        computed=ComputedFields(
            priority_score=calculate_priority_score(task, now),
            quadrant=get_task_quadrant(task),
            deadline_pressure=pressure.score,
            days_remaining=pressure.days_remaining,
            is_client_deadline=pressure.is_client_deadline,
            flagged_immediate=flag.flag,
            flag_reason=flag.reason,
        )
    )


def _is_open(task: Task) -> bool:
    return task.status != TaskStatus.DONE


def _matches_view(task: Task, view: TaskView, now: datetime) -> bool:
    if view == TaskView.BLOCKED:
        return task.status == TaskStatus.BLOCKED

    if view == TaskView.URGENT:
        if task.status == TaskStatus.BLOCKED:
            return True
        if not _is_open(task):
            return False
        pressure = task_deadline_pressure(task, now)
        due_soon = pressure.days_remaining is not None and pressure.days_remaining <= DUE_SOON_DAYS
        return task.urgency_level >= 4 or due_soon

    if not _is_open(task):
        return False

    if view == TaskView.OVERDUE:
        return is_overdue(task_deadline_pressure(task, now))
    if view == TaskView.FLAGGED:
        return should_flag_immediate(task, now).flag
    if view == TaskView.MULTI_HAND:
        return get_assignment_recommendation(task, now).requires_multi_hand
    return True


def filter_tasks(
    tasks: Iterable[Task],
    view: Union[TaskView, str, None] = None,
    now: Optional[datetime] = None
) -> list[Task]:
    """
    Keep the tasks belonging to a named view.

    Unknown view names fall back to all tasks.
    """
    if now is None:
        now = utc_now()

    try:
        view = TaskView(view) if view is not None else TaskView.ALL
    except ValueError:
        view = TaskView.ALL

    if view == TaskView.ALL:
        return list(tasks)
    return [task for task in tasks if _matches_view(task, view, now)]


def list_tasks(
    tasks: Iterable[Task],
    view: Union[TaskView, str, None] = None,
    now: Optional[datetime] = None
) -> list[EnrichedTask]:
    """Enriched tasks for a view, highest priority score first."""
    if now is None:
        now = utc_now()

    enriched = [enrich_task(task, now) for task in filter_tasks(tasks, view, now)]
    enriched.sort(key=lambda e: e.computed.priority_score, reverse=True)
    return enriched


def build_grid(tasks: Iterable[Task], now: Optional[datetime] = None) -> GridView:
    """
    Quadrant grid of open tasks with summary counts.

    Completed tasks are left out; each quadrant is sorted by priority score.
    """
    if now is None:
        now = utc_now()

    open_tasks = [task for task in tasks if _is_open(task)]
    enriched = list_tasks(open_tasks, TaskView.ALL, now)

    quadrants = {quadrant: [] for quadrant in Quadrant}
    for item in enriched:
        quadrants[item.computed.quadrant].append(item)

    stats = GridStats(
        total=len(enriched),
        do_now=len(quadrants[Quadrant.DO_NOW]),
        schedule=len(quadrants[Quadrant.SCHEDULE]),
        delegate=len(quadrants[Quadrant.DELEGATE]),
        eliminate=len(quadrants[Quadrant.ELIMINATE]),
        flagged=sum(1 for item in enriched if item.computed.flagged_immediate),
        multi_hand=sum(
            1 for item in enriched
            if get_assignment_recommendation(item.task, now).requires_multi_hand
        ),
    )

    return GridView(quadrants=quadrants, stats=stats)
