"""
Task triage - Derived fields computed whenever a task is created or edited.

Combines the immediate flag, the assignment recommendation and, for
unowned tasks, an owner suggestion.
"""

import logging
from datetime import datetime
from typing import Iterable, Optional
from teamops.delegation.models import Member
from teamops.delegation.selector import suggest_owner
from teamops.priority.models import Task, TriageResult
from teamops.priority.recommendation import get_assignment_recommendation
from teamops.priority.rules import should_flag_immediate
from teamops.priority.scoring import calculate_priority_score, task_deadline_pressure, utc_now

logger = logging.getLogger(__name__)


def triage_task(
    task: Task,
    members: Optional[Iterable[Member]] = None,
    now: Optional[datetime] = None
) -> TriageResult:
    """
    Compute the fields to store for a task.

    An owner is only suggested when the task has none yet, carries skill
    tags and a roster is supplied.

    Args:
        task: Task snapshot
        members: Roster snapshot for owner suggestion
        now: Reference time

    Returns:
        TriageResult with flag, staffing recommendation and suggested owner
    """
    if now is None:
        now = utc_now()

    flag = should_flag_immediate(task, now)
    recommendation = get_assignment_recommendation(task, now)
    pressure = task_deadline_pressure(task, now)

    factors = {
        "priority_score": calculate_priority_score(task, now),
        "deadline_pressure": pressure.score,
        "days_remaining": pressure.days_remaining,
        "is_client_deadline": pressure.is_client_deadline,
        "urgency_level": task.urgency_level,
        "importance_level": task.importance_level,
        "complexity_level": task.complexity_level,
    }

    owner_id = None
    confidence = None
    if not task.owner_id and task.skill_tags and members is not None:
        suggestion = suggest_owner(task, members, recommendation)
        if suggestion:
            owner_id = suggestion.member_id
            confidence = suggestion.confidence
            factors["owner_reason"] = suggestion.reason

    if flag.flag:
        logger.info(f"Task {task.id or task.title!r} flagged for immediate attention: {flag.reason}")

    return TriageResult(
        flagged_immediate=flag.flag,
        flag_reason=flag.reason,
        requires_multi_hand=recommendation.requires_multi_hand,
        recommended_cadence=recommendation.suggested_cadence,
        recommended_plan=list(recommendation.suggested_plan),
        recommendation=recommendation,
        recommended_owner_id=owner_id,
        assignment_confidence=confidence,
        factors=factors
    )
